"""Calcul en cascade des totaux d'une facture.

FR: Remise, retenue de garantie (R.G.), TVA et timbre sont appliqués en
    cascade : chaque étape consomme le résultat de la précédente. Le timbre
    est prélevé sur le montant TVA comprise, et non sur le total HT.
EN: Discount, guarantee holdback, VAT and stamp tax are applied as a strict
    cascade. Stamp tax is levied on the VAT-inclusive amount.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from facture_dz.errors import InvalidInputError, InvalidRateError
from facture_dz.models.invoice import (
    RATE_FIELDS,
    BillingSummary,
    LineItem,
    RateConfig,
)

logger = logging.getLogger(__name__)

_RATE_LABELS: dict[str, str] = {
    "discount_rate": "remise",
    "refund_rate": "retenue de garantie",
    "vat_rate": "TVA",
    "stamp_tax_rate": "timbre",
}


def validate_items(items: Sequence[LineItem]) -> list[str]:
    """Valide les lignes de facture. Retourne la liste des erreurs."""
    errors: list[str] = []
    for item in items:
        if item.quantity < 0:
            errors.append(f"Ligne {item.id} : quantité négative ({item.quantity})")
        if item.unit_price < 0:
            errors.append(
                f"Ligne {item.id} : prix unitaire négatif ({item.unit_price})"
            )
        if item.amount < 0:
            errors.append(f"Ligne {item.id} : montant négatif ({item.amount})")
    return errors


def validate_rates(rates: RateConfig) -> list[str]:
    """Valide les taux (chacun dans [0, 1)). Retourne la liste des erreurs."""
    errors: list[str] = []
    for name in RATE_FIELDS:
        value: Decimal = getattr(rates, name)
        if not Decimal("0") <= value < Decimal("1"):
            errors.append(
                f"Taux de {_RATE_LABELS[name]} hors de l'intervalle [0, 1) : {value}"
            )
    return errors


def compute_billing_summary(
    items: Sequence[LineItem], rates: RateConfig | None = None
) -> BillingSummary:
    """Calcule le récapitulatif de facturation.

    FR: Valide toutes les entrées avant de calculer. Aucun arrondi n'est
        appliqué ; deux appels avec les mêmes entrées donnent un résultat
        identique.
    EN: Validates every input before computing. No rounding is applied;
        identical inputs always yield identical output.

    Args:
        items: Les lignes de facture, dans l'ordre d'impression.
        rates: Les taux applicables (TVA 19 % seule par défaut).

    Returns:
        Le récapitulatif BillingSummary.

    Raises:
        InvalidInputError: Si une ligne porte une valeur négative.
        InvalidRateError: Si un taux est hors de [0, 1).
    """
    if rates is None:
        rates = RateConfig()

    item_errors = validate_items(items)
    if item_errors:
        raise InvalidInputError(item_errors[0], errors=item_errors)
    rate_errors = validate_rates(rates)
    if rate_errors:
        raise InvalidRateError(rate_errors[0], errors=rate_errors)

    gross_total = sum((item.amount for item in items), Decimal("0"))
    discount = gross_total * rates.discount_rate
    net_after_discount = gross_total - discount
    refund = net_after_discount * rates.refund_rate
    total_ht = net_after_discount - refund
    vat = total_ht * rates.vat_rate
    # Le timbre porte sur le montant TVA comprise
    stamp_tax = (total_ht + vat) * rates.stamp_tax_rate
    total_ttc = total_ht + vat + stamp_tax

    logger.debug(
        "Récapitulatif calculé sur %d ligne(s) : HT=%s TTC=%s",
        len(items),
        total_ht,
        total_ttc,
    )

    return BillingSummary(
        gross_total=gross_total,
        discount=discount,
        net_after_discount=net_after_discount,
        refund=refund,
        total_ht=total_ht,
        vat=vat,
        stamp_tax=stamp_tax,
        total_ttc=total_ttc,
    )

"""Modèles des lignes de facture, des taux et du récapitulatif.

FR: Modèles Pydantic immuables consommés et produits par le moteur de calcul.
    Les montants et les taux sont des ``Decimal`` ; les taux sont des
    fractions (0.19 pour 19 %).
EN: Immutable Pydantic models consumed and produced by the billing engine.
    Amounts and rates are ``Decimal``; rates are fractions (0.19 for 19 %).
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from facture_dz.models.enums import PaymentMode

DEFAULT_VAT_RATE = Decimal("0.19")
CASH_STAMP_TAX_RATE = Decimal("0.01")

RATE_FIELDS = ("discount_rate", "refund_rate", "vat_rate", "stamp_tax_rate")


class LineItem(BaseModel):
    """Ligne de facture (article facturé).

    FR: L'ordre des lignes dans la séquence est l'ordre d'impression.
        ``amount`` fait foi : il n'est jamais recalculé par le moteur,
        afin de tolérer les corrections manuelles en amont.
    EN: Sequence order is print order. ``amount`` is authoritative and
        never recomputed, to tolerate manual overrides upstream.
    """

    model_config = ConfigDict(frozen=True)

    id: str | int = Field(..., description="Identifiant de ligne / Line id")
    designation: str = Field(default="", description="Désignation / Label")
    quantity: int = Field(default=1, description="Quantité / Quantity")
    unit_price: Decimal = Field(
        default=Decimal("0"),
        description="Prix unitaire HT / Unit price excl. tax",
    )
    amount: Decimal = Field(
        ...,
        description="Montant de la ligne (fait foi) / Line amount (authoritative)",
    )

    @classmethod
    def from_quantity(
        cls,
        id: str | int,
        designation: str,
        quantity: int,
        unit_price: Decimal,
    ) -> "LineItem":
        """Construit une ligne dont le montant vaut quantité × prix unitaire."""
        return cls(
            id=id,
            designation=designation,
            quantity=quantity,
            unit_price=unit_price,
            amount=quantity * unit_price,
        )


class RateConfig(BaseModel):
    """Taux applicables à une facture.

    FR: Quatre taux indépendants, chacun dans [0, 1). Un taux nul signifie
        « non applicable » pour l'affichage, mais le calcul s'exécute
        toujours. Les bornes sont contrôlées par le calculateur, qui lève
        ``InvalidRateError``.
    EN: Four independent rates, each in [0, 1). A zero rate means
        "not applicable" for display; the arithmetic always runs.
    """

    model_config = ConfigDict(frozen=True)

    discount_rate: Decimal = Field(
        default=Decimal("0"),
        description="Remise / Discount rate",
    )
    refund_rate: Decimal = Field(
        default=Decimal("0"),
        description="Retenue de garantie (R.G.) / Guarantee holdback rate",
    )
    vat_rate: Decimal = Field(
        default=DEFAULT_VAT_RATE,
        description="TVA / VAT rate",
    )
    stamp_tax_rate: Decimal = Field(
        default=Decimal("0"),
        description="Droit de timbre / Stamp tax rate",
    )

    def is_applicable(self, name: str) -> bool:
        """Indique si la ligne du taux ``name`` doit être affichée."""
        if name not in RATE_FIELDS:
            msg = f"Taux inconnu : {name!r}"
            raise KeyError(msg)
        return getattr(self, name) != 0

    @classmethod
    def for_payment_mode(
        cls, mode: PaymentMode, **rates: Decimal
    ) -> "RateConfig":
        """Construit une configuration dont le timbre dépend du mode de règlement.

        FR: 1 % pour les règlements en espèces, 0 sinon.
        EN: 1 % for cash settlements, 0 otherwise.
        """
        rates["stamp_tax_rate"] = stamp_tax_rate_for(mode)
        return cls(**rates)


def stamp_tax_rate_for(mode: PaymentMode) -> Decimal:
    """Taux de timbre applicable au mode de règlement / Stamp tax for a mode."""
    return CASH_STAMP_TAX_RATE if mode.is_cash else Decimal("0")


class BillingSummary(BaseModel):
    """Récapitulatif de facturation.

    FR: Chaque champ est dérivé des lignes et des taux par
        ``compute_billing_summary`` ; aucun n'est arrondi (l'arrondi à deux
        décimales relève de l'affichage).
    EN: Every field is derived by ``compute_billing_summary``; none is
        rounded (two-decimal rounding is a display concern).
    """

    model_config = ConfigDict(frozen=True)

    gross_total: Decimal = Field(..., description="Total brut / Gross total")
    discount: Decimal = Field(..., description="Remise / Discount")
    net_after_discount: Decimal = Field(
        ..., description="Net après remise / Net after discount"
    )
    refund: Decimal = Field(..., description="Retenue de garantie / Holdback")
    total_ht: Decimal = Field(..., description="Total HT / Total excl. tax")
    vat: Decimal = Field(..., description="TVA / VAT")
    stamp_tax: Decimal = Field(..., description="Timbre / Stamp tax")
    total_ttc: Decimal = Field(..., description="Total TTC / Total incl. tax")

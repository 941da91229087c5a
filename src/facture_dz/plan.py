"""Plan d'impression d'une facture.

FR: Point d'entrée de la couche de présentation : calcule le récapitulatif,
    le montant en lettres du total TTC et la répartition des lignes en pages.
EN: Presentation layer entry point: computes the summary, the amount in
    words of the tax-inclusive total and the page plan.
"""

from collections.abc import Sequence

from facture_dz.billing.calculator import compute_billing_summary
from facture_dz.billing.words import amount_to_words
from facture_dz.models.enums import Currency, DocumentType
from facture_dz.models.invoice import LineItem, RateConfig
from facture_dz.models.page import PrintPlan
from facture_dz.pagination.base import BasePaginator
from facture_dz.pagination.layouts import get_paginator


def plan_invoice(
    items: Sequence[LineItem],
    rates: RateConfig | None = None,
    document_type: DocumentType = DocumentType.INVOICE,
    paginator: BasePaginator | None = None,
    currency: Currency = Currency.DZD,
) -> PrintPlan:
    """Construit le plan d'impression complet d'un document.

    Args:
        items: Les lignes, dans l'ordre d'impression.
        rates: Les taux applicables (TVA 19 % seule par défaut).
        document_type: Type de document, qui détermine la mise en page.
        paginator: Paginateur explicite, prioritaire sur ``document_type``.
        currency: Devise utilisée pour le montant en lettres.

    Returns:
        Le PrintPlan (récapitulatif, montant en lettres, pages).
    """
    summary = compute_billing_summary(items, rates)
    if paginator is None:
        paginator = get_paginator(document_type)
    return PrintPlan(
        summary=summary,
        amount_in_words=amount_to_words(summary.total_ttc, currency),
        pages=paginator.paginate(items),
    )

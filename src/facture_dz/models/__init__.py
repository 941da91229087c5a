"""Modèles de données Pydantic du moteur de facturation."""

from facture_dz.models.enums import Currency, DocumentType, PaymentMode
from facture_dz.models.invoice import (
    BillingSummary,
    LineItem,
    RateConfig,
    stamp_tax_rate_for,
)
from facture_dz.models.page import Page, PrintPlan

__all__ = [
    "BillingSummary",
    "Currency",
    "DocumentType",
    "LineItem",
    "Page",
    "PaymentMode",
    "PrintPlan",
    "RateConfig",
    "stamp_tax_rate_for",
]

"""Calcul des totaux et pagination d'impression des factures.

FR: Moteur pur et sans état : récapitulatif en cascade (remise, R.G., TVA,
    timbre), montant en lettres et répartition des lignes en pages.
EN: Pure, stateless engine: cascading billing summary, amount in words and
    print pagination.
"""

from facture_dz.billing import amount_to_words, compute_billing_summary
from facture_dz.errors import (
    FactureError,
    InvalidCapacityError,
    InvalidInputError,
    InvalidRateError,
)
from facture_dz.models import BillingSummary, LineItem, Page, PrintPlan, RateConfig
from facture_dz.pagination import paginate
from facture_dz.plan import plan_invoice

__version__ = "0.1.0"

__all__ = [
    "BillingSummary",
    "FactureError",
    "InvalidCapacityError",
    "InvalidInputError",
    "InvalidRateError",
    "LineItem",
    "Page",
    "PrintPlan",
    "RateConfig",
    "amount_to_words",
    "compute_billing_summary",
    "paginate",
    "plan_invoice",
]

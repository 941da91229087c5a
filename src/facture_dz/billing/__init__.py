"""Calcul des totaux de facture et montant en lettres.

FR: Calculateur en cascade (remise, R.G., TVA, timbre), écriture du total
    en lettres et formatage d'affichage des montants.
EN: Cascading billing calculator, amount-in-words and display formatting.
"""

from facture_dz.billing.calculator import (
    compute_billing_summary,
    validate_items,
    validate_rates,
)
from facture_dz.billing.formatting import format_amount, format_rate, round_amount
from facture_dz.billing.words import amount_to_words, split_amount, spell_number

__all__ = [
    "amount_to_words",
    "compute_billing_summary",
    "format_amount",
    "format_rate",
    "round_amount",
    "spell_number",
    "split_amount",
    "validate_items",
    "validate_rates",
]

"""Formatage d'affichage des montants et des taux (fr-FR)."""

from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")

# Séparateur de milliers fr-FR (espace fine insécable)
NARROW_NBSP = "\u202f"

_FR_SEPARATORS = str.maketrans({",": NARROW_NBSP, ".": ","})


def round_amount(value: Decimal | int | float | str) -> Decimal:
    """Arrondit un montant à deux décimales (demi vers le haut)."""
    return Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal | int | float | str) -> str:
    """Formate un montant à deux décimales : ``1234.5`` → ``"1 234,50"``."""
    rounded = round_amount(value)
    sign = "-" if rounded < 0 else ""
    return sign + f"{abs(rounded):,.2f}".translate(_FR_SEPARATORS)


def format_rate(rate: Decimal | int | float | str) -> str:
    """Formate un taux en pourcentage : ``0.19`` → ``"19 %"``."""
    percent = (Decimal(str(rate)) * 100).normalize()
    return f"{percent:f}".replace(".", ",") + f"{NARROW_NBSP}%"

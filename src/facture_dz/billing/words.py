"""Montant en lettres pour la mention légale du total.

FR: « mille deux cent trente-quatre dinars Algériens et cinquante-six
    centimes ». La partie entière est tronquée, les centimes arrondis.
EN: Spells an amount out in French. The major part is floored, the minor
    part rounded, so centimes are never systematically understated.
"""

from decimal import ROUND_HALF_UP, Decimal

from num2words import num2words

from facture_dz.errors import InvalidInputError
from facture_dz.models.enums import Currency

_ZERO_WORD = "zéro"


def split_amount(amount: Decimal | int | float | str) -> tuple[int, int]:
    """Sépare un montant en (unités, centimes).

    FR: Les centimes sont arrondis au plus proche (demi vers le haut) ;
        un arrondi à 100 centimes est reporté sur les unités.
    EN: Centimes are rounded half-up; rounding to 100 carries over.

    Raises:
        InvalidInputError: Si le montant est négatif ou non fini.
    """
    value = Decimal(str(amount))
    if not value.is_finite() or value < 0:
        msg = f"Montant invalide pour l'écriture en lettres : {amount}"
        raise InvalidInputError(msg)

    major = int(value)
    minor = int(((value - major) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if minor == 100:
        major, minor = major + 1, 0
    return major, minor


def spell_number(number: int) -> str:
    """Écrit un entier positif ou nul en lettres (français).

    Raises:
        InvalidInputError: Si le nombre est négatif.
    """
    if number < 0:
        msg = f"Nombre négatif non écrit en lettres : {number}"
        raise InvalidInputError(msg)
    if number == 0:
        return _ZERO_WORD
    return num2words(number, lang="fr")


def amount_to_words(
    amount: Decimal | int | float | str, currency: Currency = Currency.DZD
) -> str:
    """Retourne le montant en lettres selon le gabarit légal.

    Args:
        amount: Le montant (généralement le total TTC), positif ou nul.
        currency: La devise dont on utilise les libellés d'unités.

    Returns:
        La phrase « {unités} {devise} et {centimes} {subdivision} ».
    """
    major, minor = split_amount(amount)
    return (
        f"{spell_number(major)} {currency.major_unit} "
        f"et {spell_number(minor)} {currency.minor_unit}"
    )

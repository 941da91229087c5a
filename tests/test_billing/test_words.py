"""Tests pour l'écriture du montant en lettres."""

from decimal import Decimal

import pytest

from facture_dz.billing.words import amount_to_words, split_amount, spell_number
from facture_dz.errors import InvalidInputError


class TestSplitAmount:
    """Séparation en unités et centimes."""

    def test_integer(self) -> None:
        assert split_amount(Decimal("714")) == (714, 0)

    def test_centimes(self) -> None:
        assert split_amount(Decimal("1234.56")) == (1234, 56)

    def test_centimes_are_rounded_not_floored(self) -> None:
        assert split_amount(Decimal("10.129")) == (10, 13)
        assert split_amount(Decimal("10.125")) == (10, 13)
        assert split_amount(Decimal("10.124")) == (10, 12)

    def test_float_input(self) -> None:
        # 0.29 n'est pas représentable exactement en binaire
        assert split_amount(0.29) == (0, 29)

    def test_rounding_carries_into_major(self) -> None:
        assert split_amount(Decimal("9.999")) == (10, 0)

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="Montant invalide"):
            split_amount(Decimal("-0.01"))

    def test_nan_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            split_amount(Decimal("NaN"))


class TestSpellNumber:
    """Écriture des nombres entiers en français."""

    def test_zero(self) -> None:
        assert spell_number(0) == "zéro"

    def test_compound(self) -> None:
        assert spell_number(1234) == "mille deux cent trente-quatre"

    def test_tens(self) -> None:
        assert spell_number(56) == "cinquante-six"

    @pytest.mark.parametrize("number", [-1, -3, -1000])
    def test_negative_raises(self, number: int) -> None:
        with pytest.raises(InvalidInputError, match="Nombre négatif"):
            spell_number(number)


class TestAmountToWords:
    """Gabarit légal du montant en lettres."""

    def test_example(self) -> None:
        assert amount_to_words(Decimal("1234.56")) == (
            "mille deux cent trente-quatre dinars Algériens "
            "et cinquante-six centimes"
        )

    def test_zero(self) -> None:
        assert amount_to_words(Decimal("0")) == (
            "zéro dinars Algériens et zéro centimes"
        )

    def test_whole_amount(self) -> None:
        assert amount_to_words(Decimal("714")) == (
            "sept cent quatorze dinars Algériens et zéro centimes"
        )

    def test_only_centimes(self) -> None:
        words = amount_to_words(Decimal("0.56"))
        assert words.startswith("zéro dinars Algériens et ")
        assert "cinquante-six" in words

    @pytest.mark.parametrize(
        "amount",
        ["0", "0.01", "1", "19.99", "100", "642.6", "100000", "1000000.5", "9999999.99"],
    )
    def test_totality(self, amount: str) -> None:
        words = amount_to_words(Decimal(amount))
        major, _, minor = words.partition(" et ")
        assert major.endswith("dinars Algériens")
        assert minor.endswith("centimes")
        assert major.removesuffix("dinars Algériens").strip()
        assert minor.removesuffix("centimes").strip()

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            amount_to_words(Decimal("-1"))

"""Fixtures partagées : fabrique de lignes de facture."""

from collections.abc import Callable
from decimal import Decimal

import pytest

from facture_dz.models.invoice import LineItem, RateConfig


@pytest.fixture
def make_items() -> Callable[[int], list[LineItem]]:
    """Fabrique de ``count`` lignes numérotées, d'un montant de 10 × rang."""

    def _make(count: int) -> list[LineItem]:
        return [
            LineItem.from_quantity(
                id=f"L{rank}",
                designation=f"Article {rank}",
                quantity=1,
                unit_price=Decimal(10 * rank),
            )
            for rank in range(1, count + 1)
        ]

    return _make


@pytest.fixture
def sample_items() -> list[LineItem]:
    """Trois lignes de 100, 200 et 300."""
    return [
        LineItem(id="1", designation="Radiateur", quantity=1, unit_price=Decimal("100"), amount=Decimal("100")),
        LineItem(id="2", designation="Faisceau", quantity=2, unit_price=Decimal("100"), amount=Decimal("200")),
        LineItem(id="3", designation="Réparation", quantity=3, unit_price=Decimal("100"), amount=Decimal("300")),
    ]


@pytest.fixture
def vat_only_rates() -> RateConfig:
    """Taux par défaut : TVA 19 % seule."""
    return RateConfig()

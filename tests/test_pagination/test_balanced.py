"""Tests pour la pagination équilibrée des factures et des bons."""

import logging

import pytest

from facture_dz.errors import InvalidCapacityError
from facture_dz.models.page import Page
from facture_dz.pagination.balanced import (
    RESERVED_TAIL,
    BalancedPaginator,
    _enforce_capacity,
    chunk_evenly,
    paginate,
)


def _sizes(pages: list[Page]) -> list[int]:
    return [len(page.items) for page in pages]


class TestChunkEvenly:
    """Découpage en tranches égales à un près."""

    def test_exact_division(self) -> None:
        assert chunk_evenly(list(range(6)), 3) == [[0, 1], [2, 3], [4, 5]]

    def test_remainder_goes_to_first_chunks(self) -> None:
        chunks = chunk_evenly(list(range(10)), 3)
        assert [len(chunk) for chunk in chunks] == [4, 3, 3]
        assert chunks[0] == [0, 1, 2, 3]

    def test_zero_chunks(self) -> None:
        assert chunk_evenly([1, 2], 0) == []

    def test_more_chunks_than_items(self) -> None:
        assert [len(chunk) for chunk in chunk_evenly([1, 2], 3)] == [1, 1, 0]


class TestEnforceCapacity:
    """Passe de sécurité : redécoupage des tranches trop grandes."""

    def test_oversized_chunk_is_split(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            refined = _enforce_capacity([list(range(7)), [7]], 3)
        assert refined == [[0, 1, 2], [3, 4, 5], [6], [7]]
        assert "redécoupage" in caplog.text

    def test_chunks_within_capacity_unchanged(self) -> None:
        chunks = [[1, 2], [3]]
        assert _enforce_capacity(chunks, 2) == chunks


class TestPaginate:
    """Scénarios de pagination."""

    def test_small_invoice_single_page(self, make_items) -> None:
        items = make_items(3)
        pages = paginate(items, page_capacity=13, small_threshold=4)
        assert len(pages) == 1
        assert list(pages[0].items) == items
        assert pages[0].is_final
        assert (pages[0].index, pages[0].count) == (1, 1)

    def test_threshold_is_inclusive(self, make_items) -> None:
        assert len(paginate(make_items(4), page_capacity=13, small_threshold=4)) == 1

    def test_empty_items(self) -> None:
        pages = paginate([], page_capacity=4)
        assert len(pages) == 1
        assert pages[0].items == ()
        assert pages[0].is_final

    def test_ten_items_capacity_thirteen(self, make_items) -> None:
        items = make_items(10)
        pages = paginate(items, page_capacity=13, small_threshold=4)
        assert _sizes(pages) == [8, 2]
        assert list(pages[1].items) == items[8:]
        assert [page.is_final for page in pages] == [False, True]
        assert [page.footer for page in pages] == ["1/2", "2/2"]

    def test_balanced_main_section(self, make_items) -> None:
        # 9 lignes principales, capacité 4 : 3 pages de 3 plutôt que 4 + 4 + 1
        pages = paginate(make_items(11), page_capacity=4)
        assert _sizes(pages) == [3, 3, 3, 2]

    def test_remainder_on_first_pages(self, make_items) -> None:
        pages = paginate(make_items(12), page_capacity=4)
        assert _sizes(pages) == [4, 3, 3, 2]

    def test_lower_threshold(self, make_items) -> None:
        pages = paginate(make_items(3), page_capacity=4, small_threshold=2)
        assert _sizes(pages) == [1, 2]

    def test_threshold_equal_to_tail(self, make_items) -> None:
        pages = paginate(make_items(2), page_capacity=4, small_threshold=2)
        assert _sizes(pages) == [2]
        assert pages[0].is_final

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_invalid_capacity(self, make_items, capacity: int) -> None:
        with pytest.raises(InvalidCapacityError, match="Capacité de page invalide"):
            paginate(make_items(5), page_capacity=capacity)

    def test_invalid_capacity_on_small_input(self) -> None:
        with pytest.raises(InvalidCapacityError):
            paginate([], page_capacity=0)

    @pytest.mark.parametrize("threshold", [-1, 0, 1])
    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_threshold_below_tail(self, make_items, threshold: int, count: int) -> None:
        """Un seuil inférieur à la page réservée laisserait une page finale incomplète."""
        with pytest.raises(InvalidCapacityError, match="Seuil"):
            paginate(make_items(count), page_capacity=4, small_threshold=threshold)


class TestPaginationProperties:
    """Propriétés vérifiées sur un balayage de tailles et de capacités."""

    @pytest.mark.parametrize("capacity", [1, 2, 3, 4, 13])
    @pytest.mark.parametrize("count", [0, 1, 2, 4, 5, 6, 9, 14, 15, 27, 53])
    @pytest.mark.parametrize("threshold", [2, 4])
    def test_properties(self, make_items, capacity: int, count: int, threshold: int) -> None:
        items = make_items(count)
        pages = paginate(items, page_capacity=capacity, small_threshold=threshold)

        # Couverture : ni perte, ni doublon, ni réordonnancement
        assert [item for page in pages for item in page.items] == items

        # Numérotation et page finale
        assert [page.index for page in pages] == list(range(1, len(pages) + 1))
        assert all(page.count == len(pages) for page in pages)
        assert [page.is_final for page in pages] == [False] * (len(pages) - 1) + [True]

        if count <= threshold:
            assert len(pages) == 1
            return

        # Page finale réservée
        assert len(pages[-1].items) == RESERVED_TAIL

        main_sizes = _sizes(pages[:-1])
        if main_sizes:
            assert max(main_sizes) - min(main_sizes) <= 1
            assert max(main_sizes) <= capacity


class TestBalancedPaginator:
    def test_delegates_to_paginate(self, make_items) -> None:
        items = make_items(10)
        paginator = BalancedPaginator(page_capacity=13)
        assert paginator.paginate(items) == paginate(items, 13, 4)

    def test_invalid_capacity(self) -> None:
        with pytest.raises(InvalidCapacityError):
            BalancedPaginator(page_capacity=0)

    @pytest.mark.parametrize("threshold", [0, 1])
    def test_threshold_below_tail_rejected_at_construction(self, threshold: int) -> None:
        with pytest.raises(InvalidCapacityError, match="Seuil"):
            BalancedPaginator(page_capacity=4, small_threshold=threshold)

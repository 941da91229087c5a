"""Pagination équilibrée des factures et des bons.

FR: Au-delà d'un petit seuil, les deux dernières lignes sont réservées à une
    page finale (place garantie pour le récapitulatif), et les autres sont
    réparties en pages de tailles égales à une ligne près, plutôt que de
    remplir chaque page et de laisser une dernière page presque vide.
EN: Above a small threshold, the last two items are reserved for a final
    page and the others are spread over evenly sized pages.
"""

import logging
import math
from collections.abc import Sequence
from typing import TypeVar

from facture_dz.errors import InvalidCapacityError
from facture_dz.models.invoice import LineItem
from facture_dz.models.page import Page
from facture_dz.pagination.base import BasePaginator, build_pages

logger = logging.getLogger(__name__)

T = TypeVar("T")

SMALL_THRESHOLD = 4
"""Nombre de lignes tenant sur une page unique avec le récapitulatif."""

RESERVED_TAIL = 2
"""Nombre de lignes réservées à la page finale."""


def chunk_evenly(items: Sequence[T], count: int) -> list[Sequence[T]]:
    """Découpe ``items`` en ``count`` tranches de tailles égales à un près.

    FR: Les premières tranches absorbent le reste de la division.
    EN: The first chunks absorb the remainder.
    """
    if count <= 0:
        return []
    base, remainder = divmod(len(items), count)
    chunks: list[Sequence[T]] = []
    start = 0
    for position in range(count):
        size = base + (1 if position < remainder else 0)
        chunks.append(items[start : start + size])
        start += size
    return chunks


def _check_threshold(small_threshold: int) -> None:
    """Le seuil de page unique doit couvrir au moins la page finale réservée."""
    if small_threshold < RESERVED_TAIL:
        msg = (
            f"Seuil de page unique invalide : {small_threshold} "
            f"(au moins {RESERVED_TAIL} attendu)"
        )
        raise InvalidCapacityError(msg)


def _enforce_capacity(
    chunks: list[Sequence[T]], page_capacity: int
) -> list[Sequence[T]]:
    """Redécoupe en tranches fixes toute tranche dépassant la capacité."""
    refined: list[Sequence[T]] = []
    for chunk in chunks:
        if len(chunk) <= page_capacity:
            refined.append(chunk)
            continue
        logger.warning(
            "Tranche de %d lignes au-delà de la capacité (%d) : redécoupage",
            len(chunk),
            page_capacity,
        )
        refined.extend(
            chunk[start : start + page_capacity]
            for start in range(0, len(chunk), page_capacity)
        )
    return refined


def paginate(
    items: Sequence[LineItem],
    page_capacity: int,
    small_threshold: int = SMALL_THRESHOLD,
) -> list[Page]:
    """Répartit les lignes d'une facture en pages imprimées.

    Args:
        items: Les lignes, dans l'ordre d'impression.
        page_capacity: Nombre maximal de lignes par page principale.
        small_threshold: En deçà (inclus), une seule page est produite.

    Returns:
        Les pages principales équilibrées, suivies de la page finale de
        deux lignes portant le récapitulatif.

    Raises:
        InvalidCapacityError: Si la capacité est nulle ou négative, ou si
            le seuil est inférieur au nombre de lignes réservées.
    """
    if page_capacity <= 0:
        msg = f"Capacité de page invalide : {page_capacity} (entier positif attendu)"
        raise InvalidCapacityError(msg)
    _check_threshold(small_threshold)

    items = tuple(items)
    if len(items) <= small_threshold:
        return build_pages([items])

    main_section = items[:-RESERVED_TAIL]
    last_page = items[-RESERVED_TAIL:]
    num_main_pages = math.ceil(len(main_section) / page_capacity)
    main_pages = _enforce_capacity(
        chunk_evenly(main_section, num_main_pages), page_capacity
    )

    pages = build_pages([*main_pages, last_page])
    logger.debug(
        "%d ligne(s) réparties sur %d page(s) (capacité %d)",
        len(items),
        len(pages),
        page_capacity,
    )
    return pages


class BalancedPaginator(BasePaginator):
    """Paginateur équilibré des factures et des bons.

    FR: Applique ``paginate`` avec une capacité et un seuil fixés pour un
        type de document.
    EN: Applies ``paginate`` with a capacity and threshold fixed per
        document type.
    """

    def __init__(
        self, page_capacity: int, small_threshold: int = SMALL_THRESHOLD
    ) -> None:
        if page_capacity <= 0:
            msg = f"Capacité de page invalide : {page_capacity} (entier positif attendu)"
            raise InvalidCapacityError(msg)
        _check_threshold(small_threshold)
        self.page_capacity = page_capacity
        self.small_threshold = small_threshold

    def paginate(self, items: Sequence[LineItem]) -> list[Page]:
        return paginate(items, self.page_capacity, self.small_threshold)

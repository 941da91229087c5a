"""Pagination des factures proforma.

FR: Les lignes remplissent des pages de taille fixe. Si la dernière page
    compte plus de lignes que n'en tolère la page du récapitulatif, ses
    lignes excédentaires restent sur une page à part et la page finale ne
    garde que les dernières.
EN: Items fill fixed-size pages. When the last page holds more items than
    the totals page allows, it is split in two.
"""

import logging
from collections.abc import Sequence

from facture_dz.errors import InvalidCapacityError
from facture_dz.models.invoice import LineItem
from facture_dz.models.page import Page
from facture_dz.pagination.base import BasePaginator, build_pages

logger = logging.getLogger(__name__)


class ProformaPaginator(BasePaginator):
    """Paginateur à pages fixes des factures proforma."""

    def __init__(self, items_per_page: int = 4, items_per_last_page: int = 2) -> None:
        for name, value in (
            ("items_per_page", items_per_page),
            ("items_per_last_page", items_per_last_page),
        ):
            if value <= 0:
                msg = f"Capacité de page invalide ({name}) : {value}"
                raise InvalidCapacityError(msg)
        self.items_per_page = items_per_page
        self.items_per_last_page = items_per_last_page

    def paginate(self, items: Sequence[LineItem]) -> list[Page]:
        items = tuple(items)
        chunks: list[Sequence[LineItem]] = [
            items[start : start + self.items_per_page]
            for start in range(0, len(items), self.items_per_page)
        ] or [()]

        if len(chunks) > 1 and len(chunks[-1]) > self.items_per_last_page:
            last_chunk = chunks.pop()
            overflow = len(last_chunk) - self.items_per_last_page
            chunks.extend([last_chunk[:overflow], last_chunk[overflow:]])
            logger.debug(
                "Dernière page proforma scindée : %d + %d ligne(s)",
                overflow,
                self.items_per_last_page,
            )

        return build_pages(chunks)

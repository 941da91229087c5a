"""Interface abstraite pour les paginateurs d'impression."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from facture_dz.models.invoice import LineItem
from facture_dz.models.page import Page


def build_pages(chunks: Sequence[Sequence[LineItem]]) -> list[Page]:
    """Numérote les tranches et marque la dernière comme page de totaux."""
    count = len(chunks)
    return [
        Page(
            items=tuple(chunk),
            index=position,
            count=count,
            is_final=position == count,
        )
        for position, chunk in enumerate(chunks, start=1)
    ]


class BasePaginator(ABC):
    """Classe de base abstraite pour les paginateurs.

    FR: Chaque type de document imprimable (facture, bon, proforma) utilise
        un paginateur qui répartit les lignes en pages et réserve la place
        du récapitulatif sur la dernière.
    EN: Each printable document type uses a paginator that distributes items
        across pages, keeping room for the totals block on the last one.
    """

    @abstractmethod
    def paginate(self, items: Sequence[LineItem]) -> list[Page]:
        """Répartit les lignes en pages.

        Args:
            items: Les lignes, dans l'ordre d'impression.

        Returns:
            La liste ordonnée des pages ; la dernière porte ``is_final``.
        """
        ...

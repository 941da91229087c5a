"""Mises en page par type de document.

FR: Capacités de page utilisées par les documents imprimables. Facture et
    bon partagent le même seuil de page unique mais pas la même capacité.
EN: Page capacities of the printable documents.
"""

from pydantic import BaseModel, ConfigDict, Field

from facture_dz.models.enums import DocumentType
from facture_dz.pagination.balanced import SMALL_THRESHOLD, BalancedPaginator
from facture_dz.pagination.base import BasePaginator
from facture_dz.pagination.proforma import ProformaPaginator


class DocumentLayout(BaseModel):
    """Mise en page d'un document imprimable."""

    model_config = ConfigDict(frozen=True)

    page_capacity: int = Field(..., description="Lignes par page / Items per page")
    small_threshold: int = Field(
        default=SMALL_THRESHOLD,
        description="Seuil de page unique / Single-page threshold",
    )

    def paginator(self) -> BalancedPaginator:
        """Paginateur équilibré correspondant à cette mise en page."""
        return BalancedPaginator(self.page_capacity, self.small_threshold)


INVOICE_LAYOUT = DocumentLayout(page_capacity=4)
BILL_LAYOUT = DocumentLayout(page_capacity=13)

_LAYOUTS: dict[DocumentType, DocumentLayout] = {
    DocumentType.INVOICE: INVOICE_LAYOUT,
    DocumentType.BILL: BILL_LAYOUT,
}


def get_paginator(document_type: DocumentType) -> BasePaginator:
    """Retourne le paginateur d'un type de document / Paginator for a type."""
    if document_type is DocumentType.PROFORMA:
        return ProformaPaginator()
    return _LAYOUTS[document_type].paginator()

"""Pagination d'impression des documents.

FR: Répartition des lignes de facture sur des pages de capacité fixe, la
    dernière page étant réservée au récapitulatif et au montant en lettres.
EN: Distributes invoice items over fixed-capacity printed pages, the last
    page carrying the summary and the amount in words.
"""

from facture_dz.pagination.balanced import (
    RESERVED_TAIL,
    SMALL_THRESHOLD,
    BalancedPaginator,
    chunk_evenly,
    paginate,
)
from facture_dz.pagination.base import BasePaginator, build_pages
from facture_dz.pagination.layouts import (
    BILL_LAYOUT,
    INVOICE_LAYOUT,
    DocumentLayout,
    get_paginator,
)
from facture_dz.pagination.proforma import ProformaPaginator

__all__ = [
    "BILL_LAYOUT",
    "INVOICE_LAYOUT",
    "RESERVED_TAIL",
    "SMALL_THRESHOLD",
    "BalancedPaginator",
    "BasePaginator",
    "DocumentLayout",
    "ProformaPaginator",
    "build_pages",
    "chunk_evenly",
    "get_paginator",
    "paginate",
]

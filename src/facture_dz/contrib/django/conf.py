"""Configuration du moteur de facturation via settings Django.

FR: Helper pour accéder aux paramètres FACTURE_DZ définis dans settings.py.
    Fournit des valeurs par défaut, la configuration des taux et les
    mises en page par type de document.
EN: Helper for accessing FACTURE_DZ settings defined in settings.py.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from django.conf import settings

from facture_dz.models.enums import DocumentType
from facture_dz.models.invoice import DEFAULT_VAT_RATE, RateConfig
from facture_dz.pagination.balanced import BalancedPaginator
from facture_dz.pagination.base import BasePaginator
from facture_dz.pagination.layouts import DocumentLayout
from facture_dz.pagination.proforma import ProformaPaginator

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, object] = {
    "VAT_RATE": DEFAULT_VAT_RATE,
    "INVOICE_PAGE_CAPACITY": 4,
    "BILL_PAGE_CAPACITY": 13,
    "SMALL_THRESHOLD": 4,
    "PROFORMA_ITEMS_PER_PAGE": 4,
    "PROFORMA_ITEMS_PER_LAST_PAGE": 2,
}

_CAPACITY_SETTINGS: dict[DocumentType, str] = {
    DocumentType.INVOICE: "INVOICE_PAGE_CAPACITY",
    DocumentType.BILL: "BILL_PAGE_CAPACITY",
}


def get_setting(name: str) -> object:
    """Retourne la valeur d'un paramètre FACTURE_DZ.

    FR: Cherche dans settings.FACTURE_DZ[name], puis dans les défauts.
    EN: Looks up settings.FACTURE_DZ[name], then falls back to defaults.
    """
    if name not in DEFAULTS:
        msg = f"Paramètre FACTURE_DZ inconnu : {name}"
        raise KeyError(msg)
    user_settings = getattr(settings, "FACTURE_DZ", {})
    return user_settings.get(name, DEFAULTS[name])


def get_rate_config(**rates: Decimal) -> RateConfig:
    """Construit un RateConfig dont la TVA par défaut vient des settings.

    FR: Les taux passés en argument (remise, R.G., timbre, TVA) sont
        prioritaires sur le paramètre VAT_RATE.
    EN: Explicit rates take precedence over the VAT_RATE setting.
    """
    rates.setdefault("vat_rate", Decimal(str(get_setting("VAT_RATE"))))
    return RateConfig(**rates)


def get_layout(document_type: DocumentType) -> DocumentLayout:
    """Mise en page configurée d'une facture ou d'un bon.

    Raises:
        ValueError: Pour les proformas, qui n'ont pas de mise en page équilibrée.
    """
    setting = _CAPACITY_SETTINGS.get(document_type)
    if setting is None:
        msg = f"Pas de mise en page équilibrée pour le type {document_type!r}"
        raise ValueError(msg)
    return DocumentLayout(
        page_capacity=get_setting(setting),
        small_threshold=get_setting("SMALL_THRESHOLD"),
    )


def get_paginator(document_type: DocumentType) -> BasePaginator:
    """Instancie le paginateur configuré pour un type de document."""
    if document_type is DocumentType.PROFORMA:
        return ProformaPaginator(
            items_per_page=get_setting("PROFORMA_ITEMS_PER_PAGE"),
            items_per_last_page=get_setting("PROFORMA_ITEMS_PER_LAST_PAGE"),
        )
    paginator: BalancedPaginator = get_layout(document_type).paginator()
    logger.debug(
        "Paginateur %s : capacité %d, seuil %d",
        document_type,
        paginator.page_capacity,
        paginator.small_threshold,
    )
    return paginator

"""Énumérations pour la facturation et l'impression des documents.

FR: Modes de paiement, types de documents imprimables et devises,
    tels qu'utilisés par l'application de facturation.
EN: Payment modes, printable document types and currencies
    used by the invoicing application.
"""

from enum import StrEnum


class PaymentMode(StrEnum):
    """Mode de règlement d'une facture.

    FR: Les règlements en espèces sont soumis au droit de timbre (1 %).
    EN: Cash settlements are subject to stamp duty (1 %).
    """

    CASH = "Espèces"
    """Espèces / Cash"""

    DEPOSIT = "Versement"
    """Versement bancaire / Bank deposit"""

    CASH_AND_DEPOSIT = "Espèces + Versement"
    """Espèces et versement / Cash and bank deposit"""

    TRANSFER = "Virement"
    """Virement / Credit transfer"""

    CHEQUE = "Cheque"
    """Chèque / Cheque"""

    DEFERRED = "À terme"
    """Paiement à terme / Deferred payment"""

    @property
    def is_cash(self) -> bool:
        """Vrai si le règlement implique des espèces / True for cash modes."""
        return self in (PaymentMode.CASH, PaymentMode.CASH_AND_DEPOSIT)


class DocumentType(StrEnum):
    """Type de document imprimable.

    FR: Chaque type a sa propre mise en page (capacité par page).
    EN: Each document type has its own page layout (per-page capacity).
    """

    INVOICE = "invoice"
    """Facture / Invoice"""

    BILL = "bill"
    """Bon (livraison, commande) / Bill, delivery slip"""

    PROFORMA = "proforma"
    """Facture proforma / Proforma invoice"""


class Currency(StrEnum):
    """Codes devise ISO 4217 gérés pour le montant en lettres."""

    DZD = "DZD"
    """Dinar algérien / Algerian dinar"""

    @property
    def major_unit(self) -> str:
        """Libellé de l'unité principale / Major unit label."""
        return _UNIT_NAMES[self][0]

    @property
    def minor_unit(self) -> str:
        """Libellé de la subdivision / Minor unit label."""
        return _UNIT_NAMES[self][1]


_UNIT_NAMES: dict[Currency, tuple[str, str]] = {
    Currency.DZD: ("dinars Algériens", "centimes"),
}

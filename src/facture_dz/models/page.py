"""Modèles de pages imprimées et du plan d'impression.

FR: Une page porte sa tranche de lignes, son numéro (base 1) et le nombre
    total de pages ; seule la dernière affiche le récapitulatif.
EN: A page carries its slice of items, its 1-based index and the page
    count; only the last one renders the billing summary.
"""

from pydantic import BaseModel, ConfigDict, Field

from facture_dz.models.invoice import BillingSummary, LineItem


class Page(BaseModel):
    """Page imprimée d'un document."""

    model_config = ConfigDict(frozen=True)

    items: tuple[LineItem, ...] = Field(
        default=(), description="Lignes de la page / Page items"
    )
    index: int = Field(..., gt=0, description="Numéro de page / Page number")
    count: int = Field(..., gt=0, description="Nombre de pages / Page count")
    is_final: bool = Field(
        default=False,
        description=(
            "Afficher le récapitulatif après le tableau / "
            "Render totals after this page's table"
        ),
    )

    @property
    def footer(self) -> str:
        """Mention de pied de page (« 1/3 »)."""
        return f"{self.index}/{self.count}"


class PrintPlan(BaseModel):
    """Plan d'impression complet d'un document.

    FR: Récapitulatif, montant en lettres et pages, prêts pour le rendu.
    EN: Summary, amount in words and pages, ready to render.
    """

    model_config = ConfigDict(frozen=True)

    summary: BillingSummary
    amount_in_words: str
    pages: list[Page]

    @property
    def final_page(self) -> Page:
        """Page portant le récapitulatif / Page carrying the totals."""
        return self.pages[-1]

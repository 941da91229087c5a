"""Point d'entrée CLI pour facture-dz.

FR: ``facture-plan FICHIER.json`` affiche la répartition en pages et le
    récapitulatif d'une facture décrite en JSON :
    ``{"items": [...], "rates": {...}, "payment_mode": "Espèces"}``.
EN: Prints the page plan and billing summary of a JSON-described invoice.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from facture_dz.billing.formatting import format_amount, format_rate
from facture_dz.errors import FactureError
from facture_dz.models.enums import DocumentType, PaymentMode
from facture_dz.models.invoice import LineItem, RateConfig, stamp_tax_rate_for
from facture_dz.models.page import PrintPlan
from facture_dz.plan import plan_invoice

logger = logging.getLogger(__name__)


class InvoiceDocument(BaseModel):
    """Document JSON lu par la CLI."""

    items: list[LineItem] = Field(default_factory=list)
    rates: RateConfig = Field(default_factory=RateConfig)
    payment_mode: PaymentMode | None = None


def load_document(path: Path) -> InvoiceDocument:
    """Lit et valide le document JSON d'une facture."""
    return InvoiceDocument.model_validate_json(path.read_text(encoding="utf-8"))


def render_plan(plan: PrintPlan, rates: RateConfig) -> str:
    """Rend le plan d'impression sous forme de texte."""
    lines: list[str] = []
    for page in plan.pages:
        lines.append(f"Page {page.footer} : {len(page.items)} ligne(s)")
        for item in page.items:
            lines.append(
                f"  {item.id!s:<6} {item.designation:<30} "
                f"{item.quantity:>5} {format_amount(item.amount):>14}"
            )

    summary = plan.summary
    rows: list[tuple[str, object]] = [("Total brut", summary.gross_total)]
    if rates.is_applicable("discount_rate"):
        rows.append((f"Remise ({format_rate(rates.discount_rate)})", summary.discount))
    if rates.is_applicable("refund_rate"):
        rows.append((f"R.G. ({format_rate(rates.refund_rate)})", summary.refund))
    rows.append(("Total HT", summary.total_ht))
    if rates.is_applicable("vat_rate"):
        rows.append((f"TVA ({format_rate(rates.vat_rate)})", summary.vat))
    if rates.is_applicable("stamp_tax_rate"):
        rows.append((f"Timbre ({format_rate(rates.stamp_tax_rate)})", summary.stamp_tax))
    rows.append(("Total TTC", summary.total_ttc))

    lines.append("")
    lines.extend(f"{label:<20} {format_amount(value):>14}" for label, value in rows)
    lines.append("")
    lines.append(
        f"Arrêtée la présente facture à la somme de : {plan.amount_in_words}"
    )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="facture-plan",
        description="Récapitulatif et pagination d'impression d'une facture",
    )
    parser.add_argument("path", type=Path, help="Fichier JSON de la facture")
    parser.add_argument(
        "--document-type",
        type=DocumentType,
        choices=list(DocumentType),
        default=DocumentType.INVOICE,
        help="Type de document (détermine la mise en page)",
    )
    parser.add_argument(
        "--payment-mode",
        type=PaymentMode,
        choices=list(PaymentMode),
        default=None,
        help="Mode de règlement (détermine le timbre)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Point d'entrée pour la commande `facture-plan`."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        document = load_document(args.path)
    except (OSError, ValidationError) as exc:
        print(f"facture-plan : lecture impossible de {args.path} : {exc}", file=sys.stderr)
        return 1

    rates = document.rates
    payment_mode = args.payment_mode or document.payment_mode
    if payment_mode is not None:
        rates = rates.model_copy(
            update={"stamp_tax_rate": stamp_tax_rate_for(payment_mode)}
        )

    try:
        plan = plan_invoice(document.items, rates, document_type=args.document_type)
    except FactureError as exc:
        logger.debug("Erreurs de validation : %s", exc.errors)
        print(f"facture-plan : {exc}", file=sys.stderr)
        return 1

    print(render_plan(plan, rates))
    return 0

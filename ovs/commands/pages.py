"""Komenda: ovs pages — podgląd stron wczytanego dokumentu."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from data_model.documents import Document
from pdf.text_views import make_preview

console = Console()


def _show_table(doc: Document) -> None:
    if not doc.pages:
        console.print("[yellow]Dokument nie ma stron.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("STRONA", justify="right", no_wrap=True, style="bold cyan")
    table.add_column("ZNAKI",  justify="right", no_wrap=True)
    table.add_column("CYFRY",  justify="right", no_wrap=True)
    table.add_column("POCZĄTEK", no_wrap=False, max_width=60)

    for n, (text, digits) in enumerate(zip(doc.pages, doc.page_digits), 1):
        table.add_row(str(n), str(len(text)), str(len(digits)), make_preview(text.strip()))

    console.print()
    console.print(table)
    console.print(
        f"  [dim]{doc.page_count} stron, {len(doc.full_text)} znaków tekstu, "
        f"{sum(len(d) for d in doc.page_digits)} cyfr[/dim]\n"
    )


def run(args: argparse.Namespace) -> None:
    from pdf.reader import DocumentReadError, load_document

    try:
        doc = load_document(args.document)
    except DocumentReadError as e:
        console.print(f"[red]Błąd wczytywania:[/red] {e.path}: {e.reason}")
        raise SystemExit(1)

    console.print(f"Dokument [bold]{doc.display_name}[/bold]")
    _show_table(doc)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "pages",
        help="Pokazuje tekst wyciągnięty ze stron dokumentu (liczba znaków i cyfr).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje dokument tak samo jak `ovs compare` i pokazuje tabelę stron:
liczbę znaków, liczbę cyfr i początek tekstu. Przydatne do sprawdzenia,
czy PDF ma warstwę tekstową.

Przykłady:
  ovs pages dokument.pdf
  ovs pages wyciag.txt
        """,
    )
    p.add_argument(
        "document",
        metavar="PLIK",
        help="Ścieżka do dokumentu (.pdf lub .txt).",
    )
    p.set_defaults(func=run)

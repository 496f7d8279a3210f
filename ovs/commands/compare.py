"""Komenda: ovs compare — wspólne fragmenty tekstu i cyfr w parach dokumentów."""

from __future__ import annotations

import argparse
import csv
import json
import os
import time
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box

from data_model.matches import Match, MatchKind
from overlap.types import DEFAULT_DIGIT_MIN_LEN, DEFAULT_MIN_LEN, BatchResult

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Konfiguracja
# ---------------------------------------------------------------------------

def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def parse_filename_string(s: str) -> list[str]:
    """
    Dzieli listę plików w składni CSV na ścieżki.

      'data/file1.pdf,"data folder/file2.pdf"'
        -> ['data/file1.pdf', 'data folder/file2.pdf']

    Niedomknięty cudzysłów itp. → ValueError.
    """
    reader = csv.reader([s], delimiter=",", quotechar='"', skipinitialspace=True, strict=True)
    try:
        fields = next(reader, [])
    except csv.Error as e:
        raise ValueError(f"Nieprawidłowa lista plików {s!r}: {e}") from e

    cleaned = [f.strip().strip('"') for f in fields]
    return [f for f in cleaned if f]


def _collect_paths(args: argparse.Namespace) -> list[str]:
    paths: list[str] = list(args.files or [])
    for raw in args.file_list or []:
        paths.extend(parse_filename_string(raw))
    return paths


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def _write_json(result: BatchResult, output: str | None) -> None:
    text = json.dumps(result.to_json(), ensure_ascii=False)
    if output is None or output == "-":
        print(text)
        return
    out_path = Path(output)
    out_path.write_text(text + "\n", encoding="utf-8")
    console.print(f"[green]JSON:[/green] {out_path}  ({len(result.matches)} dopasowań)")


# ---------------------------------------------------------------------------
# Zapis do bazy danych
# ---------------------------------------------------------------------------

_INSERT_SQL = """
    INSERT INTO text_match
        (batch_id, kind, string_preview, match_text, num_characters,
         file_a, page_a, file_b, page_b)
    VALUES %s
"""


def _write_db(matches: list[Match], batch_id: str) -> None:
    from ovs._db import get_connection
    import psycopg2.extras

    if not matches:
        console.print("[yellow]Brak dopasowań do zapisania w bazie.[/yellow]")
        return

    rows = [
        (
            batch_id,
            str(m.kind),
            m.preview,
            m.text,
            m.length,
            m.pages[0].filename,
            m.pages[0].page,
            m.pages[1].filename,
            m.pages[1].page,
        )
        for m in matches
    ]

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    try:
        with conn, conn.cursor() as cur:
            psycopg2.extras.execute_values(cur, _INSERT_SQL, rows)
    except Exception as e:
        console.print(f"[red]Błąd zapisu do bazy:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    console.print(f"[green]DB:[/green] zapisano {len(matches)} dopasowań (batch_id='{batch_id}')")


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _page_label(page: int | None) -> str:
    return str(page) if page is not None else "—"


def _show_table(matches: list[Match]) -> None:
    if not matches:
        console.print("[yellow]Brak wspólnych fragmentów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("RODZAJ", no_wrap=True, style="bold cyan")
    table.add_column("LEN",    justify="right", no_wrap=True)
    table.add_column("PLIK A", no_wrap=True)
    table.add_column("STR.",   justify="right", no_wrap=True, style="dim")
    table.add_column("PLIK B", no_wrap=True)
    table.add_column("STR.",   justify="right", no_wrap=True, style="dim")
    table.add_column("PODGLĄD", no_wrap=False, max_width=60)

    for m in matches:
        a, b = m.pages
        table.add_row(
            "tekst" if m.kind is MatchKind.TEXT else "cyfry",
            str(m.length),
            a.filename,
            _page_label(a.page),
            b.filename,
            _page_label(b.page),
            m.preview,
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(matches)} dopasowań[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    from overlap import CompareSettings, compare_batch
    from pdf.reader import load_documents

    # 1. Konfiguracja — błędy zgłaszane przed jakimkolwiek przetwarzaniem
    try:
        paths = _collect_paths(args)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    if len(paths) < 2:
        console.print(
            f"[red]Potrzeba co najmniej 2 plików do porównania[/red] (podano: {len(paths)})."
        )
        raise SystemExit(1)
    if args.minlen < 0 or args.digit_minlen < 0:
        console.print("[red]Progi --minlen i --digit-minlen muszą być nieujemne.[/red]")
        raise SystemExit(1)
    if args.workers < 1:
        console.print("[red]--workers musi być >= 1.[/red]")
        raise SystemExit(1)

    settings = CompareSettings(min_len=args.minlen, digit_min_len=args.digit_minlen)

    # 2. Wczytanie dokumentów — błąd jednego pliku jest raportowany osobno
    console.print(f"Wczytywanie [bold]{len(paths)}[/bold] dokumentów …")
    documents, failures = load_documents(paths)
    for doc in documents:
        console.print(f"  [green]✓[/green] {doc.display_name}  [dim]{doc.page_count} stron, {len(doc.full_text)} znaków[/dim]")
    for f in failures:
        console.print(f"  [red]✗ {f.path}:[/red] {f.reason}")

    if failures and not args.keep_going:
        console.print(
            f"[red]Nie wczytano {len(failures)} dokumentów — przerwano, nic nie zapisano.[/red] "
            "[dim](--keep-going porównuje pozostałe)[/dim]"
        )
        raise SystemExit(1)
    if len(documents) < 2:
        console.print(
            f"[red]Za mało poprawnych dokumentów do porównania:[/red] {len(documents)}"
        )
        raise SystemExit(1)

    # 3. Porównanie wszystkich par
    n_pairs = len(documents) * (len(documents) - 1) // 2
    console.print(
        f"Porównywanie [bold]{n_pairs}[/bold] par  "
        f"minlen=[cyan]{settings.min_len}[/cyan]  "
        f"digit-minlen=[cyan]{settings.digit_min_len}[/cyan]  "
        f"workers=[cyan]{args.workers}[/cyan]"
    )
    result = compare_batch(documents, settings, workers=args.workers, failures=failures)

    status = "[green]Gotowe[/green]" if result.ok else f"[yellow]Gotowe z {len(result.failures)} pominiętymi dokumentami[/yellow]"
    console.print(f"{status} — {len(result.matches)} dopasowań w {result.pairs_compared} parach")

    # 4. Wyniki — emitowane raz, po wszystkich parach
    out = args.out  # "json" | "db" | "both"

    if out in ("json", "both"):
        _write_json(result, args.output)

    if out in ("db", "both"):
        _write_db(result.matches, args.batch_id or time.strftime("%Y%m%d-%H%M%S"))

    if args.show:
        _show_table(result.matches)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "compare",
        help="Wspólne fragmenty tekstu i cyfr w parach dokumentów (JSON).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Porównuje każdą parę dokumentów (PDF lub .txt ze stronami rozdzielonymi \\f)
i raportuje maksymalne wspólne fragmenty tekstu dłuższe niż --minlen znaków
oraz wspólne ciągi cyfr dłuższe niż --digit-minlen, ze stronami w obu
dokumentach. Wynik: jedna tablica JSON na stdout (lub w --output).

Przykłady:
  ovs compare a.pdf b.pdf
  ovs compare -f 'data/a.pdf,"data folder/b.pdf"' --minlen 200
  ovs compare a.pdf b.pdf c.pdf --show --output wyniki.json
  ovs compare a.pdf b.pdf --out both --batch-id audyt_2024
        """,
    )
    p.add_argument(
        "files",
        nargs="*",
        metavar="PLIK",
        help="Ścieżki do dokumentów.",
    )
    p.add_argument(
        "-f", "--file-list",
        dest="file_list",
        action="append",
        metavar="LISTA",
        help="Lista plików oddzielonych przecinkami (CSV; ścieżki ze spacjami w cudzysłowie).",
    )
    p.add_argument(
        "--minlen",
        type=int,
        default=_env_int("OVS_MIN_LEN", DEFAULT_MIN_LEN),
        metavar="N",
        help=f"Minimalna długość wspólnego tekstu (domyślnie: $OVS_MIN_LEN lub {DEFAULT_MIN_LEN}).",
    )
    p.add_argument(
        "--digit-minlen",
        type=int,
        default=_env_int("OVS_DIGIT_MIN_LEN", DEFAULT_DIGIT_MIN_LEN),
        metavar="N",
        help=f"Minimalna długość wspólnego ciągu cyfr (domyślnie: $OVS_DIGIT_MIN_LEN lub {DEFAULT_DIGIT_MIN_LEN}).",
    )
    p.add_argument(
        "--workers",
        type=int,
        default=_env_int("OVS_WORKERS", 1),
        metavar="N",
        help="Liczba procesów porównujących pary (domyślnie: $OVS_WORKERS lub 1).",
    )
    p.add_argument(
        "--keep-going",
        action="store_true",
        help="Porównaj pozostałe dokumenty, gdy któregoś nie da się wczytać.",
    )
    p.add_argument(
        "--output", "-o",
        metavar="PLIK",
        default=None,
        help="Zapisz JSON do pliku zamiast na stdout.",
    )
    p.add_argument(
        "--out",
        choices=["json", "db", "both"],
        default="json",
        help="Cel zapisu: json, db lub both (domyślnie: json).",
    )
    p.add_argument(
        "--batch-id",
        metavar="ID",
        default=None,
        help="Identyfikator partii w bazie (domyślnie: znacznik czasu).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę dopasowań w terminalu.",
    )
    p.set_defaults(func=run)

"""Komenda: ovs apply-schema — zakłada tabelę wyników text_match w bazie."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

from ovs._db import get_connection

console = Console()

ROOT         = pathlib.Path(__file__).resolve().parent.parent.parent
SCHEMA_PATH  = ROOT / "db" / "schema.sql"
RESULT_TABLE = "text_match"


def _table_exists(cur, table: str) -> bool:
    cur.execute(
        """
        SELECT 1 FROM information_schema.tables
        WHERE table_schema = 'public' AND table_name = %s
        """,
        (table,),
    )
    return cur.fetchone() is not None


def run(args: argparse.Namespace) -> None:
    schema_path = pathlib.Path(args.schema) if args.schema else SCHEMA_PATH
    if not schema_path.exists():
        console.print(f"[red]Brak pliku schematu:[/red] {schema_path}")
        raise SystemExit(1)

    sql = schema_path.read_text(encoding="utf-8")

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    # cały plik w jednej transakcji; schemat musi zakładać tabelę wyników
    try:
        with conn, conn.cursor() as cur:
            existed = _table_exists(cur, RESULT_TABLE)
            cur.execute(sql)
            cur.execute(f"SELECT count(*) FROM {RESULT_TABLE}")
            (n_rows,) = cur.fetchone()
    except Exception as e:
        console.print(f"[red]Błąd wykonania schematu:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    if existed:
        console.print(
            f"[green]Tabela [bold]{RESULT_TABLE}[/bold] już istnieje[/green] "
            f"[dim]({n_rows} wierszy)[/dim]"
        )
    else:
        console.print(f"[green]Utworzono tabelę [bold]{RESULT_TABLE}[/bold][/green] z {schema_path}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "apply-schema",
        help="Zakłada tabelę text_match dla `ovs compare --out db` (idempotentne).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wykonuje db/schema.sql w jednej transakcji na bazie PostgreSQL
(PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD) i podaje liczbę
wierszy w tabeli text_match. Ponowne uruchomienie niczego nie zmienia.

Przykład:
  ovs apply-schema
        """,
    )
    p.add_argument(
        "--schema",
        metavar="PLIK",
        default=None,
        help=f"Inny plik schematu (domyślnie: {SCHEMA_PATH.relative_to(ROOT)}).",
    )
    p.set_defaults(func=run)

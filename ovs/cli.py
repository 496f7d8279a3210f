"""
ovs — narzędzie CLI dla OverlapScan.

Użycie:
  ovs [-v] <komenda> [opcje]

Komendy:
  compare       Wspólne fragmenty tekstu i cyfr w parach dokumentów (JSON).
  pages         Pokazuje tekst wyciągnięty ze stron dokumentu.
  apply-schema  Aplikuje db/schema.sql do bazy danych (idempotentne).

Konfiguracja (zmienne środowiskowe lub plik .env w katalogu projektu):
  OVS_MIN_LEN, OVS_DIGIT_MIN_LEN, OVS_WORKERS
  PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# .env przed build_parser() — domyślne wartości opcji czytają środowisko
load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")

from ovs.commands import compare as cmd_compare
from ovs.commands import pages as cmd_pages
from ovs.commands import apply_schema as cmd_apply_schema

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ovs",
        description="OverlapScan — dosłownie wspólne fragmenty dokumentów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"ovs {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Szczegółowe logi diagnostyczne (stderr).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_compare.add_parser(subparsers)
    cmd_pages.add_parser(subparsers)
    cmd_apply_schema.add_parser(subparsers)

    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    # Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
    # w tekstach pomocy argparse były wypisywane poprawnie.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")

    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()

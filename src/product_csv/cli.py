"""Command-line interface for product_csv.

Intentionally simple:
- one subcommand per store operation
- the catalog path comes from --file, then $PRODUCT_CSV_FILE, then ./products.csv
- results go to stdout, errors to stderr
"""

from __future__ import annotations
import argparse
import logging
import os
import sys

from .errors import CatalogError
from .records import render_record
from .store import RecordStore

DEFAULT_PATH = "./products.csv"
ENV_PATH = "PRODUCT_CSV_FILE"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="product-csv", description="Manage a flat id,name,price product file.")
    p.add_argument(
        "--file",
        default=os.environ.get(ENV_PATH, DEFAULT_PATH),
        help=f"Catalog CSV path (default: ${ENV_PATH} or {DEFAULT_PATH})",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log store operations")
    sub = p.add_subparsers(dest="command", required=True)

    for name in ("add", "update"):
        sp = sub.add_parser(name, help=f"{name.capitalize()} a product")
        sp.add_argument("id")
        sp.add_argument("name")
        sp.add_argument("price")

    for name in ("get", "delete"):
        sp = sub.add_parser(name, help=f"{name.capitalize()} a product by id")
        sp.add_argument("id")
    return p


def main(argv: list[str] | None = None, store: RecordStore | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__package__).setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    store = store or RecordStore()

    try:
        if args.command == "add":
            store.add(args.file, args.id, args.name, args.price)
        elif args.command == "update":
            store.update(args.file, args.id, args.name, args.price)
        elif args.command == "delete":
            store.delete(args.file, args.id)
        else:
            rec = store.get(args.file, args.id)
            if rec is None:
                sys.stderr.write(f"not found: {args.id}\n")
                return 1
            sys.stdout.write(render_record(*rec) + "\n")
    except (CatalogError, OSError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

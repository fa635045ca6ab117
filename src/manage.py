"""Storefront data management CLI.

Works against the configured store backend (set STOREFRONT_STORE=jsonl and
STOREFRONT_DATA_DIR to manage the JSON-lines files).

Usage:
    python src/manage.py init-data                 # Create empty store files
    python src/manage.py seed-catalog products.json
"""

import argparse
import json
import sys
from pathlib import Path


def init_data():
    """Create every store file that does not exist yet."""
    from storefront.config import get_settings
    from storefront.stores import STORE_FILES, build_record_store

    settings = get_settings()
    if settings.store_backend != "jsonl":
        print(f"Store backend is '{settings.store_backend}'; nothing to create.")
        return

    for name in STORE_FILES:
        store = build_record_store(name)
        store.ensure_exists()
        print(f"  {name}: {store.path}")

    print("Done.")


def seed_catalog(path):
    """Load products from a JSON array of {id, name, description, price, image}."""
    from protean.exceptions import ValidationError
    from storefront.catalogue.product import Product
    from storefront.domain import storefront
    from storefront.stores import get_stores

    records = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(records, list):
        print("Expected a JSON array of products.")
        sys.exit(1)

    storefront.init()
    with storefront.domain_context():
        catalog = get_stores().catalog
        loaded = 0
        for record in records:
            try:
                catalog.add_product(Product.from_record(record))
                loaded += 1
            except (KeyError, ValidationError) as exc:
                print(f"  skipped {record.get('id')!r}: {exc}")

    print(f"Loaded {loaded} of {len(records)} products.")


def main():
    parser = argparse.ArgumentParser(description="Storefront data management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-data", help="Create empty store files")

    seed_parser = subparsers.add_parser("seed-catalog", help="Load products into the catalogue")
    seed_parser.add_argument("path", help="JSON file holding an array of products")

    args = parser.parse_args()

    if args.command == "init-data":
        init_data()
    elif args.command == "seed-catalog":
        seed_catalog(args.path)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

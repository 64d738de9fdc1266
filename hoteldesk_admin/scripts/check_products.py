#!/usr/bin/env python3
"""
HotelDesk Admin - Check Products

Shows product and category document structure and counts products by
mode and type.

Usage:
    hoteldesk-check-products

Author: HotelDesk Project
"""

import argparse
import json
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, print_section, run_script
from hoteldesk_admin.inspection import DocumentFields, ProductModeCounts
from hoteldesk_admin.models.database import Category, Product

SAMPLE_LIMIT = 10


def print_sample(kind: str, document):
    """Print the fields and data of one sample document"""
    fields = DocumentFields(document)
    print(f"Sample {kind} fields:")
    print(", ".join(fields))
    print()
    print(f"Sample {kind} data:")
    print(json.dumps(fields, indent=2, default=str))


def _run(db_manager, session, config_mgr) -> int:
    print_header("Check Products")

    products = session.query(Product).order_by(Product.doc_id).limit(SAMPLE_LIMIT).all()
    print(f"Found {len(products)} products (showing first {SAMPLE_LIMIT}):")
    print()

    if not products:
        print("No products found!")
        return EXIT_SUCCESS

    print_sample("product", products[0])
    print()

    mode_counts, type_counts = ProductModeCounts(session.query(Product).all())
    if mode_counts:
        print("Products by mode/business_mode:")
        for mode, count in mode_counts.items():
            print(f"  {mode}: {count}")
    if type_counts:
        print()
        print("Products by type:")
        for product_type, count in type_counts.items():
            print(f"  {product_type}: {count}")

    print_section("Categories")
    categories = session.query(Category).order_by(Category.doc_id).limit(SAMPLE_LIMIT).all()
    print(f"Found {len(categories)} categories (showing first {SAMPLE_LIMIT}):")
    print()
    if categories:
        print_sample("category", categories[0])

    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Show product structure and mode/type counts")
    parser.parse_args(argv)
    return run_script("check_products", _run)


if __name__ == "__main__":
    sys.exit(main())

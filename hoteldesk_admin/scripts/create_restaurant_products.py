#!/usr/bin/env python3
"""
HotelDesk Admin - Create Restaurant Products

Creates the restaurant menu categories and items (is_restaurant_item = 1).
Existing products with the same name are converted to restaurant items.

Usage:
    hoteldesk-create-restaurant-products

Author: HotelDesk Project
"""

import argparse
import logging
import sys

from hoteldesk_admin.cli import EXIT_SUCCESS, print_header, print_section, print_next_steps, run_script
from hoteldesk_admin.defaults import (
    RESTAURANT_CATEGORIES, RESTAURANT_CATEGORY_FIRST_ID,
    RESTAURANT_PRODUCTS, RESTAURANT_PRODUCT_FIRST_ID
)
from hoteldesk_admin.exceptions import HotelDeskError
from hoteldesk_admin.id_allocator import IdAllocator, ParseDocumentId
from hoteldesk_admin.models.database import Category, Product

logger = logging.getLogger(__name__)

# Restaurant items have no stock limit in the app
RESTAURANT_STOCK = 999


def create_categories(db_manager, session) -> dict:
    """
    Get or create every restaurant category

    Returns:
        dict: category name -> category id
    """
    print_section("Step 1: Creating restaurant categories")

    allocator = IdAllocator.FromDocumentIds(
        db_manager.GetDocumentIds(session, Category), first_id=RESTAURANT_CATEGORY_FIRST_ID
    )
    category_ids = {}

    for category_data in RESTAURANT_CATEGORIES:
        name = category_data['name']
        try:
            existing = db_manager.FindFirst(session, Category, name=name)
            if existing is not None:
                category_id = ParseDocumentId(existing.doc_id)
                print(f"  Category \"{name}\" already exists (ID: {category_id})")
            else:
                category_id = allocator.Next()
                with db_manager.Batch(session):
                    session.add(Category(
                        doc_id=str(category_id),
                        name=name,
                        description=category_data['description'],
                        product_count=0
                    ))
                print(f"  Created category \"{name}\" (ID: {category_id})")
            category_ids[name] = category_id
        except HotelDeskError as e:
            logger.error(f"Error with category {name}: {e}")
            print(f"  [ERROR] Error with category {name}: {e}")

    print()
    print(f"Total categories: {len(category_ids)}")
    return category_ids


def create_products(db_manager, session, category_ids: dict) -> int:
    """
    Create or convert every restaurant product

    Returns:
        int: Number of products created or updated
    """
    print_section("Step 2: Creating restaurant products")

    allocator = IdAllocator.FromDocumentIds(
        db_manager.GetDocumentIds(session, Product), first_id=RESTAURANT_PRODUCT_FIRST_ID
    )
    processed_count = 0

    for product_data in RESTAURANT_PRODUCTS:
        name = product_data['name']
        category_id = category_ids.get(product_data['category'])
        if category_id is None:
            print(f"  [ERROR] Category not found: {product_data['category']}")
            continue

        try:
            existing = db_manager.FindFirst(session, Product, name=name)
            if existing is not None:
                with db_manager.Batch(session):
                    existing.is_restaurant_item = 1
                    existing.category_id = category_id
                print(f"  Updated product \"{name}\" to restaurant item (ID: {existing.doc_id})")
            else:
                product_id = allocator.Next()
                with db_manager.Batch(session):
                    session.add(Product(
                        doc_id=str(product_id),
                        name=name,
                        price=product_data['price'],
                        description=product_data.get('description', ''),
                        category_id=category_id,
                        is_restaurant_item=1,
                        is_available=1,
                        stock=RESTAURANT_STOCK
                    ))
                print(f"  Created restaurant product \"{name}\" (ID: {product_id}) - ${product_data['price']}")
            processed_count += 1
        except HotelDeskError as e:
            logger.error(f"Error with product {name}: {e}")
            print(f"  [ERROR] Error with product {name}: {e}")

    return processed_count


def _run(db_manager, session, config_mgr) -> int:
    print_header("Create Restaurant Products")

    category_ids = create_categories(db_manager, session)
    processed_count = create_products(db_manager, session, category_ids)

    print()
    print(f"[OK] Created/Updated {processed_count} restaurant products")
    print_next_steps(
        "Refresh your app (F5)",
        "Go to Restaurant mode - you should now see restaurant products and categories",
        "Go to Retail mode - you should see retail products",
    )
    return EXIT_SUCCESS


def main(argv=None) -> int:
    """Script entry point"""
    parser = argparse.ArgumentParser(description="Create restaurant menu categories and products")
    parser.parse_args(argv)
    return run_script("create_restaurant_products", _run)


if __name__ == "__main__":
    sys.exit(main())

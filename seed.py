#!/usr/bin/env python
# seed.py - Clear the inventory database and fill it with sample data

import argparse
import sys
from datetime import datetime, timedelta
from urllib.parse import quote

from pydantic import ValidationError
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import DB_CONFIG, SEED_CONFIG, SPECIFIC_USER
from database import connect
from exceptions import DatabaseConnectionError, SeedError
from generators import (
    CATEGORIES, CITIES, DESCRIPTIONS, EMAIL_DOMAINS, FIRST_NAMES, LAST_NAMES, MANUFACTURERS,
    PRODUCT_NAMES, STORE_NAME_PREFIXES, STORE_NAME_SUFFIXES, STREET_NAMES, STREET_SUFFIXES,
    format_date, random_date, random_element, random_int, random_phone_number,
)
from logging_setup import get_logger, log_exception
from schemas import (
    COLLECTIONS, PRODUCTS, PURCHASES, SALES, STORES, USERS,
    Product, Purchase, Sale, Store, User,
)

app_logger = get_logger('seed')


def _insert_many(db, collection_name, models):
    """Bulk insert models and return the stored documents, ids included."""
    docs = [m.model_dump() for m in models]
    if not docs:
        return []
    result = db[collection_name].insert_many(docs)
    return [dict(doc, _id=_id) for doc, _id in zip(docs, result.inserted_ids)]


def clear_database(db: Database):
    """Delete every document from all five collections."""
    app_logger.info("Clearing database...")
    try:
        for name in COLLECTIONS:
            db[name].delete_many({})
    except PyMongoError as e:
        app_logger.error(f"Error clearing database: {e}")
        raise
    app_logger.info("Database cleared.")


def ensure_specific_user(db: Database, details: dict):
    """Find the user with ``details['email']``, creating it when absent.

    Returns:
        List holding the single user document, so it can be passed wherever
        a list of owners is expected.

    Raises:
        SeedError: if the user can neither be found nor created
    """
    email = details['email']
    user = db[USERS].find_one({"email": email})
    if user:
        app_logger.info(f"Specific user {email} already exists. Using the existing one.")
        return [user]

    try:
        model = User(
            firstName=details.get('firstName') or "Usuario",
            lastName=details.get('lastName') or "PorDefecto",
            email=email,
            password=details['password'],
            phoneNumber=details.get('phoneNumber') or random_phone_number(),
            imageUrl=details.get('imageUrl') or f"https://i.pravatar.cc/150?u={quote(email, safe='')}",
        )
        user_id = db[USERS].insert_one(model.model_dump()).inserted_id
        user = db[USERS].find_one({"_id": user_id})
    except (ValidationError, PyMongoError) as e:
        raise SeedError(f"Could not create specific user {email}", details={'error': str(e)}) from e

    if not user:
        raise SeedError(f"Specific user {email} was not found after creation")
    app_logger.info(f"Specific user {email} created.")
    return [user]


def seed_users(db: Database, count=SEED_CONFIG['count']):
    users = []
    for i in range(count):
        first_name = random_element(FIRST_NAMES)
        last_name = random_element(LAST_NAMES)
        users.append(User(
            firstName=first_name,
            lastName=last_name,
            email=f"{first_name.lower()}.{last_name.lower()}{i}@{random_element(EMAIL_DOMAINS)}",
            password=f"pass{random_int(1000, 9999)}word",
            phoneNumber=random_phone_number(),
            imageUrl=f"https://i.pravatar.cc/150?u={first_name}{last_name}{i}",
        ))
    created = _insert_many(db, USERS, users)
    app_logger.info(f"{len(created)} users created.")
    return created


def seed_products(db: Database, users, count=SEED_CONFIG['count']):
    """Create products with zero stock; purchases raise it later."""
    if not users:
        app_logger.warning("No users to own the products. Creating products without userID.")

    products = []
    for i in range(count):
        owner = random_element(users)
        products.append(Product(
            userID=owner["_id"] if owner else None,
            name=f"{random_element(PRODUCT_NAMES)} v{i % 5 + 1}.{i % 10}",
            manufacturer=random_element(MANUFACTURERS),
            stock=0,
            description=random_element(DESCRIPTIONS),
        ))
    created = _insert_many(db, PRODUCTS, products)
    app_logger.info(f"{len(created)} products created.")
    return created


def seed_stores(db: Database, users, count=SEED_CONFIG['count']):
    if not users:
        app_logger.warning("No users to own the stores. Creating stores without userID.")

    stores = []
    for i in range(count):
        owner = random_element(users)
        stores.append(Store(
            userID=owner["_id"] if owner else None,
            name=f"{random_element(STORE_NAME_PREFIXES)} {random_element(CATEGORIES)} "
                 f"{random_element(STORE_NAME_SUFFIXES)} #{i + 1}",
            category=random_element(CATEGORIES),
            address=f"{random_int(1, 9999)} {random_element(STREET_NAMES)} {random_element(STREET_SUFFIXES)}",
            city=random_element(CITIES),
            image=f"https://picsum.photos/seed/store{i}/400/300",
        ))
    created = _insert_many(db, STORES, stores)
    app_logger.info(f"{len(created)} stores created.")
    return created


def seed_purchases(db: Database, users, products, count=SEED_CONFIG['count']):
    """Create purchases and add each purchased quantity to its product's stock."""
    if not users or not products:
        app_logger.error("No users or products to create purchases for. Skipping purchases.")
        return []

    today = datetime.now()
    start = today - timedelta(days=SEED_CONFIG['purchase_window_days'])

    purchases = []
    for _ in range(count):
        product = random_element(products)
        quantity = random_int(*SEED_CONFIG['purchase_quantity'])
        unit_price = random_int(*SEED_CONFIG['purchase_unit_price'])
        purchases.append(Purchase(
            userID=random_element(users)["_id"],
            productID=product["_id"],
            quantityPurchased=quantity,
            purchaseDate=format_date(random_date(start, today)),
            totalPurchaseAmount=round(quantity * unit_price, 2),
        ))

    for purchase in purchases:
        db[PRODUCTS].update_one(
            {"_id": purchase.productID},
            {"$inc": {"stock": purchase.quantityPurchased}},
        )

    created = _insert_many(db, PURCHASES, purchases)
    app_logger.info(f"{len(created)} purchases created and product stock updated.")
    return created


def seed_sales(db: Database, users, products, stores, count=SEED_CONFIG['count']):
    """Create up to ``count`` sales, never selling more than the current stock.

    Stock is read from the database on every attempt since earlier sales in
    this loop may have lowered it. Attempts on a product with no stock are
    dropped, so fewer than ``count`` sales may be created.
    """
    if not users or not products or not stores:
        app_logger.error("No users, products or stores to create sales for. Skipping sales.")
        return []

    today = datetime.now()
    start = today - timedelta(days=SEED_CONFIG['sale_window_days'])

    sales = []
    for _ in range(count):
        product = random_element(products)
        store = random_element(stores)
        user = random_element(users)

        current = db[PRODUCTS].find_one({"_id": product["_id"]})
        if not current or current.get("stock", 0) <= 0:
            app_logger.debug(f"Product {product['_id']} has no stock. Skipping sale.")
            continue

        stock_sold = random_int(1, max(1, current["stock"]))
        unit_price = random_int(*SEED_CONFIG['sale_unit_price'])

        db[PRODUCTS].update_one({"_id": current["_id"]}, {"$inc": {"stock": -stock_sold}})

        sales.append(Sale(
            userID=user["_id"],
            productID=current["_id"],
            storeID=store["_id"],
            stockSold=stock_sold,
            saleDate=format_date(random_date(start, today)),
            totalSaleAmount=round(stock_sold * unit_price, 2),
        ))

    if not sales:
        app_logger.info("No valid sales were created after stock checks.")
        return []

    created = _insert_many(db, SALES, sales)
    app_logger.info(f"{len(created)} sales created and product stock updated.")
    return created


def seed_database(db: Database, specific_user=None, count=SEED_CONFIG['count'], clear=True, random_users=0):
    """Run the full seeding pipeline against ``db``.

    Args:
        db: Target database
        specific_user: Details of the account owning the generated data
        count: Number of products, stores, purchases and sale attempts
        clear: Empty all collections first
        random_users: Number of extra random users to create

    Returns:
        Dictionary with the number of documents created per collection
    """
    specific_user = specific_user or SPECIFIC_USER

    if clear:
        clear_database(db)

    users = ensure_specific_user(db, specific_user)
    owner_id = users[0]["_id"]

    extra_users = seed_users(db, random_users) if random_users else []

    products = seed_products(db, users, count)
    created_products = len(products)
    stores = seed_stores(db, users, count)

    purchases = []
    if products:
        purchases = seed_purchases(db, users, products, count)
        # Reload to pick up the stock added by purchases
        products = list(db[PRODUCTS].find({"userID": owner_id}))
    else:
        app_logger.warning("No products were created. Skipping purchases and sales.")

    sales = []
    if products and stores:
        sales = seed_sales(db, users, products, stores, count)
    else:
        app_logger.warning("Not enough products or stores. Skipping sales.")

    app_logger.info(f"Database seeding completed for user: {specific_user['email']}")
    return {
        USERS: len(users) + len(extra_users),
        PRODUCTS: created_products,
        STORES: len(stores),
        PURCHASES: len(purchases),
        SALES: len(sales),
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Clear the inventory database and fill it with sample data")
    parser.add_argument('--count', type=int, default=SEED_CONFIG['count'],
                        help="Products, stores, purchases and sale attempts to generate")
    parser.add_argument('--no-clear', action='store_true', help="Keep existing documents")
    parser.add_argument('--random-users', type=int, default=0, help="Extra random users to create")
    parser.add_argument('--database-url', default=DB_CONFIG['url'])
    parser.add_argument('--database-name', default=DB_CONFIG['name'])
    return parser.parse_args(argv)


def main(argv=None):
    """Seed the database. Returns the process exit code."""
    args = parse_args(argv)
    app_logger.info("Starting database seeding...")

    try:
        client, db = connect(args.database_url, args.database_name)
    except DatabaseConnectionError as e:
        app_logger.error(f"Could not connect to the database: {e}")
        return 1

    try:
        summary = seed_database(
            db,
            specific_user=SPECIFIC_USER,
            count=args.count,
            clear=not args.no_clear,
            random_users=args.random_users,
        )
        for name, created in summary.items():
            app_logger.info(f"{name}: {created}")
        return 0
    except Exception as e:
        log_exception(app_logger, e, "Error seeding database")
        return 1
    finally:
        client.close()
        app_logger.info("MongoDB disconnected.")


if __name__ == "__main__":
    sys.exit(main())

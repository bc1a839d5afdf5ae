"""
Configuration settings for the inventory backend.

Values come from the environment, falling back to local development defaults.
"""
import os

# Database configuration
DB_CONFIG = {
    'url': os.getenv('DATABASE_URL', 'mongodb://localhost:27017'),
    'name': os.getenv('DATABASE_NAME', 'InventoryManagementApp'),
    'timeout_ms': int(os.getenv('DATABASE_TIMEOUT_MS', '5000')),
}

# Product served by GET /testget
TEST_PRODUCT_ID = os.getenv('TEST_PRODUCT_ID', '665f1c2e9b1e8a3d4c5b6a70')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

PORT = int(os.getenv('PORT', '8000'))

# Seeding defaults
SEED_CONFIG = {
    'count': 100,
    'purchase_quantity': (20, 150),
    'purchase_unit_price': (5, 50),
    'sale_unit_price': (10, 70),
    'purchase_window_days': 365,
    'sale_window_days': 360,
}

# Account that owns every generated product and store
SPECIFIC_USER = {
    'email': os.getenv('SEED_USER_EMAIL', 'benjamin.pablo@example.com'),
    'password': os.getenv('SEED_USER_PASSWORD', '2472040'),
    'firstName': 'Benjamin',
    'lastName': 'Pablo',
}

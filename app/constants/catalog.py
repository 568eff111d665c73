# app/constants/catalog.py

from decimal import Decimal

# filter value meaning "do not filter"
ALL_CATEGORIES = "all"
ALL_PHARMACIES = "all"

CATALOG_CATEGORIES = ["Medicines", "Supplements", "Medical Supplies", "Personal Care"]

# profiles listed in the pharmacy directory
RETAIL_ROLE = "retail"

ADDRESS_NOT_PROVIDED = "Address not provided"
PHONE_NOT_PROVIDED = "Phone not provided"
DEFAULT_PHARMACY_RATING = Decimal("4.0")
DEFAULT_OPERATING_HOURS = "8:00 AM - 8:00 PM"

CART_ORDER_PREFIX = "CART"

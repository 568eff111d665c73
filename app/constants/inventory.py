# app/constants/inventory.py

# branch key used for rows that carry no branch_id
MAIN_BRANCH_KEY = "main"
MAIN_BRANCH_LABEL = "Main Branch"
UNKNOWN_BRANCH_LABEL = "Unknown Branch"

# branch filter value meaning "do not filter"
ALL_BRANCHES = "all"

# fallbacks for transfer history rows
UNKNOWN_TRANSFER_BRANCH = "Unknown"
UNKNOWN_PRODUCT = "Unknown Product"

PRODUCT_STATUS_IN_STOCK = "in-stock"

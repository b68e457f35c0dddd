"""
Core — Constants

Shared constants for pagination, asset lifecycle values and batch
number prefixes.

@file core/constants.py
"""

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 200

# Asset lifecycle
ASSET_STATUS_IN_STOCK = 'in_stock'
ASSET_STATUS_IN_USE = 'in_use'
ASSET_STATUS_SCRAPPED = 'scrapped'

OPERATION_RETURN = 'return'
OPERATION_SCRAP = 'scrap'

# Batch numbers
STOCK_IN_BATCH_PREFIX = 'IN'
STOCK_OUT_BATCH_PREFIX = 'OUT'
ASSET_CODE_PREFIX = 'AST'

# Roles
ROLE_ADMIN = 'admin'
ROLE_USER = 'user'

# Dashboard
RECENT_ACTIVITY_LIMIT = 5

# URL lookups on UUID primary keys (hyphens optional)
UUID_LOOKUP_REGEX = (
    '[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}'
)

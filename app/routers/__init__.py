# app/routers/__init__.py

from .inventory.inventory_balance_router import router as inventory_router
from .inventory.branch_router import router as branch_router
from .inventory.stock_transfer_router import router as stock_transfer_router

from .orders.order_tracking_router import router as order_tracking_router

from .catalog.catalog_router import router as catalog_router
from .catalog.cart_router import router as cart_router
from .pharmacies.pharmacy_router import router as pharmacy_router

from .dashboard.dashboard_router import router as dashboard_router


__all__ = [
"inventory_router",
"branch_router",
"stock_transfer_router",

"order_tracking_router",

"catalog_router",
"cart_router",
"pharmacy_router",

"dashboard_router",
]

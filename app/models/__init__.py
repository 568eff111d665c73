# Inventory
from app.models.inventory.branch_models import Branch
from app.models.inventory.product_models import Product
from app.models.inventory.stock_adjustment_models import StockAdjustment

# Orders
from app.models.orders.order_models import Order

# Profiles
from app.models.users.profile_models import Profile

from . import admin, collateral, maintenance, referrals, trading
from .trading import OrderParams, validate_order

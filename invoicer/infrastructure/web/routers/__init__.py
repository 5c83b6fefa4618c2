"""
API routers.
"""

from . import auth, dashboard, invoices, settings, users

__all__ = ["auth", "dashboard", "invoices", "settings", "users"]

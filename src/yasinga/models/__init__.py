"""Database models."""
from yasinga.models.user import User
from yasinga.models.category import Category
from yasinga.models.transaction import Categorized, Pending, Transaction
from yasinga.models.supplier import Supplier
from yasinga.models.sms_settings import SmsSettings

__all__ = [
    "User",
    "Category",
    "Transaction",
    "Pending",
    "Categorized",
    "Supplier",
    "SmsSettings",
]

"""
Domain models and value objects.

Contains the Transaction value type.
"""

from src.core.domain.transaction import Transaction

__all__ = [
    "Transaction",
]

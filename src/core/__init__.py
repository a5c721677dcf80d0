"""
Core domain models.

This module contains the building blocks that are independent
of external systems (storage, transport, etc.).
"""

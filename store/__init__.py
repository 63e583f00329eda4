"""
Store module for the quote service.
Provides the in-memory quote collection.
"""

from .models import Quote, SEED_QUOTES
from .quote_store import QuoteStore, rfc3339_now

__all__ = ['Quote', 'SEED_QUOTES', 'QuoteStore', 'rfc3339_now']

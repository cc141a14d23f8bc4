"""
Ledger storage models
Key-addressed record store with a per-key change log.
"""

from .ledger_entry import LedgerEntry
from .ledger_history import LedgerHistory

__all__ = [
    'LedgerEntry',
    'LedgerHistory',
]

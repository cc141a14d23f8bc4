"""
Donation ledger read services
"""

from app.services.donations.ledger_query_service import LedgerQueryService

__all__ = ['LedgerQueryService']

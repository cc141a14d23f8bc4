"""
Donation record types
Pure data definitions for everything stored on the ledger.
"""

from .ledger_record import LedgerRecordMixin
from .owner_relation import OwnerRelation
from .donor import Donor
from .npo import NPO
from .recipient import Recipient
from .asset import Asset, AssetStatus
from .need import Need, NeedStatus

# doctype -> record class
RECORD_TYPES = {
    Donor.KIND: Donor,
    NPO.KIND: NPO,
    Recipient.KIND: Recipient,
    Asset.KIND: Asset,
    Need.KIND: Need,
}

__all__ = [
    'LedgerRecordMixin',
    'OwnerRelation',
    'Donor',
    'NPO',
    'Recipient',
    'Asset',
    'AssetStatus',
    'Need',
    'NeedStatus',
    'RECORD_TYPES',
]

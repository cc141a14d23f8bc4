"""
Ledger Query Service
Read-only reporting over the ledger: full snapshots, per-asset audit trails
and raw key lookups.
"""

import json
from typing import Any, Dict, List, Optional
from app.buisness.donations.errors import InvalidArgument, NotFound, StorageFailure
from app.buisness.donations.policies.relationship_integrity import RelationshipIntegrityPolicy
from app.buisness.ledger.ledger_adapter import LedgerAdapter
from app.data.donations import Asset, Donor, NPO, Need, Recipient
from app.logger import get_logger

logger = get_logger("donation_ledger.services.donations.query")


class LedgerQueryService:
    """
    Service for ledger read models.

    Provides methods for:
    - Assembling a snapshot of every record, grouped by kind
    - Retrieving an asset's change history
    - Raw single-key lookups
    - Checking relationship integrity across the snapshot
    """

    # Snapshot section name -> record class, in output order
    SNAPSHOT_SECTIONS = (
        ('Assets', Asset),
        ('Donors', Donor),
        ('NPOs', NPO),
        ('Recipients', Recipient),
        ('Needs', Need),
    )

    def __init__(self, adapter: Optional[LedgerAdapter] = None):
        self.adapter = adapter or LedgerAdapter()

    # ========== Snapshot ==========

    def snapshot(self) -> Dict[str, List[Any]]:
        """
        Every record grouped by kind, each group ordered by ledger key.

        Records are selected by their kind index, so ids need no prefix
        convention. Empty values are skipped.
        """
        everything = {}
        for section, record_cls in self.SNAPSHOT_SECTIONS:
            records = []
            for key, value in self.adapter.scan_kind(record_cls.KIND):
                record = self._decode(record_cls, key, value)
                if not record.is_empty():
                    records.append(record)
            everything[section] = records
        logger.debug(
            "Snapshot assembled: " + ", ".join(f"{name}={len(records)}" for name, records in everything.items())
        )
        return everything

    def read_everything(self) -> bytes:
        """Snapshot serialized as one JSON object of five lists"""
        everything = {
            section: [record.to_dict() for record in records]
            for section, records in self.snapshot().items()
        }
        return json.dumps(everything).encode('utf-8')

    # ========== History ==========

    def history_entries(self, asset_id: str) -> List[Dict[str, Any]]:
        """
        Change history for one asset key, oldest first.

        The whole per-key log is returned whatever the key holds now, so an
        asset id later reused by another record keeps its audit trail. Deletion
        entries, and entries written by another kind of record, carry a
        zero-valued asset.

        Raises:
            InvalidArgument: If the asset id is blank
        """
        if not asset_id:
            raise InvalidArgument("Asset id must not be empty")

        history = []
        for entry in self.adapter.history_scan(asset_id):
            value = self._asset_from_history(asset_id, entry.value)
            history.append({
                'txId': entry.tx_id,
                'timestamp': entry.timestamp.isoformat() if entry.timestamp else None,
                'isDelete': entry.is_delete,
                'value': value.to_dict(),
            })
        logger.debug(f"History for {asset_id}: {len(history)} entries")
        return history

    def get_history(self, asset_id: str) -> bytes:
        return json.dumps(self.history_entries(asset_id)).encode('utf-8')

    # ========== Raw lookup ==========

    def query(self, key: str) -> bytes:
        """
        Stored bytes for a key, verbatim.

        Raises:
            NotFound: If the key is absent or its value is empty
        """
        value = self.adapter.get(key)
        if not value:
            raise NotFound(f"Nil amount for {key}")
        return value

    # ========== Integrity ==========

    def check_integrity(self) -> List[str]:
        """Relationship-invariant violations across the whole ledger (empty when consistent)"""
        everything = self.snapshot()
        violations = RelationshipIntegrityPolicy.find_violations(
            donors=everything['Donors'],
            npos=everything['NPOs'],
            assets=everything['Assets'],
            needs=everything['Needs'],
        )
        if violations:
            logger.warning(f"Ledger integrity check found {len(violations)} violations")
        return violations

    @staticmethod
    def _decode(record_cls, key: str, value: bytes):
        try:
            return record_cls.from_bytes(value)
        except ValueError as e:
            raise StorageFailure(f"Stored value for '{key}' is not a valid {record_cls.KIND} record") from e

    @classmethod
    def _asset_from_history(cls, key: str, value: Optional[bytes]) -> Asset:
        if value is None:
            return Asset.empty()
        try:
            doctype = json.loads(value).get('doctype')
        except (ValueError, AttributeError) as e:
            raise StorageFailure(f"Stored value for '{key}' is not a valid ledger record") from e
        if doctype != Asset.KIND:
            return Asset.empty()
        return cls._decode(Asset, key, value)

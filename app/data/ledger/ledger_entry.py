from app import db
from datetime import datetime


class LedgerEntry(db.Model):
    """
    Ledger Entry - Current value stored under a ledger key.

    The value column holds the serialized record bytes verbatim. ``kind`` is the
    record's doctype and backs the per-kind scans that replace id-prefix ranges.
    """
    __tablename__ = 'ledger_entries'

    key = db.Column(db.String(255), primary_key=True)
    kind = db.Column(db.String(50), nullable=False, index=True)
    value = db.Column(db.LargeBinary, nullable=False)
    tx_id = db.Column(db.String(64), nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<LedgerEntry {self.key} ({self.kind})>'

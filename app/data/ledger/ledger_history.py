from app import db
from datetime import datetime
from sqlalchemy import Index


class LedgerHistory(db.Model):
    """
    Ledger History - Append-only change log for ledger keys.

    One row is written for every put or delete of a key. Deletions are stored
    with ``is_delete`` set and a NULL value so the audit trail shows the key
    disappearing rather than silently losing rows.
    """
    __tablename__ = 'ledger_history'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    key = db.Column(db.String(255), nullable=False)
    tx_id = db.Column(db.String(64), nullable=False)
    value = db.Column(db.LargeBinary, nullable=True)
    is_delete = db.Column(db.Boolean, nullable=False, default=False)
    recorded_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Indexes for efficient queries
    __table_args__ = (
        Index('idx_ledger_history_key_id', 'key', 'id'),
        Index('idx_ledger_history_tx_id', 'tx_id'),
    )

    def __repr__(self):
        action = 'delete' if self.is_delete else 'put'
        return f'<LedgerHistory {self.id}: {self.key} {action} in {self.tx_id}>'

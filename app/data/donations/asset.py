from dataclasses import dataclass, field
from typing import Any, Dict, List
from app.data.donations.ledger_record import LedgerRecordMixin
from app.data.donations.owner_relation import OwnerRelation


class AssetStatus:
    """Asset status values as stored on the ledger"""
    PROPOSED = 'Proposed'
    APPROVED = 'Approved'
    BORROWED = 'Borrowed'
    GIVEN = 'Given'

    ALL = (PROPOSED, APPROVED, BORROWED, GIVEN)


@dataclass
class Asset(LedgerRecordMixin):
    """
    Donated physical item.

    donor_id and npo_id are fixed when the asset is proposed. owner_history
    gains one OwnerRelation per borrow/give and is never trimmed.
    """
    KIND = 'Asset'

    id: str = ''
    name: str = ''
    donor_id: str = ''
    npo_id: str = ''
    owner_history: List[OwnerRelation] = field(default_factory=list)
    status: str = ''
    product_type: str = ''
    picture_hash: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'doctype': self.doctype,
            'id': self.id,
            'name': self.name,
            'donorid': self.donor_id,
            'npoid': self.npo_id,
            'owner': [relation.to_dict() for relation in self.owner_history],
            'status': self.status,
            'producttype': self.product_type,
            'pichash': self.picture_hash,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Asset':
        return cls(
            id=data.get('id') or '',
            name=data.get('name') or '',
            donor_id=data.get('donorid') or '',
            npo_id=data.get('npoid') or '',
            owner_history=[OwnerRelation.from_dict(item) for item in (data.get('owner') or [])],
            status=data.get('status') or '',
            product_type=data.get('producttype') or '',
            picture_hash=data.get('pichash') or '',
        )

    @property
    def current_holder(self):
        """Most recent custody snapshot, or None if never lent or given"""
        if not self.owner_history:
            return None
        return self.owner_history[-1]

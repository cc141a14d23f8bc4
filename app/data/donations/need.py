from dataclasses import dataclass
from typing import Any, Dict
from app.data.donations.ledger_record import LedgerRecordMixin, int_value


class NeedStatus:
    """Need status codes as stored on the ledger"""
    INCOMPLETE = 'I'
    COMPLETE = 'C'


@dataclass
class Need(LedgerRecordMixin):
    """
    An NPO's declared demand for a number of named items.

    current_count only grows, one per approved matching asset, and never passes
    total_count.
    """
    KIND = 'Need'

    id: str = ''
    npo_id: str = ''
    product_type: str = ''
    name: str = ''
    status: str = ''
    total_count: int = 0
    current_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'doctype': self.doctype,
            'id': self.id,
            'npoid': self.npo_id,
            'producttype': self.product_type,
            'name': self.name,
            'status': self.status,
            'totalcount': self.total_count,
            'currentcount': self.current_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Need':
        return cls(
            id=data.get('id') or '',
            npo_id=data.get('npoid') or '',
            product_type=data.get('producttype') or '',
            name=data.get('name') or '',
            status=data.get('status') or '',
            total_count=int_value(data.get('totalcount')),
            current_count=int_value(data.get('currentcount')),
        )

    @property
    def is_complete(self) -> bool:
        return self.status == NeedStatus.COMPLETE

    @property
    def remaining(self) -> int:
        return max(self.total_count - self.current_count, 0)

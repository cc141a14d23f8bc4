from dataclasses import dataclass, field
from typing import Any, Dict, List
from app.data.donations.ledger_record import LedgerRecordMixin, string_list


@dataclass
class Recipient(LedgerRecordMixin):
    KIND = 'Recipient'

    id: str = ''
    name: str = ''
    type: str = ''
    asset_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'doctype': self.doctype,
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'assetarray': list(self.asset_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Recipient':
        return cls(
            id=data.get('id') or '',
            name=data.get('name') or '',
            type=data.get('type') or '',
            asset_ids=string_list(data.get('assetarray')),
        )

from dataclasses import dataclass, field
from typing import Any, Dict, List
from app.data.donations.ledger_record import LedgerRecordMixin, string_list, int_value


@dataclass
class Donor(LedgerRecordMixin):
    """Donor record - credit counts approved donations that filled a need"""
    KIND = 'Donor'

    id: str = ''
    name: str = ''
    phone: str = ''
    credit: int = 0
    asset_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'doctype': self.doctype,
            'id': self.id,
            'name': self.name,
            'phone': self.phone,
            'credit': self.credit,
            'assetArray': list(self.asset_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Donor':
        return cls(
            id=data.get('id') or '',
            name=data.get('name') or '',
            phone=data.get('phone') or '',
            credit=int_value(data.get('credit')),
            asset_ids=string_list(data.get('assetArray')),
        )

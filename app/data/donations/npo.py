from dataclasses import dataclass, field
from typing import Any, Dict, List
from app.data.donations.ledger_record import LedgerRecordMixin, string_list


@dataclass
class NPO(LedgerRecordMixin):
    """Nonprofit organization record"""
    KIND = 'NPO'

    id: str = ''
    name: str = ''
    asset_ids: List[str] = field(default_factory=list)
    need_ids: List[str] = field(default_factory=list)  # append-only

    def to_dict(self) -> Dict[str, Any]:
        return {
            'doctype': self.doctype,
            'id': self.id,
            'name': self.name,
            'assetsarray': list(self.asset_ids),
            'needs': list(self.need_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NPO':
        return cls(
            id=data.get('id') or '',
            name=data.get('name') or '',
            asset_ids=string_list(data.get('assetsarray')),
            need_ids=string_list(data.get('needs')),
        )

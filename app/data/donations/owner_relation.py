from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class OwnerRelation:
    """
    Snapshot of a Recipient taken when an Asset changes custody.

    Username and user_type are display copies only; the real relation is the
    recipient id.
    """
    id: str = ''
    username: str = ''
    user_type: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'username': self.username,
            'user_type': self.user_type,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OwnerRelation':
        return cls(
            id=data.get('id') or '',
            username=data.get('username') or '',
            user_type=data.get('user_type') or '',
        )

"""
Ledger record base
Shared (de)serialization for records stored as JSON bytes under a ledger key.
"""

import json
from typing import Any, Dict, List


class LedgerRecordMixin:
    """
    Mixin that gives a record dataclass its ledger byte format.

    Subclasses set ``KIND`` (the ``doctype`` discriminator written into every
    record) and implement ``to_dict`` / ``from_dict`` with the wire field names.
    A record without an id is "empty": that is what a missing value or a
    deletion entry in the change log decodes to.
    """

    KIND = ''

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        raise NotImplementedError

    @classmethod
    def empty(cls):
        """Zero-valued record"""
        return cls()

    def is_empty(self) -> bool:
        return not getattr(self, 'id', '')

    @property
    def doctype(self) -> str:
        return '' if self.is_empty() else self.KIND

    def to_bytes(self) -> bytes:
        return json.dumps(self.to_dict(), separators=(',', ':')).encode('utf-8')

    @classmethod
    def from_bytes(cls, raw: bytes):
        """
        Decode stored bytes into a record.

        Args:
            raw: Stored value; None or b'' decodes to an empty record

        Raises:
            ValueError: If the bytes are not a JSON object
        """
        if not raw:
            return cls.empty()
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"{cls.KIND or cls.__name__} record must be a JSON object")
        return cls.from_dict(data)


def string_list(value) -> List[str]:
    """Decode a JSON id list; null decodes to an empty list"""
    if not value:
        return []
    return [str(item) for item in value]


def int_value(value) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0

"""
RelationshipManager - keeps the ledger's id lists in step with each other

Every change to Donor/NPO/Recipient id lists goes through here so the list
surgery lives in one place instead of at each lifecycle call site.
"""

from typing import List
from app.data.donations import Asset, Donor, NPO, Need, OwnerRelation, Recipient


class RelationshipManager:
    """Static helpers for the bidirectional id-list relationships"""

    @staticmethod
    def attach(ids: List[str], item_id: str, unique: bool = True) -> bool:
        """
        Append item_id to ids.

        Returns:
            bool: False if unique and the id was already present
        """
        if unique and item_id in ids:
            return False
        ids.append(item_id)
        return True

    @staticmethod
    def detach_first(ids: List[str], item_id: str) -> bool:
        """Remove the first occurrence of item_id; no-op if absent"""
        try:
            ids.remove(item_id)
        except ValueError:
            return False
        return True

    # ========== Domain links ==========

    @classmethod
    def link_proposed_asset(cls, asset: Asset, donor: Donor, npo: NPO) -> None:
        cls.attach(donor.asset_ids, asset.id)
        cls.attach(npo.asset_ids, asset.id)

    @classmethod
    def unlink_deleted_asset(cls, asset_id: str, donor: Donor, npo: NPO) -> None:
        # Both lists are unique by construction; strip any stray repeats anyway
        while cls.detach_first(donor.asset_ids, asset_id):
            pass
        while cls.detach_first(npo.asset_ids, asset_id):
            pass

    @classmethod
    def register_need(cls, npo: NPO, need: Need) -> None:
        cls.attach(npo.need_ids, need.id)

    @classmethod
    def record_custody(cls, asset: Asset, recipient: Recipient) -> OwnerRelation:
        """Snapshot the recipient into the asset's owner history and list the asset on the recipient"""
        relation = OwnerRelation(id=recipient.id, username=recipient.name, user_type=recipient.type)
        asset.owner_history.append(relation)
        cls.attach(recipient.asset_ids, asset.id, unique=False)
        return relation

    @classmethod
    def release_custody(cls, asset_id: str, recipient: Recipient) -> bool:
        return cls.detach_first(recipient.asset_ids, asset_id)

"""
Asset Ownership Policy

Only the NPO an asset was proposed to may approve or delete it.
"""

from typing import TYPE_CHECKING
from app.buisness.donations.errors import OwnershipMismatch

if TYPE_CHECKING:
    from app.data.donations.asset import Asset


class AssetOwnershipPolicy:

    @classmethod
    def check(cls, asset: 'Asset', npo_id: str) -> None:
        """
        Raises:
            OwnershipMismatch: If the asset belongs to another NPO
        """
        if not cls.is_owner(asset, npo_id):
            raise OwnershipMismatch(f"Asset {asset.id} is not owned by given NPO {npo_id}")

    @classmethod
    def is_owner(cls, asset: 'Asset', npo_id: str) -> bool:
        return bool(npo_id) and asset.npo_id == npo_id

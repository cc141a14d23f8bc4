"""
Need Matching Policy

Decides which of an NPO's needs an approved asset counts toward.
"""

from typing import Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from app.data.donations.asset import Asset
    from app.data.donations.need import Need


class NeedMatchingPolicy:
    """
    First-match policy over the NPO's need list.

    A need matches when its name equals the asset name exactly. Needs that
    cannot take another unit (complete, or total already reached) are skipped
    so current_count never passes total_count. Product type is only compared
    when match_product_type is set; by default it is ignored.
    """

    @classmethod
    def matches(cls, need: 'Need', asset: 'Asset', match_product_type: bool = False) -> bool:
        if need.name != asset.name:
            return False
        if match_product_type and need.product_type != asset.product_type:
            return False
        return cls.can_accept(need)

    @classmethod
    def can_accept(cls, need: 'Need') -> bool:
        return not need.is_complete and need.current_count < need.total_count

    @classmethod
    def first_match(cls, needs: Iterable['Need'], asset: 'Asset', match_product_type: bool = False) -> Optional['Need']:
        """
        Args:
            needs: Needs in the NPO's need-id order
            asset: Asset being approved
            match_product_type: Also require equal product types

        Returns:
            The first matching need, or None
        """
        for need in needs:
            if cls.matches(need, asset, match_product_type):
                return need
        return None

"""
AssetLifecycleManager - Domain service for asset lifecycle operations

Proposal, approval (with need fulfillment), custody changes and deletion.
Every operation reads the records it needs through the transaction's
repositories, changes them in memory and stages full-record writes; the
context commits them together.
"""

from typing import Optional, TYPE_CHECKING
from app.data.donations import Asset, Need
from app.buisness.donations.narrator import DonationNarrator
from app.buisness.donations.policies.asset_ownership import AssetOwnershipPolicy
from app.buisness.donations.policies.enrollment_uniqueness import EnrollmentUniquenessPolicy
from app.buisness.donations.policies.need_matching import NeedMatchingPolicy
from app.buisness.donations.relationship_manager import RelationshipManager
from app.buisness.donations.state_machine import AssetStateMachine, NeedStateMachine
from app.logger import get_logger

if TYPE_CHECKING:
    from app.buisness.donations.context import DonationLedgerContext
    from app.buisness.ledger.record_repository import LedgerRepositories

logger = get_logger("donation_ledger.buisness.donations.asset_lifecycle")


class AssetLifecycleManager:
    """
    Domain service for asset lifecycle operations.

    Responsibilities:
    - Apply AssetStateMachine transitions
    - Enforce NPO ownership on approve/delete
    - Fulfill the first matching need on approval and credit the donor
    - Keep Donor/NPO/Recipient id lists in step via RelationshipManager
    """

    def __init__(self, ctx: 'DonationLedgerContext'):
        self.ctx = ctx

    # ========== Proposal / approval ==========

    def propose_asset(
        self,
        repos: 'LedgerRepositories',
        asset_id: str,
        name: str,
        donor_id: str,
        npo_id: str,
        product_type: str,
        picture_hash: str,
    ) -> Asset:
        """
        Create a Proposed asset and list it on its donor and NPO.

        Raises:
            NotFound: If the donor or NPO does not exist
            InvalidArgument: If donor_id/npo_id hold another kind of record
            DuplicateRecord: If asset_id is already on the ledger
        """
        donor = repos.donors.get(donor_id)
        npo = repos.npos.get(npo_id)
        EnrollmentUniquenessPolicy.check(repos, asset_id, Asset.KIND)

        asset = Asset(
            id=asset_id,
            name=name,
            donor_id=donor.id,
            npo_id=npo.id,
            owner_history=[],
            status=AssetStateMachine.PROPOSED,
            product_type=product_type,
            picture_hash=picture_hash,
        )
        RelationshipManager.link_proposed_asset(asset, donor, npo)

        repos.assets.put(asset)
        repos.donors.put(donor)
        repos.npos.put(npo)
        logger.info(DonationNarrator.asset_proposed(asset.id, donor.id, npo.id))
        return asset

    def approve_asset(self, repos: 'LedgerRepositories', asset_id: str, npo_id: str) -> Optional[Need]:
        """
        Approve an asset and count it toward the NPO's first matching need.

        Returns:
            The need that was fulfilled, or None if no need matched

        Raises:
            NotFound: If the asset or its NPO does not exist
            OwnershipMismatch: If npo_id is not the asset's NPO
            InvalidTransition: If the asset is not Proposed
        """
        asset = repos.assets.get(asset_id)
        AssetOwnershipPolicy.check(asset, npo_id)
        npo = repos.npos.get(asset.npo_id)

        old_status = asset.status
        asset.status = AssetStateMachine.apply(
            AssetStateMachine.APPROVE, old_status, enforce=self.ctx.enforce_asset_transitions
        )

        need = self._fulfill_matching_need(repos, asset, npo)
        if need is not None:
            donor = repos.donors.get(asset.donor_id)
            donor.credit += 1
            repos.needs.put(need)
            repos.npos.put(npo)
            repos.donors.put(donor)
            logger.info(DonationNarrator.need_fulfilled(need.id, need.current_count, need.total_count, donor.id))
        else:
            logger.info(DonationNarrator.no_need_matched(asset.id, npo.id))

        repos.assets.put(asset)
        logger.info(DonationNarrator.asset_status_changed(asset.id, old_status, asset.status, reason="Approved by NPO"))
        return need

    def _fulfill_matching_need(self, repos: 'LedgerRepositories', asset: Asset, npo) -> Optional[Need]:
        """Increment the first matching need in NPO need order; stale need ids are skipped"""
        needs = (repos.needs.find(need_id) for need_id in npo.need_ids)
        need = NeedMatchingPolicy.first_match(
            (n for n in needs if n is not None),
            asset,
            match_product_type=self.ctx.need_match_product_type,
        )
        if need is None:
            return None

        need.current_count += 1
        new_status = NeedStateMachine.status_for(need.current_count, need.total_count)
        NeedStateMachine.validate_transition(need.status, new_status)
        if new_status != need.status:
            need.status = new_status
            logger.info(DonationNarrator.need_completed(need.id))
        return need

    # ========== Custody ==========

    def borrow_asset(self, repos: 'LedgerRepositories', asset_id: str, recipient_id: str) -> Asset:
        return self._hand_over(repos, asset_id, recipient_id, AssetStateMachine.BORROW)

    def give_asset(self, repos: 'LedgerRepositories', asset_id: str, recipient_id: str) -> Asset:
        return self._hand_over(repos, asset_id, recipient_id, AssetStateMachine.GIVE)

    def _hand_over(self, repos: 'LedgerRepositories', asset_id: str, recipient_id: str, action: str) -> Asset:
        """
        Lend or give an asset to a recipient.

        Raises:
            NotFound: If the asset or recipient does not exist
            InvalidTransition: If the asset is not Approved (when enforced)
        """
        asset = repos.assets.get(asset_id)
        recipient = repos.recipients.get(recipient_id)

        old_status = asset.status
        asset.status = AssetStateMachine.apply(action, old_status, enforce=self.ctx.enforce_asset_transitions)
        RelationshipManager.record_custody(asset, recipient)

        repos.assets.put(asset)
        repos.recipients.put(recipient)
        logger.info(DonationNarrator.custody_changed(asset.id, recipient.id, asset.status))
        return asset

    def get_back_asset(self, repos: 'LedgerRepositories', asset_id: str, recipient_id: str) -> Asset:
        """
        Return an asset from a recipient to Approved.

        Removing an asset the recipient does not list is a no-op, so calling this
        twice leaves the recipient unchanged.
        """
        asset = repos.assets.get(asset_id)
        recipient = repos.recipients.get(recipient_id)

        old_status = asset.status
        asset.status = AssetStateMachine.apply(
            AssetStateMachine.GET_BACK, old_status, enforce=self.ctx.enforce_asset_transitions
        )
        was_listed = RelationshipManager.release_custody(asset.id, recipient)

        repos.assets.put(asset)
        repos.recipients.put(recipient)
        logger.info(DonationNarrator.asset_returned(asset.id, recipient.id, was_listed))
        return asset

    # ========== Deletion ==========

    def delete_asset(self, repos: 'LedgerRepositories', asset_id: str, npo_id: str) -> Asset:
        """
        Remove an asset from the ledger and from its donor's and NPO's lists.

        Raises:
            NotFound: If the asset, its NPO or its donor does not exist
            OwnershipMismatch: If npo_id is not the asset's NPO
        """
        asset = repos.assets.get(asset_id)
        AssetOwnershipPolicy.check(asset, npo_id)
        npo = repos.npos.get(asset.npo_id)
        donor = repos.donors.get(asset.donor_id)

        repos.assets.delete(asset.id)
        RelationshipManager.unlink_deleted_asset(asset.id, donor, npo)

        repos.npos.put(npo)
        repos.donors.put(donor)
        logger.info(DonationNarrator.asset_deleted(asset.id, npo.id, donor.id))
        return asset

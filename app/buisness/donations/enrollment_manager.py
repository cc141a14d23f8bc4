"""
EnrollmentManager - Domain service for enrolling ledger participants

Creates Donors, NPOs, Recipients and Needs with empty relationship lists.
"""

from typing import TYPE_CHECKING
from app.data.donations import Donor, NPO, Need, NeedStatus, Recipient
from app.buisness.donations.narrator import DonationNarrator
from app.buisness.donations.policies.enrollment_uniqueness import EnrollmentUniquenessPolicy
from app.buisness.donations.relationship_manager import RelationshipManager
from app.logger import get_logger

if TYPE_CHECKING:
    from app.buisness.donations.context import DonationLedgerContext
    from app.buisness.ledger.record_repository import LedgerRepositories

logger = get_logger("donation_ledger.buisness.donations.enrollment")


class EnrollmentManager:
    """
    Domain service for enrollment operations.

    Responsibilities:
    - Build new records with empty relationship lists
    - Enforce id uniqueness across the shared key space
    - Register needs on their NPO
    """

    def __init__(self, ctx: 'DonationLedgerContext'):
        self.ctx = ctx

    def _check_new_id(self, repos: 'LedgerRepositories', key: str, kind: str) -> None:
        EnrollmentUniquenessPolicy.check(repos, key, kind, allow_overwrite=self.ctx.allow_enrollment_overwrite)

    def enroll_donor(self, repos: 'LedgerRepositories', donor_id: str, name: str, phone: str) -> Donor:
        self._check_new_id(repos, donor_id, Donor.KIND)
        donor = Donor(id=donor_id, name=name, phone=phone, credit=0, asset_ids=[])
        repos.donors.put(donor)
        logger.info(DonationNarrator.enrolled(Donor.KIND, donor_id, name))
        return donor

    def enroll_npo(self, repos: 'LedgerRepositories', npo_id: str, name: str) -> NPO:
        self._check_new_id(repos, npo_id, NPO.KIND)
        npo = NPO(id=npo_id, name=name, asset_ids=[], need_ids=[])
        repos.npos.put(npo)
        logger.info(DonationNarrator.enrolled(NPO.KIND, npo_id, name))
        return npo

    def enroll_recipient(self, repos: 'LedgerRepositories', recipient_id: str, name: str, recipient_type: str) -> Recipient:
        self._check_new_id(repos, recipient_id, Recipient.KIND)
        recipient = Recipient(id=recipient_id, name=name, type=recipient_type, asset_ids=[])
        repos.recipients.put(recipient)
        logger.info(DonationNarrator.enrolled(Recipient.KIND, recipient_id, name))
        return recipient

    def enroll_needs(
        self,
        repos: 'LedgerRepositories',
        need_id: str,
        npo_id: str,
        name: str,
        product_type: str,
        total_count: str,
    ) -> Need:
        """
        Declare a need for an NPO and append it to the NPO's need list.

        Args:
            total_count: Decimal string; a non-numeric value falls back to 0

        Raises:
            NotFound: If the NPO does not exist
            DuplicateRecord: If need_id is already on the ledger
        """
        npo = repos.npos.get(npo_id)
        self._check_new_id(repos, need_id, Need.KIND)

        need = Need(
            id=need_id,
            npo_id=npo.id,
            name=name,
            product_type=product_type,
            total_count=self.parse_total_count(need_id, total_count),
            current_count=0,
            status=NeedStatus.INCOMPLETE,
        )
        RelationshipManager.register_need(npo, need)

        repos.npos.put(npo)
        repos.needs.put(need)
        logger.info(DonationNarrator.need_enrolled(need_id, npo.id, name, need.total_count))
        return need

    @staticmethod
    def parse_total_count(need_id: str, raw_value) -> int:
        """Parse a decimal count; non-numeric input yields 0 and negatives clamp to 0"""
        if isinstance(raw_value, int):
            return max(raw_value, 0)
        try:
            value = int(str(raw_value).strip())
        except (TypeError, ValueError):
            logger.warning(DonationNarrator.total_count_fallback(need_id, raw_value))
            return 0
        return max(value, 0)

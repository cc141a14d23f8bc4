"""
DonationLedgerContext - Domain Facade for the donation ledger

Provides an intention-revealing interface for every state-changing ledger
operation. Each call runs inside its own LedgerTransaction: records are read
into the working copy, changed by EnrollmentManager / AssetLifecycleManager,
and committed together. Any domain error rolls the whole call back.
"""

from typing import Callable, Optional, TypeVar
from flask import current_app, has_app_context
from app.buisness.ledger.ledger_adapter import LedgerAdapter
from app.buisness.ledger.ledger_transaction import LedgerTransaction
from app.buisness.ledger.record_repository import LedgerRepositories
from app.buisness.donations.enrollment_manager import EnrollmentManager
from app.buisness.donations.asset_lifecycle_manager import AssetLifecycleManager
from app.data.donations import Asset, Donor, NPO, Need, Recipient

T = TypeVar('T')


class DonationLedgerContext:
    """
    Domain Facade for donation ledger operations.

    Policy switches default to the Flask app config
    (ALLOW_ENROLLMENT_OVERWRITE, ENFORCE_ASSET_TRANSITIONS,
    NEED_MATCH_PRODUCT_TYPE) and may be overridden per context.

    Pattern: Domain Facade / Aggregate Controller
    """

    def __init__(
        self,
        adapter: Optional[LedgerAdapter] = None,
        allow_enrollment_overwrite: Optional[bool] = None,
        enforce_asset_transitions: Optional[bool] = None,
        need_match_product_type: Optional[bool] = None,
    ):
        self.adapter = adapter or LedgerAdapter()
        self.allow_enrollment_overwrite = self._setting('ALLOW_ENROLLMENT_OVERWRITE', allow_enrollment_overwrite, False)
        self.enforce_asset_transitions = self._setting('ENFORCE_ASSET_TRANSITIONS', enforce_asset_transitions, True)
        self.need_match_product_type = self._setting('NEED_MATCH_PRODUCT_TYPE', need_match_product_type, False)

        self.last_tx_id: Optional[str] = None

        # Initialize managers
        self.enrollment_manager = EnrollmentManager(self)
        self.asset_manager = AssetLifecycleManager(self)

    @staticmethod
    def _setting(name: str, override: Optional[bool], default: bool) -> bool:
        if override is not None:
            return override
        if has_app_context():
            return bool(current_app.config.get(name, default))
        return default

    def _run(self, work: Callable[[LedgerRepositories], T]) -> T:
        """Run work inside one ledger transaction and commit it"""
        with LedgerTransaction(self.adapter) as tx:
            self.last_tx_id = tx.tx_id
            result = work(LedgerRepositories(tx))
        return result

    # ========== Enrollment ==========

    def enroll_donor(self, donor_id: str, name: str, phone: str) -> Donor:
        return self._run(lambda repos: self.enrollment_manager.enroll_donor(repos, donor_id, name, phone))

    def enroll_npo(self, npo_id: str, name: str) -> NPO:
        return self._run(lambda repos: self.enrollment_manager.enroll_npo(repos, npo_id, name))

    def enroll_recipient(self, recipient_id: str, name: str, recipient_type: str) -> Recipient:
        return self._run(lambda repos: self.enrollment_manager.enroll_recipient(repos, recipient_id, name, recipient_type))

    def enroll_needs(self, need_id: str, npo_id: str, name: str, product_type: str, total_count: str) -> Need:
        return self._run(
            lambda repos: self.enrollment_manager.enroll_needs(repos, need_id, npo_id, name, product_type, total_count)
        )

    # ========== Asset lifecycle ==========

    def propose_asset(
        self,
        asset_id: str,
        name: str,
        donor_id: str,
        npo_id: str,
        product_type: str,
        picture_hash: str,
    ) -> Asset:
        return self._run(
            lambda repos: self.asset_manager.propose_asset(
                repos, asset_id, name, donor_id, npo_id, product_type, picture_hash
            )
        )

    def approve_asset(self, asset_id: str, npo_id: str) -> Optional[Need]:
        """Approve an asset; returns the need it fulfilled, if any"""
        return self._run(lambda repos: self.asset_manager.approve_asset(repos, asset_id, npo_id))

    def borrow_asset(self, asset_id: str, recipient_id: str) -> Asset:
        return self._run(lambda repos: self.asset_manager.borrow_asset(repos, asset_id, recipient_id))

    def give_asset(self, asset_id: str, recipient_id: str) -> Asset:
        return self._run(lambda repos: self.asset_manager.give_asset(repos, asset_id, recipient_id))

    def get_back_asset(self, asset_id: str, recipient_id: str) -> Asset:
        return self._run(lambda repos: self.asset_manager.get_back_asset(repos, asset_id, recipient_id))

    def delete_asset(self, asset_id: str, npo_id: str) -> Asset:
        return self._run(lambda repos: self.asset_manager.delete_asset(repos, asset_id, npo_id))

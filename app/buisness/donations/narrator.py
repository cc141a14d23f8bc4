"""
DonationNarrator - log line composer for donation lifecycle events

Keeps lifecycle log wording consistent and out of the managers.
"""

from typing import Optional


class DonationNarrator:
    """
    Composes the messages written to the ledger log for each lifecycle event.
    """

    @staticmethod
    def enrolled(kind: str, record_id: str, name: str) -> str:
        return f"{kind} enrolled: {record_id} ({name})"

    @staticmethod
    def need_enrolled(need_id: str, npo_id: str, name: str, total_count: int) -> str:
        return f"Need enrolled: {need_id} for NPO {npo_id} | {name} x{total_count}"

    @staticmethod
    def total_count_fallback(need_id: str, raw_value: str) -> str:
        return f"Need {need_id}: total count '{raw_value}' is not a number, using 0"

    @staticmethod
    def asset_proposed(asset_id: str, donor_id: str, npo_id: str) -> str:
        return f"Asset proposed: {asset_id} | Donor: {donor_id} | NPO: {npo_id}"

    @staticmethod
    def asset_status_changed(asset_id: str, from_status: str, to_status: str, reason: Optional[str] = None) -> str:
        comment = f"Asset {asset_id} status: {from_status} → {to_status}"
        if reason:
            comment += f" | {reason}"
        return comment

    @staticmethod
    def need_fulfilled(need_id: str, current_count: int, total_count: int, donor_id: str) -> str:
        return f"Need {need_id} progress {current_count}/{total_count} | Donor {donor_id} credited"

    @staticmethod
    def need_completed(need_id: str) -> str:
        return f"Need {need_id} complete"

    @staticmethod
    def no_need_matched(asset_id: str, npo_id: str) -> str:
        return f"Asset {asset_id} approved without a matching open need at NPO {npo_id}"

    @staticmethod
    def custody_changed(asset_id: str, recipient_id: str, status: str) -> str:
        return f"Asset {asset_id} {status.lower()} to recipient {recipient_id}"

    @staticmethod
    def asset_returned(asset_id: str, recipient_id: str, was_listed: bool) -> str:
        comment = f"Asset {asset_id} returned by recipient {recipient_id}"
        if not was_listed:
            comment += " | recipient did not list the asset"
        return comment

    @staticmethod
    def asset_deleted(asset_id: str, npo_id: str, donor_id: str) -> str:
        return f"Asset deleted: {asset_id} | NPO: {npo_id} | Donor: {donor_id}"

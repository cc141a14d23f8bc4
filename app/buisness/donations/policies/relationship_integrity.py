"""
Relationship Integrity Policy

Recomputes the id-list relationships from the records they point at and
reports every place the stored lists disagree.
"""

from typing import Dict, List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from app.data.donations import Asset, Donor, NPO, Need


class RelationshipIntegrityPolicy:
    """
    Derived-view check for the ledger's denormalized lists.

    - Donor.asset_ids must equal the assets whose donor_id is the donor
    - NPO.asset_ids must equal the assets whose npo_id is the NPO
    - NPO.need_ids must list exactly the needs whose npo_id is the NPO
    - Asset donor/NPO references must resolve
    - Need counters must satisfy 0 <= current <= total with a matching status

    Recipient.asset_ids is not checked: it keeps assets that were lent or
    given and later deleted, and is only pruned on get-back.
    """

    @classmethod
    def find_violations(
        cls,
        donors: Sequence['Donor'],
        npos: Sequence['NPO'],
        assets: Sequence['Asset'],
        needs: Sequence['Need'],
    ) -> List[str]:
        from app.buisness.donations.state_machine import NeedStateMachine

        violations = []
        donor_ids = {donor.id for donor in donors}
        npo_ids = {npo.id for npo in npos}

        assets_by_donor: Dict[str, List[str]] = {}
        assets_by_npo: Dict[str, List[str]] = {}
        for asset in assets:
            assets_by_donor.setdefault(asset.donor_id, []).append(asset.id)
            assets_by_npo.setdefault(asset.npo_id, []).append(asset.id)
            if asset.donor_id not in donor_ids:
                violations.append(f"Asset {asset.id} references missing donor {asset.donor_id}")
            if asset.npo_id not in npo_ids:
                violations.append(f"Asset {asset.id} references missing NPO {asset.npo_id}")

        for donor in donors:
            violations.extend(cls._compare(f"Donor {donor.id}", donor.asset_ids, assets_by_donor.get(donor.id, [])))

        needs_by_npo: Dict[str, List[str]] = {}
        for need in needs:
            needs_by_npo.setdefault(need.npo_id, []).append(need.id)

        for npo in npos:
            violations.extend(cls._compare(f"NPO {npo.id}", npo.asset_ids, assets_by_npo.get(npo.id, [])))
            violations.extend(cls._compare(f"NPO {npo.id} needs", npo.need_ids, needs_by_npo.get(npo.id, [])))

        for need in needs:
            if need.current_count < 0 or need.current_count > need.total_count:
                violations.append(
                    f"Need {need.id} count {need.current_count} outside 0..{need.total_count}"
                )
            expected = NeedStateMachine.status_for(need.current_count, need.total_count)
            if need.status != expected:
                violations.append(f"Need {need.id} status {need.status} should be {expected}")

        return violations

    @staticmethod
    def _compare(label: str, stored: Sequence[str], derived: Sequence[str]) -> List[str]:
        problems = []
        if len(stored) != len(set(stored)):
            problems.append(f"{label} lists duplicate ids")
        missing = sorted(set(derived) - set(stored))
        extra = sorted(set(stored) - set(derived))
        if missing:
            problems.append(f"{label} is missing {', '.join(missing)}")
        if extra:
            problems.append(f"{label} lists unknown {', '.join(extra)}")
        return problems

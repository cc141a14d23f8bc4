"""
Policy classes for donation ledger business rules

Policies are composable validation rules that enforce business invariants.
They raise domain exceptions when violations are detected.
"""

from app.buisness.donations.policies.asset_ownership import AssetOwnershipPolicy
from app.buisness.donations.policies.enrollment_uniqueness import EnrollmentUniquenessPolicy
from app.buisness.donations.policies.need_matching import NeedMatchingPolicy
from app.buisness.donations.policies.relationship_integrity import RelationshipIntegrityPolicy

__all__ = [
    'AssetOwnershipPolicy',
    'EnrollmentUniquenessPolicy',
    'NeedMatchingPolicy',
    'RelationshipIntegrityPolicy',
]

"""
State machines for asset and need lifecycles

Encodes valid transitions and provides guard hooks.
Keeps "what is allowed" separate from "how persistence occurs".
"""

from typing import Dict, Set, Tuple
from app.buisness.donations.errors import InvalidTransition, InvalidArgument
from app.data.donations.asset import AssetStatus
from app.data.donations.need import NeedStatus


class AssetStateMachine:
    """
    State machine for Asset.status.

    Proposed → Approved → {Borrowed, Given} → Approved (returned).
    Deletion is not a transition: it removes the asset from any status.
    """

    PROPOSED = AssetStatus.PROPOSED
    APPROVED = AssetStatus.APPROVED
    BORROWED = AssetStatus.BORROWED
    GIVEN = AssetStatus.GIVEN

    # Valid transitions: from_status -> set of allowed to_status values
    TRANSITIONS: Dict[str, Set[str]] = {
        PROPOSED: {APPROVED},
        APPROVED: {BORROWED, GIVEN},
        BORROWED: {APPROVED},
        GIVEN: {APPROVED},
    }

    # Lifecycle actions: action -> (statuses it may start from, resulting status)
    # get_back from Approved is accepted so returning twice is harmless.
    APPROVE = 'approve'
    BORROW = 'borrow'
    GIVE = 'give'
    GET_BACK = 'get_back'

    ACTIONS: Dict[str, Tuple[Set[str], str]] = {
        APPROVE: ({PROPOSED}, APPROVED),
        BORROW: ({APPROVED}, BORROWED),
        GIVE: ({APPROVED}, GIVEN),
        GET_BACK: ({BORROWED, GIVEN, APPROVED}, APPROVED),
    }

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        """
        Check if a status change is valid.

        Args:
            from_status: Current status
            to_status: Target status

        Returns:
            bool: True if transition is allowed
        """
        return to_status in cls.TRANSITIONS.get(from_status, set())

    @classmethod
    def can_apply(cls, action: str, from_status: str) -> bool:
        if action not in cls.ACTIONS:
            return False
        allowed_from, _ = cls.ACTIONS[action]
        return from_status in allowed_from

    @classmethod
    def apply(cls, action: str, from_status: str, enforce: bool = True) -> str:
        """
        Validate a lifecycle action and return the status it leads to.

        Args:
            action: One of APPROVE, BORROW, GIVE, GET_BACK
            from_status: Asset's current status
            enforce: When False any starting status is accepted

        Returns:
            str: The resulting status

        Raises:
            InvalidArgument: If the action is unknown
            InvalidTransition: If the action is not allowed from from_status
        """
        if action not in cls.ACTIONS:
            raise InvalidArgument(f"Unknown asset action: {action}")
        allowed_from, to_status = cls.ACTIONS[action]
        if enforce and from_status not in allowed_from:
            raise InvalidTransition(
                f"Cannot {action.replace('_', ' ')} asset in status {from_status or 'unknown'} "
                f"(allowed from: {', '.join(sorted(allowed_from))})"
            )
        return to_status

    @classmethod
    def get_allowed_actions(cls, from_status: str) -> Set[str]:
        """Get set of actions that may be applied from the current status"""
        return {action for action in cls.ACTIONS if cls.can_apply(action, from_status)}


class NeedStateMachine:
    """
    State machine for Need.status.

    Incomplete → Complete, exactly once, when the count reaches the total.
    """

    INCOMPLETE = NeedStatus.INCOMPLETE
    COMPLETE = NeedStatus.COMPLETE

    TERMINAL_STATES = {COMPLETE}

    TRANSITIONS: Dict[str, Set[str]] = {
        INCOMPLETE: {COMPLETE},
        # COMPLETE is terminal
    }

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        if from_status == to_status:
            return True
        if from_status in cls.TERMINAL_STATES:
            return False
        return to_status in cls.TRANSITIONS.get(from_status, set())

    @classmethod
    def validate_transition(cls, from_status: str, to_status: str) -> None:
        """
        Raises:
            InvalidTransition: If transition is not allowed
        """
        if not cls.can_transition(from_status, to_status):
            raise InvalidTransition(f"Invalid need status transition: {from_status} → {to_status}")

    @classmethod
    def status_for(cls, current_count: int, total_count: int) -> str:
        """Status a need should hold for the given counters"""
        if total_count > 0 and current_count >= total_count:
            return cls.COMPLETE
        return cls.INCOMPLETE

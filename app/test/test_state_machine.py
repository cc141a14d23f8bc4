"""
Tests for the asset and need state machines
"""

import pytest
from app.buisness.donations.errors import InvalidArgument, InvalidTransition
from app.buisness.donations.state_machine import AssetStateMachine, NeedStateMachine


@pytest.mark.parametrize('action, from_status, to_status', [
    ('approve', 'Proposed', 'Approved'),
    ('borrow', 'Approved', 'Borrowed'),
    ('give', 'Approved', 'Given'),
    ('get_back', 'Borrowed', 'Approved'),
    ('get_back', 'Given', 'Approved'),
    ('get_back', 'Approved', 'Approved'),
])
def test_allowed_asset_actions(action, from_status, to_status):
    assert AssetStateMachine.apply(action, from_status) == to_status


@pytest.mark.parametrize('action, from_status', [
    ('approve', 'Approved'),
    ('approve', 'Borrowed'),
    ('borrow', 'Proposed'),
    ('borrow', 'Borrowed'),
    ('give', 'Given'),
    ('get_back', 'Proposed'),
])
def test_rejected_asset_actions(action, from_status):
    with pytest.raises(InvalidTransition):
        AssetStateMachine.apply(action, from_status)


def test_enforcement_can_be_disabled():
    assert AssetStateMachine.apply('borrow', 'Proposed', enforce=False) == 'Borrowed'


def test_unknown_action():
    with pytest.raises(InvalidArgument):
        AssetStateMachine.apply('sell', 'Approved')


def test_allowed_actions_per_status():
    assert AssetStateMachine.get_allowed_actions('Proposed') == {'approve'}
    assert AssetStateMachine.get_allowed_actions('Approved') == {'borrow', 'give', 'get_back'}
    assert AssetStateMachine.can_transition('Approved', 'Borrowed')
    assert not AssetStateMachine.can_transition('Proposed', 'Given')


def test_need_status_for_counts():
    assert NeedStateMachine.status_for(0, 2) == 'I'
    assert NeedStateMachine.status_for(1, 2) == 'I'
    assert NeedStateMachine.status_for(2, 2) == 'C'
    assert NeedStateMachine.status_for(0, 0) == 'I', "A zero-total need is never complete"


def test_complete_need_is_terminal():
    NeedStateMachine.validate_transition('I', 'C')
    NeedStateMachine.validate_transition('C', 'C')
    with pytest.raises(InvalidTransition):
        NeedStateMachine.validate_transition('C', 'I')

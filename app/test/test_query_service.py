"""
Tests for the ledger query service: snapshots, history, raw lookups, integrity
"""

import json
import pytest
from app.buisness.donations.errors import InvalidArgument, NotFound
from app.buisness.ledger.ledger_adapter import LedgerAdapter
from app.data.donations import Donor


def test_read_everything_empty_ledger(query_service):
    everything = json.loads(query_service.read_everything())
    assert everything == {'Assets': [], 'Donors': [], 'NPOs': [], 'Recipients': [], 'Needs': []}


def test_read_everything_groups_by_kind_in_key_order(enrolled, query_service):
    enrolled.enroll_donor('d0', 'Zed', '555-0199')
    enrolled.enroll_needs('e1', 'n1', 'Chair', 'furniture', '1')
    enrolled.propose_asset('a1', 'Chair', 'd1', 'n1', 'furniture', 'hash1')

    everything = json.loads(query_service.read_everything())
    assert [d['id'] for d in everything['Donors']] == ['d0', 'd1']
    assert [n['id'] for n in everything['NPOs']] == ['n1']
    assert [r['id'] for r in everything['Recipients']] == ['r1']
    assert [e['id'] for e in everything['Needs']] == ['e1']
    assert everything['Assets'][0]['status'] == 'Proposed'
    assert list(everything) == ['Assets', 'Donors', 'NPOs', 'Recipients', 'Needs']


def test_ids_need_no_prefix_convention(ctx, query_service):
    """Records are grouped by kind even when ids would collide lexically"""
    ctx.enroll_npo('x-1', 'Helping Hands')
    ctx.enroll_donor('x-2', 'Alice', '555-0100')

    everything = query_service.snapshot()
    assert [n.id for n in everything['NPOs']] == ['x-1']
    assert [d.id for d in everything['Donors']] == ['x-2']


def test_query_returns_stored_bytes(enrolled, query_service):
    raw = query_service.query('d1')
    assert Donor.from_bytes(raw).name == 'Alice'
    assert raw == LedgerAdapter().get('d1'), "query returns the stored value verbatim"


def test_query_missing_key(query_service):
    with pytest.raises(NotFound) as excinfo:
        query_service.query('nothing')
    assert 'nothing' in excinfo.value.message


def test_history_tracks_every_change(enrolled, query_service):
    enrolled.propose_asset('a1', 'Chair', 'd1', 'n1', 'furniture', 'hash1')
    proposed_tx = enrolled.last_tx_id
    enrolled.approve_asset('a1', 'n1')
    enrolled.borrow_asset('a1', 'r1')
    enrolled.delete_asset('a1', 'n1')
    deleted_tx = enrolled.last_tx_id

    history = json.loads(query_service.get_history('a1'))
    assert [entry['value']['status'] for entry in history[:3]] == ['Proposed', 'Approved', 'Borrowed']
    assert history[0]['txId'] == proposed_tx
    assert history[0]['isDelete'] is False
    assert history[0]['timestamp']

    last = history[-1]
    assert last['isDelete'] is True
    assert last['txId'] == deleted_tx
    assert last['value']['id'] == '', "Deletion entries carry a zero-valued asset"


def test_history_of_unknown_asset_is_empty(query_service):
    assert json.loads(query_service.get_history('a-none')) == []


def test_history_rejects_blank_ids(query_service):
    with pytest.raises(InvalidArgument):
        query_service.get_history('')


def test_history_survives_id_reuse(enrolled, query_service):
    """A deleted asset id re-enrolled as a donor still shows the asset's trail"""
    enrolled.propose_asset('a1', 'Chair', 'd1', 'n1', 'furniture', 'hash1')
    enrolled.delete_asset('a1', 'n1')
    enrolled.enroll_donor('a1', 'Bob', '555-0101')

    history = json.loads(query_service.get_history('a1'))
    assert len(history) == 3
    assert history[0]['value']['status'] == 'Proposed'
    assert history[1]['isDelete'] is True
    assert history[2]['isDelete'] is False
    assert history[2]['value']['id'] == '', "Entries written by another kind carry a zero-valued asset"


def test_integrity_flags_broken_lists(enrolled, query_service):
    enrolled.propose_asset('a1', 'Chair', 'd1', 'n1', 'furniture', 'hash1')

    # Simulate a donor record whose list drifted from the assets
    adapter = LedgerAdapter()
    adapter.put('d1', Donor(id='d1', name='Alice', phone='555-0100').to_bytes(), Donor.KIND, 'manual')
    adapter.commit()

    violations = query_service.check_integrity()
    assert any('Donor d1' in v and 'a1' in v for v in violations), violations


def test_integrity_allows_recipient_keeping_deleted_asset(enrolled, query_service, fetch):
    """Deleting a given asset leaves it on the recipient without breaking consistency"""
    enrolled.propose_asset('a1', 'Chair', 'd1', 'n1', 'furniture', 'hash1')
    enrolled.approve_asset('a1', 'n1')
    enrolled.give_asset('a1', 'r1')
    enrolled.delete_asset('a1', 'n1')

    assert fetch('recipients', 'r1').asset_ids == ['a1']
    assert query_service.check_integrity() == []

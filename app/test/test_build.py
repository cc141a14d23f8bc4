"""
Tests for the build orchestrator and the demo ledger
"""

import json
from app.build import build_database
from app.debug.debug_data_manager import insert_debug_data
from app.services.donations.ledger_query_service import LedgerQueryService


def test_build_with_debug_data(app):
    summary = build_database(enable_debug_data=True, app=app)

    assert summary['status'] == 'inserted'
    everything = json.loads(LedgerQueryService().read_everything())
    assert len(everything['Donors']) == 2
    assert len(everything['Assets']) == 3

    statuses = {asset['id']: asset['status'] for asset in everything['Assets']}
    assert statuses == {
        'asset-blanket-1': 'Approved',
        'asset-drill-1': 'Borrowed',
        'asset-coat-1': 'Proposed',
    }
    assert LedgerQueryService().check_integrity() == [], "Demo ledger should be consistent"


def test_debug_data_inserted_once(app):
    build_database(enable_debug_data=True, app=app)
    assert insert_debug_data(enabled=True)['reason'] == 'data_present'


def test_build_only(app):
    assert build_database(enable_debug_data=False, app=app) == {}
    everything = json.loads(LedgerQueryService().read_everything())
    assert all(records == [] for records in everything.values())


def test_debug_data_disabled(app):
    assert insert_debug_data(enabled=False) == {}

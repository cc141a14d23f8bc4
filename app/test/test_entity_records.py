"""
Tests for the ledger record formats (wire field names and empty records)
"""

import json
import pytest
from app.data.donations import Asset, Donor, NPO, Need, OwnerRelation, Recipient, RECORD_TYPES


def test_donor_wire_format():
    """Donor serializes with the ledger's field names"""
    donor = Donor(id='d1', name='Alice', phone='555-0100', credit=2, asset_ids=['a1'])
    data = json.loads(donor.to_bytes())

    assert data == {
        'doctype': 'Donor',
        'id': 'd1',
        'name': 'Alice',
        'phone': '555-0100',
        'credit': 2,
        'assetArray': ['a1'],
    }, "Donor JSON should use doctype/id/name/phone/credit/assetArray"


def test_npo_and_recipient_wire_format():
    npo = json.loads(NPO(id='n1', name='Helping Hands', asset_ids=['a1'], need_ids=['e1']).to_bytes())
    recipient = json.loads(Recipient(id='r1', name='Rita', type='individual').to_bytes())

    assert npo['assetsarray'] == ['a1']
    assert npo['needs'] == ['e1']
    assert recipient['assetarray'] == []
    assert recipient['type'] == 'individual'
    assert recipient['doctype'] == 'Recipient'


def test_asset_wire_format_includes_owner_history():
    asset = Asset(
        id='a1', name='Chair', donor_id='d1', npo_id='n1',
        owner_history=[OwnerRelation(id='r1', username='Rita', user_type='individual')],
        status='Borrowed', product_type='furniture', picture_hash='hash1',
    )
    data = json.loads(asset.to_bytes())

    assert data['donorid'] == 'd1'
    assert data['npoid'] == 'n1'
    assert data['producttype'] == 'furniture'
    assert data['pichash'] == 'hash1'
    assert data['owner'] == [{'id': 'r1', 'username': 'Rita', 'user_type': 'individual'}]
    assert asset.current_holder.id == 'r1', "Last owner entry is the current holder"


def test_need_wire_format_and_helpers():
    need = Need(id='e1', npo_id='n1', name='Chair', product_type='furniture', status='I', total_count=2, current_count=1)
    data = json.loads(need.to_bytes())

    assert data['npoid'] == 'n1'
    assert data['totalcount'] == 2
    assert data['currentcount'] == 1
    assert data['status'] == 'I'
    assert not need.is_complete
    assert need.remaining == 1


def test_records_decode_from_their_own_bytes():
    """Stored bytes decode back into an equal record"""
    donor = Donor(id='d1', name='Alice', phone='555-0100', credit=1, asset_ids=['a1', 'a2'])
    assert Donor.from_bytes(donor.to_bytes()) == donor


def test_missing_value_decodes_to_empty_record():
    """None / empty bytes decode to a zero-valued record with a blank doctype"""
    for record_cls in RECORD_TYPES.values():
        record = record_cls.from_bytes(b'')
        assert record.is_empty(), f"{record_cls.__name__} from empty bytes should be empty"
        assert record.to_dict()['doctype'] == '', "Empty records carry no doctype"

    assert Asset.from_bytes(None) == Asset.empty()


def test_null_lists_decode_to_empty_lists():
    donor = Donor.from_bytes(b'{"id":"d1","name":"Alice","phone":"1","credit":0,"assetArray":null}')
    assert donor.asset_ids == []


def test_non_object_json_is_rejected():
    with pytest.raises(ValueError):
        Donor.from_bytes(b'["not", "a", "record"]')
    with pytest.raises(ValueError):
        Donor.from_bytes(b'not json')


def test_record_types_keyed_by_kind():
    assert set(RECORD_TYPES) == {'Donor', 'NPO', 'Recipient', 'Asset', 'Need'}

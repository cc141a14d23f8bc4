"""
Tests for the ledger HTTP API
"""

import pytest


def invoke(client, function, *args):
    return client.post('/ledger/invoke', json={'function': function, 'args': list(args)})


@pytest.fixture
def seeded(client):
    """Donor, NPO, recipient and one proposed asset enrolled through the API"""
    for function, args in [
        ('enroll_donor', ['d1', 'Alice', '555-0100']),
        ('enroll_npo', ['n1', 'Helping Hands']),
        ('enroll_npo', ['n2', 'Other NPO']),
        ('enroll_recipient', ['r1', 'Rita', 'individual']),
        ('enroll_needs', ['e1', 'n1', 'Chair', 'furniture', '1']),
        ('propose_asset', ['a1', 'Chair', 'd1', 'n1', 'furniture', 'hash1']),
    ]:
        response = invoke(client, function, *args)
        assert response.status_code == 200, response.get_data(as_text=True)
    return client


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}
    assert response.headers['X-Content-Type-Options'] == 'nosniff'


def test_invoke_mutation_reports_tx_id(client):
    response = invoke(client, 'enroll_donor', 'd1', 'Alice', '555-0100')

    assert response.status_code == 200
    assert response.headers.get('X-Ledger-Tx-Id'), "Mutations expose their transaction id"
    assert response.get_data() == b''


def test_query_endpoint(seeded):
    response = seeded.get('/ledger/query/d1')

    assert response.status_code == 200
    assert response.mimetype == 'application/json'
    assert response.get_json()['assetArray'] == ['a1']


def test_everything_endpoint(seeded):
    invoke(seeded, 'approve_asset', 'a1', 'n1')
    body = seeded.get('/ledger/everything').get_json()

    assert body['Needs'][0]['status'] == 'C'
    assert body['Donors'][0]['credit'] == 1
    assert [npo['id'] for npo in body['NPOs']] == ['n1', 'n2']


def test_history_endpoint(seeded):
    invoke(seeded, 'approve_asset', 'a1', 'n1')
    history = seeded.get('/ledger/history/a1').get_json()

    assert [entry['value']['status'] for entry in history] == ['Proposed', 'Approved']


def test_integrity_endpoint(seeded):
    body = seeded.get('/ledger/integrity').get_json()
    assert body == {'consistent': True, 'violations': []}


@pytest.mark.parametrize('function, args, status, error_type', [
    ('approve_asset', ['a1'], 400, 'InvalidArgument'),
    ('borrow_asset', ['a1', 'r1'], 400, 'InvalidTransition'),
    ('approve_asset', ['a1', 'n2'], 403, 'OwnershipMismatch'),
    ('approve_asset', ['a-missing', 'n1'], 404, 'NotFound'),
    ('enroll_npo', ['n1', 'Again'], 409, 'DuplicateRecord'),
    ('no_such_function', [], 400, 'InvalidArgument'),
])
def test_error_status_codes(seeded, function, args, status, error_type):
    response = invoke(seeded, function, *args)

    assert response.status_code == status
    body = response.get_json()
    assert body['type'] == error_type
    assert body['error']


def test_query_missing_key_is_404(client):
    response = client.get('/ledger/query/ghost')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Nil amount for ghost', 'type': 'NotFound'}


@pytest.mark.parametrize('body', [
    None,
    {'args': []},
    {'function': 'query', 'args': 'd1'},
    ['query', 'd1'],
])
def test_malformed_invoke_body(client, body):
    if body is None:
        response = client.post('/ledger/invoke', data='not json', content_type='text/plain')
    else:
        response = client.post('/ledger/invoke', json=body)

    assert response.status_code == 400
    assert response.get_json()['type'] == 'InvalidArgument'

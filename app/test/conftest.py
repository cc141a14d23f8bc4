"""
Pytest configuration and fixtures for the donation ledger tests
"""
import os

# Must be set before the app (and its singleton logger) is imported
os.environ.setdefault('SECRET_KEY', 'test-secret-key')
os.environ.setdefault('LOG_TO_FILE', 'false')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

import pytest  # noqa: E402
from app import create_app  # noqa: E402
from app import db as _db  # noqa: E402


TEST_CONFIG = {
    'TESTING': True,
    'SECRET_KEY': 'test-secret-key',
    'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    'RATELIMIT_ENABLED': False,
    'ALLOW_ENROLLMENT_OVERWRITE': False,
    'ENFORCE_ASSET_TRANSITIONS': True,
    'NEED_MATCH_PRODUCT_TYPE': False,
}


@pytest.fixture(scope='function')
def app():
    """Create Flask application with a fresh in-memory ledger"""
    app = create_app(dict(TEST_CONFIG))

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create Flask test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def ctx(app):
    """Ledger context using the app's policy settings"""
    from app.buisness.donations.context import DonationLedgerContext
    return DonationLedgerContext()


@pytest.fixture(scope='function')
def query_service(app):
    from app.services.donations.ledger_query_service import LedgerQueryService
    return LedgerQueryService()


@pytest.fixture(scope='function')
def fetch(app):
    """Load one committed record: fetch('donors', 'd1')"""
    from app.buisness.ledger.ledger_transaction import LedgerTransaction
    from app.buisness.ledger.record_repository import LedgerRepositories

    def _fetch(kind, key):
        return getattr(LedgerRepositories(LedgerTransaction()), kind).get(key)

    return _fetch


@pytest.fixture(scope='function')
def enrolled(ctx):
    """Donor d1, NPO n1 and recipient r1 enrolled"""
    ctx.enroll_donor('d1', 'Alice', '555-0100')
    ctx.enroll_npo('n1', 'Helping Hands')
    ctx.enroll_recipient('r1', 'Rita', 'individual')
    return ctx


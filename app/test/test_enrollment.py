"""
Tests for donor, NPO, recipient and need enrollment
"""

import pytest
from app.buisness.donations.context import DonationLedgerContext
from app.buisness.donations.enrollment_manager import EnrollmentManager
from app.buisness.donations.errors import DuplicateRecord, InvalidArgument, NotFound


def test_enroll_donor_starts_with_no_credit(ctx, fetch):
    ctx.enroll_donor('d1', 'Alice', '555-0100')

    donor = fetch('donors', 'd1')
    assert donor.name == 'Alice'
    assert donor.phone == '555-0100'
    assert donor.credit == 0, "New donors start with zero credit"
    assert donor.asset_ids == []


def test_enroll_npo_and_recipient(ctx, fetch):
    ctx.enroll_npo('n1', 'Helping Hands')
    ctx.enroll_recipient('r1', 'Rita', 'individual')

    npo = fetch('npos', 'n1')
    assert npo.asset_ids == [] and npo.need_ids == []
    recipient = fetch('recipients', 'r1')
    assert recipient.type == 'individual'
    assert recipient.asset_ids == []


def test_enroll_needs_appends_to_npo(ctx, fetch):
    ctx.enroll_npo('n1', 'Helping Hands')
    ctx.enroll_needs('e1', 'n1', 'Chair', 'furniture', '2')
    ctx.enroll_needs('e2', 'n1', 'Table', 'furniture', '1')

    need = fetch('needs', 'e1')
    assert need.status == 'I', "New needs are Incomplete"
    assert need.total_count == 2
    assert need.current_count == 0
    assert fetch('npos', 'n1').need_ids == ['e1', 'e2'], "Need ids are appended in order"


def test_enroll_needs_requires_npo(ctx, fetch):
    with pytest.raises(NotFound):
        ctx.enroll_needs('e1', 'n-missing', 'Chair', 'furniture', '2')

    with pytest.raises(NotFound):
        fetch('needs', 'e1')


def test_enroll_needs_rejects_non_npo_owner(ctx):
    ctx.enroll_donor('d1', 'Alice', '555-0100')
    with pytest.raises(InvalidArgument):
        ctx.enroll_needs('e1', 'd1', 'Chair', 'furniture', '2')


@pytest.mark.parametrize('raw, expected', [
    ('3', 3),
    (' 4 ', 4),
    ('abc', 0),
    ('', 0),
    ('-2', 0),
    (5, 5),
])
def test_parse_total_count(raw, expected):
    assert EnrollmentManager.parse_total_count('e1', raw) == expected


def test_duplicate_enrollment_is_rejected(ctx, fetch):
    ctx.enroll_donor('d1', 'Alice', '555-0100')

    with pytest.raises(DuplicateRecord):
        ctx.enroll_donor('d1', 'Mallory', '555-9999')
    with pytest.raises(DuplicateRecord):
        ctx.enroll_npo('d1', 'Not a donor')

    assert fetch('donors', 'd1').name == 'Alice', "Original record must be untouched"


def test_overwrite_allowed_only_for_same_kind(app, fetch):
    ctx = DonationLedgerContext(allow_enrollment_overwrite=True)
    ctx.enroll_donor('d1', 'Alice', '555-0100')
    ctx.enroll_donor('d1', 'Alice B.', '555-0101')

    assert fetch('donors', 'd1').name == 'Alice B.'
    with pytest.raises(DuplicateRecord):
        ctx.enroll_recipient('d1', 'Rita', 'individual')


def test_overwrite_flag_read_from_app_config(app):
    app.config['ALLOW_ENROLLMENT_OVERWRITE'] = True
    assert DonationLedgerContext().allow_enrollment_overwrite is True


def test_blank_id_is_rejected(ctx):
    with pytest.raises(InvalidArgument):
        ctx.enroll_donor('', 'Alice', '555-0100')
    with pytest.raises(InvalidArgument):
        ctx.enroll_npo('   ', 'Helping Hands')


def test_each_enrollment_is_its_own_transaction(ctx):
    ctx.enroll_donor('d1', 'Alice', '555-0100')
    first = ctx.last_tx_id
    ctx.enroll_npo('n1', 'Helping Hands')

    assert first and ctx.last_tx_id and first != ctx.last_tx_id

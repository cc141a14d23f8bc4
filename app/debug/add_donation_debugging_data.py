#!/usr/bin/env python3
"""
Donation Debug Data Insertion
Inserts demo donors, NPOs, recipients, needs and assets

Everything goes through DonationLedgerContext so the demo ledger obeys the
same relationship rules as real traffic.
"""

from app.buisness.donations.context import DonationLedgerContext
from app.logger import get_logger

logger = get_logger("donation_ledger.debug.donations")


def insert_donation_debug_data(debug_data, ctx=None):
    """
    Insert debug data for the donation ledger

    Args:
        debug_data (dict): Debug data from JSON file
        ctx (DonationLedgerContext): Context to write through (default: new context)

    Returns:
        dict: Count of records written per section

    Raises:
        DonationDomainError: If any operation is rejected (fail-fast)
    """
    if not debug_data:
        logger.info("No donation debug data to insert")
        return {}

    ctx = ctx or DonationLedgerContext()
    donations = debug_data.get('Donations', {})
    counts = {}

    # Order matters: assets reference donors and NPOs, borrows reference recipients
    for donor in donations.get('Donors', []):
        ctx.enroll_donor(donor['id'], donor['name'], donor['phone'])
    counts['Donors'] = len(donations.get('Donors', []))

    for npo in donations.get('NPOs', []):
        ctx.enroll_npo(npo['id'], npo['name'])
    counts['NPOs'] = len(donations.get('NPOs', []))

    for recipient in donations.get('Recipients', []):
        ctx.enroll_recipient(recipient['id'], recipient['name'], recipient['type'])
    counts['Recipients'] = len(donations.get('Recipients', []))

    for need in donations.get('Needs', []):
        ctx.enroll_needs(need['id'], need['npo_id'], need['name'], need['product_type'], need['total_count'])
    counts['Needs'] = len(donations.get('Needs', []))

    _insert_assets(ctx, donations.get('Assets', []))
    counts['Assets'] = len(donations.get('Assets', []))

    logger.info(f"Inserted donation debug data: {counts}")
    return counts


def _insert_assets(ctx, assets):
    for asset in assets:
        ctx.propose_asset(
            asset['id'],
            asset['name'],
            asset['donor_id'],
            asset['npo_id'],
            asset['product_type'],
            asset['picture_hash'],
        )
        if asset.get('approve'):
            need = ctx.approve_asset(asset['id'], asset['npo_id'])
            if need is not None:
                logger.debug(f"Debug asset {asset['id']} counted toward need {need.id}")
        if asset.get('borrow_by'):
            ctx.borrow_asset(asset['id'], asset['borrow_by'])
        elif asset.get('give_to'):
            ctx.give_asset(asset['id'], asset['give_to'])

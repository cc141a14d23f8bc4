#!/usr/bin/env python3
"""
Debug Data Manager
Central controller for debug data insertion

Handles:
- Loading debug data JSON files
- Checking if data is already present
- Handing the data to the donation inserter
- Fail-fast error handling
"""

from pathlib import Path
import json
from app.buisness.ledger.ledger_adapter import LedgerAdapter
from app.logger import get_logger

logger = get_logger("donation_ledger.debug_data_manager")


def insert_debug_data(enabled=True, data_file='donations'):
    """
    Insert the demo ledger

    Args:
        enabled (bool): Whether to insert debug data (default: True)
        data_file (str): Name of the JSON file under app/debug/data (without extension)

    Returns:
        dict: Summary of inserted data

    Raises:
        DonationDomainError: If any debug record is rejected (fail-fast)
    """
    if not enabled:
        logger.info("Debug data insertion is disabled")
        return {}

    debug_data = _load_debug_data_file(data_file)
    if not debug_data:
        logger.info(f"No debug data file found for {data_file}, skipping")
        return {'status': 'skipped', 'reason': 'file_not_found'}

    if _check_debug_data_present(debug_data):
        logger.info(f"Debug data for {data_file} already present, skipping")
        return {'status': 'skipped', 'reason': 'data_present'}

    from app.debug.add_donation_debugging_data import insert_donation_debug_data

    logger.info(f"Inserting debug data from {data_file}...")
    counts = insert_donation_debug_data(debug_data)
    logger.info("Debug data insertion completed successfully")
    return {'status': 'inserted', 'counts': counts}


def _load_debug_data_file(data_file):
    """
    Load a debug data JSON file

    Returns:
        dict: Debug data or None if file doesn't exist
    """
    debug_file = Path(__file__).parent / 'data' / f'{data_file}.json'

    if not debug_file.exists():
        return None

    with open(debug_file, 'r') as f:
        data = json.load(f)
    logger.debug(f"Loaded debug data file: {debug_file}")
    return data


def _check_debug_data_present(debug_data):
    """The demo ledger counts as present when its first donor is already enrolled"""
    donors = debug_data.get('Donations', {}).get('Donors', [])
    if not donors:
        return False
    return LedgerAdapter().kind_of(donors[0]['id']) is not None

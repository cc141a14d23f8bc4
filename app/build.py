#!/usr/bin/env python3
"""
Main build orchestrator for the Donation Asset Ledger
Creates the ledger tables and optionally loads the demo ledger
"""

from app import create_app, db
from app.logger import get_logger

logger = get_logger("donation_ledger.build")


def build_models():
    """Create the ledger tables (current state and change log)"""
    # Import models so their tables are registered on the metadata
    from app.data.ledger.ledger_entry import LedgerEntry  # noqa: F401
    from app.data.ledger.ledger_history import LedgerHistory  # noqa: F401

    db.create_all()
    logger.info("All database tables created")


def build_database(enable_debug_data=True, app=None):
    """
    Build the ledger database

    Args:
        enable_debug_data (bool): Whether to insert the demo ledger (default: True)
        app (Flask): Application to build against (default: a new app from create_app)

    Returns:
        dict: Debug data summary (empty when debug data is disabled)
    """
    app = app or create_app()

    with app.app_context():
        logger.info(f"Starting database build - debug data: {enable_debug_data}")
        build_models()

        summary = {}
        if enable_debug_data:
            from app.debug.debug_data_manager import insert_debug_data
            logger.info("Inserting debug data...")
            try:
                summary = insert_debug_data(enabled=True)
            except Exception as e:
                logger.error(f"Debug data insertion failed: {e}")
                raise

        logger.info("Database build completed successfully")
        return summary


if __name__ == '__main__':
    import sys

    build_database(enable_debug_data='--no-debug-data' not in sys.argv[1:])

#!/usr/bin/env python3
"""
Run script for the Donation Asset Ledger
"""

from app import create_app
from app.build import build_database
from app.logger import get_logger
import argparse
import sys
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Note: SECRET_KEY is required. Run 'python generate_env.py' to create .env.

logger = get_logger("donation_ledger.run")


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Donation Asset Ledger')
    parser.add_argument('--build-only', action='store_true',
                        help='Create the ledger tables and exit without starting the web server')
    parser.add_argument('--enable-debug-data', action='store_true', default=True,
                        help='Insert the demo ledger (default: enabled if flag not present)')
    parser.add_argument('--no-debug-data', action='store_false', dest='enable_debug_data',
                        help='Do not insert the demo ledger')
    parser.add_argument('--invoke', nargs='+', metavar=('FUNCTION', 'ARGS'),
                        help='Run one ledger command, print its payload and exit')

    return parser.parse_args(argv)


def run_invoke(app, function, args):
    """Run one ledger command; returns the process exit code"""
    from app.buisness.donations.invoker import LedgerInvoker

    with app.app_context():
        result = LedgerInvoker().invoke(function, args)

    if not result.ok:
        print(f"{result.error_type}: {result.message}", file=sys.stderr)
        return 1

    if result.payload:
        print(result.payload.decode('utf-8'))
    elif result.tx_id:
        print(f"committed {result.tx_id}")
    return 0


if __name__ == '__main__':
    args = parse_arguments()
    app = create_app()

    logger.debug("Starting Donation Asset Ledger...")

    # A one-shot command never seeds demo data
    enable_debug_data = args.enable_debug_data and not args.build_only and not args.invoke
    build_database(enable_debug_data=enable_debug_data, app=app)

    if args.invoke:
        sys.exit(run_invoke(app, args.invoke[0], args.invoke[1:]))

    if args.build_only:
        logger.debug("Build completed. Exiting without starting web server.")
        sys.exit(0)

    # FLASK_DEBUG: Enable/disable debug mode (default: False for security)
    debug_mode = os.environ.get('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes', 'on')

    # FLASK_HOST: Server host (default: 127.0.0.1 for security)
    host = os.environ.get('FLASK_HOST', '127.0.0.1')

    # FLASK_PORT: Server port (default: 5000)
    port = int(os.environ.get('FLASK_PORT', '5000'))

    if debug_mode:
        logger.warning("DEBUG MODE ENABLED - Do not use in production!")

    logger.info(f"Starting server on {host}:{port} (debug={debug_mode})")
    app.run(debug=debug_mode, host=host, port=port, use_reloader=False)

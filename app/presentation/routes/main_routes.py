"""
Main routes for the Donation Asset Ledger
Liveness check used by deployments and the test suite
"""

from flask import jsonify

# Import the main blueprint from the package
from . import main


@main.get('/health')
def health():
    """Report that the application is up"""
    return jsonify({'status': 'ok'})

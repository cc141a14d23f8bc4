"""
Routes package for the Donation Asset Ledger
Organized in a tiered structure mirroring the business layer
"""

from flask import Blueprint
from app.logger import get_logger

logger = get_logger("donation_ledger.routes")

# Create main blueprint
main = Blueprint('main', __name__)

# Import route modules
from . import main_routes  # noqa: E402,F401


def init_app(app):
    """Initialize all route blueprints with the Flask app"""
    logger.debug("Initializing route blueprints")

    # Don't register main again - it's already registered in app/__init__.py
    from .ledger import ledger_bp
    app.register_blueprint(ledger_bp, url_prefix='/ledger')

    logger.info("All route blueprints registered successfully")

from flask import Blueprint

ledger_bp = Blueprint('ledger', __name__)

# Import all route modules
from . import api  # noqa: E402,F401

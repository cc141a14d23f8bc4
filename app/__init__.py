from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os
from app.logger import get_logger

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["2000 per day", "200 per hour"],
    storage_uri="memory://"  # Use Redis in production for distributed systems
)


def _env_flag(name, default):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes', 'on')


def create_app(config_overrides=None):
    """
    Build the Flask application.

    Configuration is read from the environment first, then ``config_overrides``
    is applied on top (tests pass an in-memory database here).
    """
    from pathlib import Path

    app = Flask(__name__)

    # Get singleton logger
    logger = get_logger("donation_ledger")
    logger.info("Initializing Flask application")

    # SECURITY: Require SECRET_KEY - no fallback
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')

    # Prefer an explicit DATABASE_URL env var; otherwise keep the SQLite
    # ledger inside the project's `instance/` directory.
    db_env = os.environ.get('DATABASE_URL')
    if db_env:
        app.config['SQLALCHEMY_DATABASE_URI'] = db_env
    else:
        base_dir = Path(__file__).parent.parent
        instance_dir = base_dir / 'instance'
        instance_dir.mkdir(parents=True, exist_ok=True)
        default_db_path = instance_dir / 'donation_ledger.db'
        app.config['SQLALCHEMY_DATABASE_URI'] = f"sqlite:///{str(default_db_path.resolve())}"

    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Ledger policy switches
    app.config['ALLOW_ENROLLMENT_OVERWRITE'] = _env_flag('ALLOW_ENROLLMENT_OVERWRITE', 'False')
    app.config['ENFORCE_ASSET_TRANSITIONS'] = _env_flag('ENFORCE_ASSET_TRANSITIONS', 'True')
    app.config['NEED_MATCH_PRODUCT_TYPE'] = _env_flag('NEED_MATCH_PRODUCT_TYPE', 'False')

    # Rate limiting for the ledger API
    app.config['RATELIMIT_ENABLED'] = _env_flag('RATELIMIT_ENABLED', 'True')

    if config_overrides:
        app.config.update(config_overrides)

    if not app.config['SECRET_KEY']:
        logger.critical("SECRET_KEY not set in environment! Application cannot start.")
        raise RuntimeError("SECRET_KEY environment variable is required")

    if app.config['ALLOW_ENROLLMENT_OVERWRITE']:
        logger.warning("Enrollment overwrite enabled - duplicate ids will silently replace records")
    if not app.config['ENFORCE_ASSET_TRANSITIONS']:
        logger.warning("Asset transition enforcement DISABLED - borrow/give allowed from any status")

    logger.debug(f"Database configured: {app.config['SQLALCHEMY_DATABASE_URI'].split(':', 1)[0]}")

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    logger.debug("Extensions initialized")

    # Import models to ensure they're registered with SQLAlchemy
    from app.data.ledger.ledger_entry import LedgerEntry
    from app.data.ledger.ledger_history import LedgerHistory

    logger.debug("Models imported and registered")

    # Register blueprints
    from app.presentation.routes import main
    from app.presentation.routes import init_app as init_routes

    app.register_blueprint(main)
    init_routes(app)

    # Add security headers to all responses
    @app.after_request
    def set_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Content-Security-Policy'] = "default-src 'none'; frame-ancestors 'none'"
        return response

    logger.info("Flask application initialization complete")

    return app

"""
PrintShopWeb - Flask Application Entry Point.

This is a slim app factory that:
1. Loads configuration and sets up logging
2. Builds the key-value store, file store and order service
3. Builds the admin authenticator from configured credentials
4. Registers route blueprints
5. Sets up error handlers and template filters

OWNERSHIP:
    The store, FileStore, OrderService and Authenticator are created here
    and kept in app.config; routes reach them through current_app. There
    are no module-level singletons.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, flash, redirect, url_for
from werkzeug.exceptions import RequestEntityTooLarge

from logging_config import setup_logging, get_logger
from modules.pdf_analyzer import PDFAnalyzer
from modules.pricing import PricingEngine
from routes import register_blueprints
from services.auth import Authenticator
from services.file_store import FileStore
from services.kv_store import KeyValueStore, create_store
from services.order_service import OrderService


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def _get_base_path() -> Path:
    """
    Get the base path for the application.

    In PyInstaller bundle: Returns the directory containing the executable
    In development: Returns the directory containing app.py
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent


def create_app(config_object: str = "config.Config", store: Optional[KeyValueStore] = None) -> Flask:
    """
    Application factory - creates and configures Flask app.

    Args:
        config_object: Import path of the config class to load
        store: Optional pre-built key-value store (tests inject one)

    Returns:
        Configured Flask application
    """
    env_file = _get_base_path() / '.env'
    if env_file.exists():
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    app = Flask(__name__)
    app.config.from_object(config_object)

    # Configure logging
    log_level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    enable_file_logging = app.config.get("ENVIRONMENT") == "production"

    root_logger = setup_logging(
        log_level=log_level,
        enable_file_logging=enable_file_logging
    )

    app.logger.handlers = root_logger.handlers
    app.logger.setLevel(log_level)

    logger.info(f"Starting PrintShopWeb in {app.config.get('ENVIRONMENT')} mode")

    # =========================================================================
    # STORES AND SERVICES
    # =========================================================================

    if store is None:
        store = create_store(
            app.config.get("STORE_BACKEND", "memory"),
            app.config.get("STORE_NAMESPACE", "xerox"),
            app.config.get("STORE_PATH"),
        )
    logger.info(f"Using {type(store).__name__} (namespace {store.namespace!r})")

    app.config["KV_STORE"] = store
    app.config["FILE_STORE"] = FileStore(store)
    app.config["ORDER_SERVICE"] = OrderService(store, PricingEngine())
    app.config["PDF_ANALYZER"] = PDFAnalyzer()

    authenticator = Authenticator(
        app.config.get("ADMIN_USERNAME", ""),
        app.config.get("ADMIN_PASSWORD", ""),
    )
    if not authenticator.enabled:
        logger.warning("ADMIN_PASSWORD not set - admin dashboard login is disabled")
    app.config["AUTHENTICATOR"] = authenticator

    # =========================================================================
    # REGISTER BLUEPRINTS
    # =========================================================================

    register_blueprints(app)

    # =========================================================================
    # TEMPLATE FILTERS
    # =========================================================================

    @app.template_filter("money")
    def money_filter(value):
        """Two-decimal rupee amount; rounding happens only here."""
        try:
            return f"₹{float(value):,.2f}"
        except (TypeError, ValueError):
            return value

    # =========================================================================
    # ERROR HANDLERS
    # =========================================================================

    @app.errorhandler(RequestEntityTooLarge)
    def handle_file_too_large(e):
        max_mb = app.config.get("MAX_CONTENT_LENGTH", 16 * 1024 * 1024) / (1024 * 1024)
        flash(f"File too large. Maximum upload size is {max_mb:.0f} MB.", "error")
        return redirect(url_for("order.order"))

    @app.errorhandler(404)
    def handle_not_found(e):
        flash("Page not found.", "warning")
        return redirect(url_for("main.index"))

    @app.errorhandler(500)
    def handle_server_error(e):
        logger.error(f"500 error: {e}", exc_info=True)
        flash("An unexpected error occurred. Please try again.", "error")
        return redirect(url_for("main.index"))

    logger.info("Application initialized successfully")
    return app


if __name__ == "__main__":
    app = create_app()
    debug_mode = os.environ.get("FLASK_DEBUG", "1") == "1"
    app.run(debug=debug_mode)

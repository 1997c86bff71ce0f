"""
Flask route blueprints for PrintShopWeb.

This module contains all route handlers organized by functionality:
- main: Home page with the price list
- upload: Document upload and page-count discovery
- order: Order form and submission
- confirmation: Submitted order display
- track: Customer order lookup
- admin: Staff login and dashboard
- api: AJAX endpoints (live quote, health)

Each blueprint is registered with the Flask app in create_app().
"""

from .main import main_bp
from .upload import upload_bp
from .order import order_bp
from .confirmation import confirmation_bp
from .track import track_bp
from .admin import admin_bp
from .api import api_bp

__all__ = [
    "main_bp",
    "upload_bp",
    "order_bp",
    "confirmation_bp",
    "track_bp",
    "admin_bp",
    "api_bp",
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(main_bp)
    app.register_blueprint(upload_bp)
    app.register_blueprint(order_bp)
    app.register_blueprint(confirmation_bp)
    app.register_blueprint(track_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(api_bp)

"""
Configuration for PrintShopWeb.

Values come from the environment (a .env file is loaded first). Admin
credentials are read here and injected into the Authenticator; nothing in
the application embeds them.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file early so environment variables are available for Config class
load_dotenv(override=True)

# Base directory (where this file lives)
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Default configuration for the Flask application."""

    # Flask settings
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16 MB uploads
    SESSION_COOKIE_NAME = "print_shop_session"
    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")

    # Debug mode
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"

    # ==========================================================================
    # Order store
    # ==========================================================================
    # STORE_BACKEND: "json" keeps orders in a single JSON document on disk,
    #   "memory" keeps them for the lifetime of the process.
    # STORE_NAMESPACE: prefix for every key ("xerox:orders", "xerox:storedFiles").
    # ==========================================================================
    STORE_BACKEND = os.environ.get("STORE_BACKEND", "json")
    STORE_PATH = os.environ.get("STORE_PATH", str(BASE_DIR / "data" / "store.json"))
    STORE_NAMESPACE = os.environ.get("STORE_NAMESPACE", "xerox")

    # Admin credentials (injected into services.auth.Authenticator)
    ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "")


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 3600  # 1 hour


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    TESTING = True
    STORE_BACKEND = "memory"
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = "test-password"

"""
Admin authentication.

The Authenticator is built from configuration by the app factory; routes
reach it through ``current_app.config["AUTHENTICATOR"]``. A successful login
sets a flag in the Flask session, checked by ``login_required``.
"""

from __future__ import annotations

import hmac
from functools import wraps

from flask import current_app, flash, redirect, session, url_for

from logging_config import get_logger


# Module logger
logger = get_logger(__name__)

SESSION_FLAG = "admin_logged_in"


class Authenticator:
    """Checks a single configured admin credential pair."""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    @property
    def enabled(self) -> bool:
        """Admin login is disabled until a password is configured."""
        return bool(self.username and self.password)

    def check(self, username: str, password: str) -> bool:
        if not self.enabled:
            logger.warning("Admin login attempted but no admin password is configured")
            return False

        user_ok = hmac.compare_digest(username.encode("utf-8"), self.username.encode("utf-8"))
        pass_ok = hmac.compare_digest(password.encode("utf-8"), self.password.encode("utf-8"))
        return user_ok and pass_ok


def is_logged_in() -> bool:
    return session.get(SESSION_FLAG) is True


def login_required(view):
    """Redirect to the login page unless an admin is logged in."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        if not is_logged_in():
            flash("Please log in to access the admin dashboard.", "warning")
            return redirect(url_for("admin.login"))
        return view(*args, **kwargs)

    return wrapped


def get_authenticator() -> Authenticator:
    return current_app.config["AUTHENTICATOR"]

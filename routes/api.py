"""
API routes (AJAX endpoints).

Handles:
- /api/quote - Live price preview for the order form
- /health - Health check endpoint
"""

from flask import (
    Blueprint,
    current_app,
    jsonify,
    request,
)

from core.exceptions import OrderValidationError
from logging_config import get_logger
from .upload import current_upload


# Module logger
logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.route("/api/quote", methods=["POST"])
def quote():
    """
    Recompute the price for the current form state.

    Accepts JSON or form-encoded fields with the order form's names. The
    page count comes from ``totalPages`` if given, else from the session
    upload. Never rejects a page selection; bad tokens simply count 0.
    """
    fields = request.get_json(silent=True)
    if not isinstance(fields, dict):
        fields = request.form.to_dict()

    try:
        total_pages = int(fields.get("totalPages", current_upload()["pages"]))
    except (TypeError, ValueError):
        return jsonify({"error": "totalPages must be an integer"}), 400

    order_service = current_app.config["ORDER_SERVICE"]
    try:
        result = order_service.quote(fields, max(total_pages, 0))
    except OrderValidationError as e:
        return jsonify({"error": e.message}), 400

    return jsonify(result.to_dict())


@api_bp.route("/health", methods=["GET"])
def health():
    """Health check: store reachable and number of stored orders."""
    order_service = current_app.config["ORDER_SERVICE"]
    try:
        orders = len(order_service.list_orders())
    except Exception as e:
        logger.error(f"Health check failed: {e}", exc_info=True)
        return jsonify({"status": "error", "error": str(e)}), 503

    return jsonify({"status": "ok", "orders": orders})

"""
Confirmation route.

Displays the stored order after submission.
"""

from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    url_for,
)

from core.exceptions import OrderNotFoundError
from logging_config import get_logger
from .upload import clear_upload


# Module logger
logger = get_logger(__name__)

confirmation_bp = Blueprint("confirmation", __name__)


@confirmation_bp.route("/order/confirmation/<order_id>", methods=["GET"])
def confirmation(order_id: str):
    """Show the order ID and what happens next."""
    order_service = current_app.config["ORDER_SERVICE"]
    try:
        record = order_service.find(order_id)
    except OrderNotFoundError:
        flash("Submit an order to see the confirmation page.", "warning")
        return redirect(url_for("order.order"))

    return render_template("confirmation.html", order=record)


@confirmation_bp.route("/start-over", methods=["POST"])
def start_over():
    """Forget the uploaded documents and start a new order."""
    clear_upload()
    logger.info("Upload state cleared for new order")
    flash("Session cleared. Start a new order.", "success")
    return redirect(url_for("order.order"))

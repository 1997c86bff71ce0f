"""
Order tracking route.

Customers look up an order by ID to see its status.
"""

from flask import (
    Blueprint,
    current_app,
    render_template,
    request,
)

from core.exceptions import OrderNotFoundError


track_bp = Blueprint("track", __name__)


@track_bp.route("/track", methods=["GET", "POST"])
def track():
    """
    GET: Display the lookup form (``?orderId=`` performs the lookup)
    POST: Look up the submitted order ID
    """
    order_id = request.values.get("orderId", "").strip()
    if not order_id:
        return render_template("track.html", order=None, not_found=False, order_id="")

    order_service = current_app.config["ORDER_SERVICE"]
    try:
        record = order_service.find(order_id)
    except OrderNotFoundError:
        return render_template("track.html", order=None, not_found=True, order_id=order_id), 404

    return render_template("track.html", order=record, not_found=False, order_id=order_id)

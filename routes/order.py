"""
Order form route.

GET shows the form (with the page count of any uploaded document).
POST validates, prices and stores the order, then redirects to the
confirmation page. Files may be posted with the form or uploaded earlier
through /upload.
"""

from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)

from core.exceptions import PrintShopError
from logging_config import get_logger
from models.order import PAPER_SIZES, PRINT_TYPE_NAMES
from .upload import clear_upload, current_upload, store_upload


# Module logger
logger = get_logger(__name__)

order_bp = Blueprint("order", __name__)


@order_bp.route("/order", methods=["GET", "POST"])
def order():
    """
    Handle the order form.

    GET: Display the form
    POST: Submit the order; validation failures flash and redirect back
    """
    if request.method == "POST":
        order_service = current_app.config["ORDER_SERVICE"]
        file_store = current_app.config["FILE_STORE"]

        try:
            for document in request.files.getlist("files"):
                if document and document.filename:
                    store_upload(document)

            state = current_upload()
            files = [f for f in (file_store.get(path) for path in state["paths"]) if f]

            record = order_service.submit(request.form, files, state["pages"])

        except PrintShopError as e:
            logger.warning(f"Order rejected: {e}")
            flash(e.message, "error")
            return redirect(url_for("order.order"))

        clear_upload()
        flash(f"Order submitted successfully! Your order ID is {record.order_id}", "success")
        return redirect(url_for("confirmation.confirmation", order_id=record.order_id))

    state = current_upload()
    return render_template(
        "order.html",
        total_pages=state["pages"],
        uploaded=state["paths"],
        print_types=PRINT_TYPE_NAMES,
        paper_sizes=PAPER_SIZES,
    )

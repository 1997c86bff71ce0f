"""
Admin routes.

Login/logout and the staff dashboard: list orders, change an order's
status, clear all orders or all stored files.
"""

from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from core.exceptions import PrintShopError
from logging_config import get_logger
from models.order import OrderStatus
from services.auth import SESSION_FLAG, get_authenticator, is_logged_in, login_required


# Module logger
logger = get_logger(__name__)

admin_bp = Blueprint("admin", __name__)

ORDERS_PER_PAGE = 10


@admin_bp.route("/login", methods=["GET", "POST"])
def login():
    if is_logged_in():
        return redirect(url_for("admin.dashboard"))

    if request.method == "POST":
        username = request.form.get("username", "")
        password = request.form.get("password", "")

        if get_authenticator().check(username, password):
            session[SESSION_FLAG] = True
            session.modified = True
            logger.info("Admin logged in")
            flash("Login successful", "success")
            return redirect(url_for("admin.dashboard"))

        logger.warning("Failed admin login attempt")
        flash("Login failed. Invalid username or password.", "error")

    return render_template("login.html")


@admin_bp.route("/logout", methods=["POST"])
def logout():
    session.pop(SESSION_FLAG, None)
    return redirect(url_for("admin.login"))


@admin_bp.route("/admin", methods=["GET"])
@login_required
def dashboard():
    """Paginated order list plus stored file metadata."""
    order_service = current_app.config["ORDER_SERVICE"]
    file_store = current_app.config["FILE_STORE"]

    orders = order_service.list_orders()
    try:
        page = max(int(request.args.get("page", 1)), 1)
    except ValueError:
        page = 1
    page_count = max((len(orders) + ORDERS_PER_PAGE - 1) // ORDERS_PER_PAGE, 1)
    page = min(page, page_count)
    start = (page - 1) * ORDERS_PER_PAGE

    return render_template(
        "admin.html",
        orders=orders[start:start + ORDERS_PER_PAGE],
        order_total=len(orders),
        page=page,
        page_count=page_count,
        files=file_store.all(),
        statuses=list(OrderStatus),
    )


@admin_bp.route("/admin/orders/<order_id>/status", methods=["POST"])
@login_required
def update_status(order_id: str):
    order_service = current_app.config["ORDER_SERVICE"]
    try:
        record = order_service.update_status(order_id, request.form.get("status", ""))
        flash(f"Order status updated to {record.status}", "success")
    except PrintShopError as e:
        logger.warning(f"Status update failed: {e}")
        flash(e.message, "error")
    return redirect(url_for("admin.dashboard"))


@admin_bp.route("/admin/orders/clear", methods=["POST"])
@login_required
def clear_orders():
    removed = current_app.config["ORDER_SERVICE"].clear_orders()
    flash(f"All orders have been cleared ({removed} removed)", "success")
    return redirect(url_for("admin.dashboard"))


@admin_bp.route("/admin/files/clear", methods=["POST"])
@login_required
def clear_files():
    removed = current_app.config["FILE_STORE"].clear()
    flash(f"All uploaded files have been cleared ({removed} removed)", "success")
    return redirect(url_for("admin.dashboard"))

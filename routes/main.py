"""
Main routes (home).

Landing page with the price list.
"""

from flask import Blueprint, render_template

from models.order import PRINT_TYPE_NAMES
from modules.binding_fees import SOFT_BINDING_FEE, SPIRAL_BINDING_STEPS
from modules.pricing import PricingEngine

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index():
    """Home page with per-page rates and binding fees."""
    return render_template(
        "index.html",
        rates=PricingEngine.RATES,
        soft_fee=SOFT_BINDING_FEE,
        spiral_steps=SPIRAL_BINDING_STEPS,
        print_types=PRINT_TYPE_NAMES,
    )

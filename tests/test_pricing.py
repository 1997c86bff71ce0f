"""
Unit tests for the pricing engine and page bucket classifier.
"""

import pytest

from core.exceptions import OrderValidationError
from models.order import Binding, BindingKind, ColorMode, CustomQuote, PlainPrint
from models.pricing import PageBuckets, PricingInput, PricingResult
from modules.page_buckets import classify
from modules.pricing import PricingEngine


# Fixtures

@pytest.fixture
def engine():
    return PricingEngine()


def bw_plain():
    return PlainPrint(color_mode=ColorMode.BLACK_AND_WHITE)


class TestClassify:
    """Bucket classification."""

    def test_bw_routes_all_pages_to_bw(self):
        assert classify(bw_plain(), 10, selected_pages="all") == PageBuckets(color=0, bw=10)

    def test_color_routes_selection_to_color(self):
        mode = PlainPrint(color_mode=ColorMode.COLOR)
        assert classify(mode, 10, selected_pages="1-4") == PageBuckets(color=4, bw=0)

    def test_missing_selection_means_all(self):
        assert classify(bw_plain(), 7).bw == 7

    def test_custom_counts_both_ranges_independently(self):
        mode = PlainPrint(color_mode=ColorMode.CUSTOM)
        buckets = classify(mode, 10, color_pages="1-6", bw_pages="4-10")
        # Overlap (pages 4-6) is counted in both buckets
        assert buckets == PageBuckets(color=6, bw=7, custom=True)

    def test_custom_missing_fields_count_zero(self):
        mode = Binding(kind=BindingKind.SPIRAL, color_mode=ColorMode.CUSTOM)
        buckets = classify(mode, 10, color_pages="2")
        assert (buckets.color, buckets.bw) == (1, 0)

    def test_custom_quote_is_empty(self):
        assert classify(CustomQuote(), 10, selected_pages="all") == PageBuckets()


class TestPlainPrint:
    """Loose sheet pricing."""

    def test_bw_single_sided(self, engine):
        result = engine.price(PricingInput(mode=bw_plain(), total_pages=10))
        assert result.total_cost == pytest.approx(15.0)
        assert result.quote_required is False

    def test_bw_double_sided_halves_sheets(self, engine):
        result = engine.price(PricingInput(mode=bw_plain(), total_pages=10, duplex=True))
        assert result.total_cost == pytest.approx(8.0)

    def test_duplex_rounds_odd_pages_up(self, engine):
        result = engine.price(PricingInput(mode=bw_plain(), total_pages=9, duplex=True))
        assert result.total_cost == pytest.approx(5 * 1.6)

    def test_color_single_and_double(self, engine):
        mode = PlainPrint(color_mode=ColorMode.COLOR)
        single = engine.price(PricingInput(mode=mode, total_pages=4))
        double = engine.price(PricingInput(mode=mode, total_pages=4, duplex=True))
        assert single.total_cost == pytest.approx(32.0)
        assert double.total_cost == pytest.approx(26.0)

    def test_copies_multiply_total(self, engine):
        result = engine.price(PricingInput(mode=bw_plain(), total_pages=10, copies=3))
        assert result.total_cost == pytest.approx(45.0)

    def test_selected_pages_only(self, engine):
        result = engine.price(
            PricingInput(mode=bw_plain(), total_pages=20, selected_pages="1-4, 10")
        )
        assert result.total_cost == pytest.approx(7.5)

    def test_malformed_selection_undercounts(self, engine):
        result = engine.price(
            PricingInput(mode=bw_plain(), total_pages=20, selected_pages="1-4, oops, 30")
        )
        assert result.total_cost == pytest.approx(6.0)

    def test_zero_pages_is_real_zero(self, engine):
        result = engine.price(PricingInput(mode=bw_plain(), total_pages=0))
        assert result.total_cost == 0
        assert result.quote_required is False


class TestCustomColor:
    """Mixed color / black-and-white orders."""

    def test_no_duplex_halving(self, engine):
        mode = PlainPrint(color_mode=ColorMode.CUSTOM)
        result = engine.price(
            PricingInput(
                mode=mode,
                total_pages=6,
                duplex=True,
                copies=2,
                color_pages="1-3",
                bw_pages="4-6",
            )
        )
        assert result.total_cost == pytest.approx(87.6)

    def test_single_sided(self, engine):
        mode = PlainPrint(color_mode=ColorMode.CUSTOM)
        result = engine.price(
            PricingInput(mode=mode, total_pages=6, color_pages="1-3", bw_pages="4-6")
        )
        assert result.total_cost == pytest.approx(3 * 8 + 3 * 1.5)

    def test_custom_binding_adds_fee_on_raw_count(self, engine):
        """
        Custom color binding still pays the binding fee, on color plus
        black-and-white pages. The old storefront form charged no fee here.
        """
        mode = Binding(kind=BindingKind.SPIRAL, color_mode=ColorMode.CUSTOM)
        result = engine.price(
            PricingInput(mode=mode, total_pages=100, color_pages="1-40", bw_pages="41-95")
        )
        assert result.total_cost == pytest.approx(40 * 8 + 55 * 1.5 + 40)


class TestBinding:
    """Soft and spiral binding surcharges."""

    def test_soft_binding_adds_flat_fee(self, engine):
        mode = Binding(kind=BindingKind.SOFT)
        result = engine.price(PricingInput(mode=mode, total_pages=10))
        assert result.total_cost == pytest.approx(15.0 + 25)

    def test_soft_fee_added_before_copies(self, engine):
        mode = Binding(kind=BindingKind.SOFT)
        result = engine.price(PricingInput(mode=mode, total_pages=10, copies=2))
        assert result.total_cost == pytest.approx((15.0 + 25) * 2)

    def test_spiral_fee_uses_raw_page_count(self, engine):
        mode = Binding(kind=BindingKind.SPIRAL, color_mode=ColorMode.COLOR)
        result = engine.price(PricingInput(mode=mode, total_pages=100, duplex=True))
        # 50 sheets of color duplex, fee for 100 pages (not 50)
        assert result.total_cost == pytest.approx(50 * 13 + 40)

    def test_spiral_small_document(self, engine):
        mode = Binding(kind=BindingKind.SPIRAL)
        result = engine.price(PricingInput(mode=mode, total_pages=30))
        assert result.total_cost == pytest.approx(30 * 1.5 + 25)


class TestCustomQuote:

    def test_always_quote_required(self, engine):
        result = engine.price(
            PricingInput(
                mode=CustomQuote(),
                total_pages=50,
                duplex=True,
                copies=9,
                selected_pages="1-50",
                color_pages="1-10",
            )
        )
        assert result == PricingResult.quote()
        assert result.quote_required is True
        assert result.total_cost == 0
        assert result.display == "Quote required"


class TestPricingInputFromForm:
    """Building the engine input from order form fields."""

    def test_defaults(self):
        pricing_input = PricingInput.from_form({}, 12)
        assert pricing_input.mode == bw_plain()
        assert pricing_input.copies == 1
        assert pricing_input.duplex is False
        assert pricing_input.selected_pages == "all"

    def test_binding_fields(self):
        pricing_input = PricingInput.from_form(
            {
                "printType": "spiralBinding",
                "bindingColorType": "custom",
                "printSide": "double",
                "copies": "3",
                "colorPages": "1-2",
                "bwPages": "",
            },
            12,
        )
        assert pricing_input.mode == Binding(kind=BindingKind.SPIRAL, color_mode=ColorMode.CUSTOM)
        assert pricing_input.duplex is True
        assert pricing_input.copies == 3
        assert pricing_input.color_pages == "1-2"
        assert pricing_input.bw_pages is None

    @pytest.mark.parametrize("copies", ["0", "-2", "abc", None])
    def test_bad_copies_fall_back_to_one(self, copies):
        assert PricingInput.from_form({"copies": copies}, 5).copies == 1

    def test_numeric_ranges_become_text(self):
        pricing_input = PricingInput.from_form({"selectedPages": 5, "colorPages": 0}, 12)
        assert pricing_input.selected_pages == "5"
        assert pricing_input.color_pages == "0"

    def test_unknown_print_type(self):
        with pytest.raises(OrderValidationError):
            PricingInput.from_form({"printType": "hologram"}, 5)

    def test_non_string_selection_prices_zero_pages(self, engine):
        result = engine.price(PricingInput(mode=bw_plain(), total_pages=10, selected_pages=5))
        assert result.total_cost == 0


class TestPricingResult:

    def test_display_rounds_to_two_decimals(self):
        assert PricingResult(total_cost=87.60000000000001).display == "87.60"

    def test_to_dict(self):
        result = PricingResult(total_cost=8.0, buckets=PageBuckets(bw=10))
        assert result.to_dict() == {
            "totalCost": 8.0,
            "display": "8.00",
            "quoteRequired": False,
            "colorPages": 0,
            "bwPages": 10,
        }

"""Unit tests for order modes and the persisted order record."""

import pytest

from core.exceptions import OrderValidationError
from models.order import (
    Binding,
    BindingKind,
    ColorMode,
    CustomQuote,
    OrderFile,
    OrderRecord,
    OrderStatus,
    PlainPrint,
    mode_from_fields,
    mode_to_fields,
    uses_custom_ranges,
)


class TestOrderMode:

    @pytest.mark.parametrize(
        "print_type, binding_color_type, expected",
        [
            ("blackAndWhite", None, PlainPrint(ColorMode.BLACK_AND_WHITE)),
            ("color", "custom", PlainPrint(ColorMode.COLOR)),
            ("custom", None, PlainPrint(ColorMode.CUSTOM)),
            ("softBinding", "color", Binding(BindingKind.SOFT, ColorMode.COLOR)),
            ("spiralBinding", None, Binding(BindingKind.SPIRAL, ColorMode.BLACK_AND_WHITE)),
            ("customPrint", "color", CustomQuote()),
            (None, None, PlainPrint(ColorMode.BLACK_AND_WHITE)),
        ],
    )
    def test_from_fields(self, print_type, binding_color_type, expected):
        assert mode_from_fields(print_type, binding_color_type) == expected

    @pytest.mark.parametrize(
        "mode",
        [
            PlainPrint(ColorMode.COLOR),
            Binding(BindingKind.SPIRAL, ColorMode.CUSTOM),
            CustomQuote(),
        ],
    )
    def test_fields_round_trip(self, mode):
        fields = mode_to_fields(mode)
        assert mode_from_fields(fields["printType"], fields["bindingColorType"]) == mode

    def test_unknown_binding_color_type(self):
        with pytest.raises(OrderValidationError) as exc_info:
            mode_from_fields("softBinding", "sepia")
        assert exc_info.value.field == "printType"

    def test_uses_custom_ranges(self):
        assert uses_custom_ranges(PlainPrint(ColorMode.CUSTOM))
        assert uses_custom_ranges(Binding(BindingKind.SOFT, ColorMode.CUSTOM))
        assert not uses_custom_ranges(PlainPrint(ColorMode.COLOR))
        assert not uses_custom_ranges(CustomQuote())


class TestOrderRecord:

    def test_to_dict_uses_camel_case(self):
        record = OrderRecord(
            order_id="ORD-1",
            full_name="Asha Rao",
            phone_number="9876543210",
            print_type="color",
            order_date="2026-01-01T00:00:00+00:00",
            files=[OrderFile(name="thesis.pdf", size=10, type="application/pdf")],
            total_cost=32.0,
        )
        data = record.to_dict()
        assert data["orderId"] == "ORD-1"
        assert data["printType"] == "color"
        assert data["totalCost"] == 32.0
        assert data["files"] == [
            {"name": "thesis.pdf", "size": 10, "type": "application/pdf", "path": "/uploads/thesis.pdf"}
        ]
        assert OrderRecord.from_dict(data) == record

    def test_from_dict_fills_defaults(self):
        record = OrderRecord.from_dict({
            "orderId": "ORD-2",
            "fullName": "Old Order",
            "phoneNumber": "0000000000",
            "printType": "blackAndWhite",
            "orderDate": "2025-01-01",
            "files": [{"name": "a.pdf", "size": 1, "type": "application/pdf"}],
        })
        assert record.status == "pending"
        assert record.files[0].path == "/uploads/a.pdf"
        assert record.selected_pages == "all"

    def test_labels(self):
        record = OrderRecord.from_dict({"orderId": "x", "printType": "spiralBinding", "status": "completed"})
        assert record.print_type_name == "Spiral Binding"
        assert record.status_label == "Ready for Pickup"
        assert OrderStatus.PENDING.label == "Order Received"

    def test_unknown_status_label(self):
        record = OrderRecord.from_dict({"orderId": "x", "status": "lost"})
        assert record.status_label == "Unknown Status"

    def test_quote_required(self):
        assert OrderRecord.from_dict({"printType": "customPrint"}).quote_required
        assert OrderRecord.from_dict({"printType": "color"}).mode == PlainPrint(ColorMode.COLOR)

"""Unit tests for the order analytics calculator."""

import logging
from decimal import Decimal

import pytest

from order_analytics.domain.model.order import LineItem, Order
from order_analytics.domain.model.product import Product
from order_analytics.domain.model.value_objects import Money
from order_analytics.domain.service.analytics_calculator import (
    analyze_orders,
    gross_margin,
    gross_profit,
    gross_sales,
    index_catalog,
    order_analytics,
    portfolio_totals,
    round_to_one_decimal,
    sales,
    total_cogs,
)


def _product(product_id: int = 1, price: str = "10", cogs: str = "4") -> Product:
    """Helper to build a valid catalog product."""
    return Product(
        id=product_id,
        title=f"Product {product_id}",
        category="General",
        unit_price=Money.of(price),
        cogs=Money.of(cogs),
    )


def _item(product_id: int = 1, qty=1) -> LineItem:
    return LineItem(product_id=product_id, quantity=qty)


# ── Rounding ─────────────────────────────────────────────────────────────────


class TestRoundToOneDecimal:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("2.25"), Decimal("2.3")),
            (Decimal("1.05"), Decimal("1.1")),
            (Decimal("1.04"), Decimal("1.0")),
            (0.15, Decimal("0.2")),
            (30, Decimal("30.0")),
        ],
    )
    def test_half_up(self, value, expected):
        assert round_to_one_decimal(value) == expected

    def test_negative_halves_move_toward_positive_infinity(self):
        assert round_to_one_decimal(Decimal("-2.25")) == Decimal("-2.2")
        assert round_to_one_decimal(Decimal("-2.26")) == Decimal("-2.3")

    def test_always_one_decimal_place(self):
        assert str(round_to_one_decimal(30)) == "30.0"
        assert str(round_to_one_decimal(Decimal("64.70588"))) == "64.7"

    @pytest.mark.parametrize("value", ["0", "1.25", "-7.75", "12345.678", "0.049"])
    def test_idempotent(self, value):
        once = round_to_one_decimal(Decimal(value))
        assert round_to_one_decimal(once) == once


# ── Line-level formulas ──────────────────────────────────────────────────────


class TestGrossSales:

    @pytest.mark.parametrize(
        "price, qty, expected",
        [
            ("10", 3, Decimal("30.0")),
            ("12.99", 3, Decimal("39.0")),
            ("0.35", 7, Decimal("2.5")),
            ("19.99", Decimal("1.5"), Decimal("30.0")),
        ],
    )
    def test_single_product(self, price, qty, expected):
        product = _product(price=price)
        result = gross_sales([_item(qty=qty)], [product])
        assert result == expected
        assert result == round_to_one_decimal(Decimal(price) * qty)

    def test_sums_across_line_items(self):
        catalog = [_product(1, price="10"), _product(2, price="2.5")]
        assert gross_sales([_item(1, 2), _item(2, 4)], catalog) == Decimal("30.0")

    def test_missing_product_contributes_zero(self):
        catalog = [_product(1, price="10", cogs="4")]
        items = [_item(1, 2), _item(99, 5)]
        assert gross_sales(items, catalog) == Decimal("20.0")

    def test_no_line_items(self):
        assert gross_sales([], [_product()]) == Decimal("0.0")

    def test_accepts_mapping_catalog(self):
        catalog = {7: _product(7, price="3")}
        assert gross_sales([_item(7, 3)], catalog) == Decimal("9.0")


class TestTotalCogs:

    def test_uses_cost_not_price(self):
        assert total_cogs([_item(qty=3)], [_product(price="10", cogs="4")]) == Decimal("12.0")

    def test_missing_product_contributes_zero(self):
        catalog = [_product(1, price="10", cogs="4")]
        assert total_cogs([_item(1, 2), _item(99, 5)], catalog) == Decimal("8.0")

    def test_only_unknown_products(self):
        assert total_cogs([_item(42, 1)], [_product(1)]) == Decimal("0.0")


class TestSales:

    def test_sign_convention(self):
        # gross + taxes - discounts + shipping
        assert sales(30, 1, 2, 5) == Decimal("34.0")

    def test_taxes_increase_sales(self):
        assert sales(0, 10, 0, 0) == Decimal("10.0")

    @pytest.mark.parametrize(
        "bumped, expected",
        [
            ("taxes", Decimal("110.5")),
            ("shipping", Decimal("110.5")),
            ("discounts", Decimal("105.5")),
        ],
    )
    def test_linear_in_each_adjustment(self, bumped, expected):
        args = {"gross_sales": 100, "taxes": 10, "discounts": 5, "shipping": 3}
        assert sales(**args) == Decimal("108.0")
        args[bumped] += Decimal("2.5")
        assert sales(**args) == expected

    def test_result_is_rounded(self):
        assert sales(Decimal("10.0"), Decimal("1.04"), Decimal("2.25"), Decimal("4.99")) == Decimal("13.8")


class TestGrossProfit:

    def test_positive(self):
        assert gross_profit(34, 12) == Decimal("22.0")

    def test_loss_is_valid(self):
        assert gross_profit(10, Decimal("25.5")) == Decimal("-15.5")


class TestGrossMargin:

    @pytest.mark.parametrize("profit", [0, Decimal("-12.5"), Decimal("5")])
    def test_zero_sales_returns_zero(self, profit):
        assert gross_margin(profit, 0) == 0
        assert gross_margin(profit, Decimal("0.0")) == 0

    @pytest.mark.parametrize(
        "profit, sale, expected",
        [
            (22, 34, Decimal("64.7")),
            (-5, 20, Decimal("-25.0")),
            (1, 3, Decimal("33.3")),
            (2, 3, Decimal("66.7")),
        ],
    )
    def test_percentage_of_sales(self, profit, sale, expected):
        assert gross_margin(profit, sale) == expected


# ── Per-order record ─────────────────────────────────────────────────────────


class TestOrderAnalytics:

    def test_scenario_single_line_item(self):
        order = Order.create("A-1", [(1, 3)], discounts=2, taxes=1, shipping=5)
        record = order_analytics(order, [_product(price="10", cogs="4")])

        assert record.order_no == "A-1"
        assert record.gross_sales == Decimal("30.0")
        assert record.total_cogs == Decimal("12.0")
        assert record.sales == Decimal("34.0")
        assert record.gross_profit == Decimal("22.0")
        assert record.gross_margin == Decimal("64.7")
        assert record.discounts == Decimal("2.0")
        assert record.taxes == Decimal("1.0")
        assert record.shipping == Decimal("5.0")

    def test_scenario_no_matching_products(self):
        order = Order.create("B-1", [(98, 1), (99, 4)])
        record = order_analytics(order, [_product(1)])

        assert record.gross_sales == Decimal("0.0")
        assert record.total_cogs == Decimal("0.0")
        assert record.sales == Decimal("0.0")
        assert record.gross_profit == Decimal("0.0")
        assert record.gross_margin == 0
        assert record.gross_margin.is_finite()

    def test_adjustments_are_rounded_but_sales_use_raw_values(self):
        order = Order.create("C-1", [(1, 1)], discounts="2.25", taxes="1.04", shipping="4.99")
        record = order_analytics(order, [_product(price="10", cogs="4")])

        assert record.discounts == Decimal("2.3")
        assert record.taxes == Decimal("1.0")
        assert record.shipping == Decimal("5.0")
        # 10 + 1.04 - 2.25 + 4.99 = 13.78
        assert record.sales == Decimal("13.8")
        assert record.gross_profit == Decimal("9.8")
        assert record.gross_margin == Decimal("71.0")

    def test_reflects_current_catalog_prices(self):
        product = _product(price="10", cogs="4")
        order = Order.create("D-1", [(1, 3)])
        assert order_analytics(order, [product]).gross_sales == Decimal("30.0")

        product.update(product.title, product.category, Money.of("20"), product.cogs)
        assert order_analytics(order, [product]).gross_sales == Decimal("60.0")

    def test_fractional_quantity(self):
        order = Order.create("E-1", [(1, "2.5")])
        record = order_analytics(order, [_product(price="4", cogs="1")])
        assert record.gross_sales == Decimal("10.0")
        assert record.total_cogs == Decimal("2.5")

    def test_negative_profit_order(self):
        order = Order.create("F-1", [(1, 1)], discounts=8)
        record = order_analytics(order, [_product(price="10", cogs="4")])
        assert record.sales == Decimal("2.0")
        assert record.gross_profit == Decimal("-2.0")
        assert record.gross_margin == Decimal("-100.0")


class TestAnalyzeOrders:

    def test_preserves_order_sequence(self):
        orders = [Order.create(no, [(1, 1)]) for no in ("Z", "A", "M")]
        records = analyze_orders(orders, [_product()])
        assert [r.order_no for r in records] == ["Z", "A", "M"]

    def test_empty(self):
        assert analyze_orders([], [_product()]) == []


class TestIndexCatalog:

    def test_indexes_by_id(self):
        a, b = _product(1), _product(2)
        assert index_catalog([a, b]) == {1: a, 2: b}

    def test_mapping_is_reused(self):
        catalog = {1: _product(1)}
        assert index_catalog(catalog) is catalog


# ── Portfolio totals ─────────────────────────────────────────────────────────


class TestPortfolioTotals:

    def _two_records(self):
        catalog = [_product(1, price="10", cogs="4"), _product(2, price="50", cogs="45")]
        orders = [
            Order.create("A", [(1, 3)], discounts=2, taxes=1, shipping=5),
            Order.create("B", [(2, 1)]),
        ]
        return analyze_orders(orders, catalog)

    def test_sums_each_field(self):
        first, second = records = self._two_records()
        totals = portfolio_totals(records)

        assert totals.order_count == 2
        for name in (
            "gross_sales",
            "discounts",
            "taxes",
            "shipping",
            "sales",
            "total_cogs",
            "gross_profit",
        ):
            assert getattr(totals, name) == getattr(first, name) + getattr(second, name)

        assert totals.sales == Decimal("84.0")
        assert totals.gross_profit == Decimal("27.0")

    def test_margin_uses_summed_profit_and_sales(self):
        first, second = records = self._two_records()
        totals = portfolio_totals(records)

        assert first.gross_margin == Decimal("64.7")
        assert second.gross_margin == Decimal("10.0")
        # 27 / 84 * 100, not the mean of 64.7 and 10.0
        assert totals.gross_margin == Decimal("32.1")
        assert totals.gross_margin != (first.gross_margin + second.gross_margin) / 2

    def test_zero_total_sales_leaves_margin_undefined(self, caplog):
        orders = [Order.create("X", [(99, 1)]), Order.create("Y", [])]
        records = analyze_orders(orders, [_product(1)])

        with caplog.at_level(logging.WARNING):
            totals = portfolio_totals(records)

        assert totals.sales == Decimal("0.0")
        assert totals.gross_margin is None
        assert "margin undefined" in caplog.text

    def test_sales_cancelling_out_also_undefined(self):
        catalog = [_product(1, price="10", cogs="4")]
        orders = [
            Order.create("P", [(1, 1)]),
            Order.create("N", [], discounts=10),
        ]
        totals = portfolio_totals(analyze_orders(orders, catalog))
        assert totals.sales == Decimal("0.0")
        assert totals.gross_profit == Decimal("-4.0")
        assert totals.gross_margin is None

    def test_no_records(self):
        totals = portfolio_totals([])
        assert totals.order_count == 0
        assert totals.gross_sales == 0
        assert totals.gross_margin is None

    def test_accepts_generator(self):
        records = self._two_records()
        totals = portfolio_totals(r for r in records)
        assert totals.order_count == 2

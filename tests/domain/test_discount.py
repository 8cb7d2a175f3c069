"""Unit tests for discount price calculation and the Discount entity."""

from datetime import datetime
from decimal import Decimal

import pytest

from webstore.domain.exceptions import ValidationError
from webstore.domain.model.discount import Discount, calculate_discounted_price


class TestCalculateDiscountedPrice:

    @pytest.mark.parametrize(
        "price, percentage, expected",
        [
            ("100", "20", "80.00"),
            ("200", "20", "160.00"),
            ("300", "20", "240.00"),
            ("59.99", "15", "50.99"),
            ("10", "0", "10.00"),
            ("10", "100", "0.00"),
        ],
    )
    def test_reduces_price_by_percentage(self, price, percentage, expected):
        assert calculate_discounted_price(Decimal(price), Decimal(percentage)) == Decimal(expected)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            calculate_discounted_price(Decimal("-1"), Decimal("10"))

    def test_negative_percentage_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            calculate_discounted_price(Decimal("10"), Decimal("-5"))

    def test_percentage_above_hundred_goes_negative(self):
        assert calculate_discounted_price(Decimal("50"), Decimal("150")) == Decimal("-25.00")


class TestDiscount:

    def test_create(self):
        d = Discount.create(" Spring ", Decimal("10"), datetime(2024, 3, 1), datetime(2024, 3, 31))
        assert d.id is None
        assert d.name == "Spring"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Discount.create(" ", Decimal("10"), datetime(2024, 3, 1), datetime(2024, 3, 31))

    def test_negative_percentage_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Discount.create("X", Decimal("-1"), datetime(2024, 3, 1), datetime(2024, 3, 31))

    def test_inverted_window_rejected(self):
        with pytest.raises(ValidationError, match="start date"):
            Discount.create("X", Decimal("5"), datetime(2024, 4, 1), datetime(2024, 3, 1))

    def test_active_until_end_date(self):
        d = Discount.create("X", Decimal("5"), datetime(2024, 3, 1), datetime(2024, 3, 31))
        assert d.is_active_at(datetime(2024, 3, 30, 23, 59))
        assert not d.is_active_at(datetime(2024, 3, 31))
        assert not d.is_active_at(datetime(2024, 4, 1))

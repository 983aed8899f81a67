"""Unit tests for OrderLine and reservation collapsing."""

import pytest

from stockorder.domain.exceptions import ValidationError
from stockorder.domain.model.order import OrderLine, lines_from_reservations


class TestOrderLine:

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            OrderLine(item_id=1, quantity=0)

    def test_lines_are_values(self):
        assert OrderLine(1, 2) == OrderLine(1, 2)


class TestLinesFromReservations:

    def test_sorted_by_item_id(self):
        lines = lines_from_reservations({7: 1, 2: 5, 4: 3})
        assert [line.item_id for line in lines] == [2, 4, 7]
        assert [line.quantity for line in lines] == [5, 3, 1]

    def test_empty_map(self):
        assert lines_from_reservations({}) == []

"""Unit tests for the ReservationSession domain service."""

import logging

import pytest

from stockorder.domain.exceptions import (
    InsufficientStockError,
    UnknownItemError,
    ValidationError,
)
from stockorder.domain.model.item import Item
from stockorder.domain.model.order import OrderLine
from stockorder.domain.model.store import Store
from stockorder.domain.model.value_objects import STORAGE_MAX, Money, Weight
from stockorder.domain.service.reservation_session import (
    ReservationSession,
    SessionState,
)


def _store() -> Store:
    store = Store()
    store.stock_new("Widget", Money(1500), Weight(100), 10)
    store.stock_new("Gadget", Money(250), Weight(40), 5)
    store.stock_new("Washer", Money(8), Weight(2), 200)
    return store


def _on_hand(store: Store) -> dict[int, int]:
    return {i: store.inventory_get(i)[1] for i in store.inventory_ids_sorted()}


class TestReserve:

    def test_reservation_hits_stock_immediately(self):
        store = _store()
        session = ReservationSession(store)
        assert session.reserve(1, 4) == 6
        assert store.inventory_get(1)[1] == 6
        assert session.reserved == {1: 4}

    def test_repeated_selection_accumulates(self):
        store = _store()
        session = ReservationSession(store)
        session.reserve(2, 2)
        session.reserve(2, 3)
        assert session.reserved == {2: 5}
        assert store.inventory_get(2)[1] == 0

    def test_insufficient_stock_reserves_nothing(self):
        store = _store()
        session = ReservationSession(store)
        with pytest.raises(InsufficientStockError):
            session.reserve(2, 6)
        assert session.reserved == {}
        assert store.inventory_get(2)[1] == 5

    def test_unknown_item_reserves_nothing(self):
        session = ReservationSession(_store())
        with pytest.raises(UnknownItemError):
            session.reserve(99, 1)
        assert session.reserved == {}

    def test_non_positive_quantity_rejected(self):
        store = _store()
        session = ReservationSession(store)
        with pytest.raises(ValidationError, match="must be positive"):
            session.reserve(1, 0)
        assert store.inventory_get(1)[1] == 10


class TestFinish:

    def test_returns_single_line_per_item_sorted_by_id(self):
        session = ReservationSession(_store())
        session.reserve(3, 10)
        session.reserve(1, 2)
        session.reserve(1, 3)
        assert session.finish() == [OrderLine(1, 5), OrderLine(3, 10)]
        assert session.state == SessionState.FINALIZED

    def test_empty_finish_rejected_and_session_stays_open(self):
        session = ReservationSession(_store())
        with pytest.raises(ValidationError, match="no items have been added"):
            session.finish()
        assert session.state == SessionState.SELECTING
        session.reserve(1, 1)
        assert session.finish() == [OrderLine(1, 1)]

    def test_finished_session_is_closed(self):
        session = ReservationSession(_store())
        session.reserve(1, 1)
        session.finish()
        with pytest.raises(ValidationError, match="closed"):
            session.reserve(1, 1)


class TestCancel:

    def test_cancel_restores_every_reservation(self):
        store = _store()
        before = _on_hand(store)
        session = ReservationSession(store)
        session.reserve(1, 4)
        session.reserve(3, 150)
        session.reserve(1, 6)
        session.cancel()
        assert _on_hand(store) == before
        assert session.state == SessionState.CANCELLED

    def test_failed_restore_does_not_stop_rollback(self, caplog):
        store = _store()
        session = ReservationSession(store)
        session.reserve(1, 2)
        session.reserve(2, 1)
        # Item 1 is replaced with a full entry, so giving 2 back overflows.
        store.stock(Item(id=1, name="Widget", cost=Money(1500), weight=Weight(100)), STORAGE_MAX)

        with caplog.at_level(logging.WARNING):
            session.cancel()

        assert store.inventory_get(2)[1] == 5
        assert store.inventory_get(1)[1] == STORAGE_MAX
        assert "Could not restore" in caplog.text

    def test_cancelled_session_is_closed(self):
        session = ReservationSession(_store())
        session.cancel()
        with pytest.raises(ValidationError, match="closed"):
            session.finish()

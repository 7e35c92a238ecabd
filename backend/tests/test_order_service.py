from datetime import UTC, date, datetime

from app.models.sequence_counter import ORDER_COUNTER_KEY, SequenceCounter
from app.services.orders.order_service import OrderService
from app.services.orders.sequencer import OrderIdentifierSequencer
from conftest import fixed_clock


async def test_order_date_follows_clock_when_counter_month_is_later(session):
    session.add(
        SequenceCounter(
            key=ORDER_COUNTER_KEY,
            period_label="2025-02",
            count=3,
            last_reset_at=datetime(2025, 2, 1, tzinfo=UTC),
        )
    )
    await session.commit()
    sequencer = OrderIdentifierSequencer(session, clock=fixed_clock(2025, 1, 15, 12))

    order = await OrderService(session, sequencer=sequencer).create_order(name="Ravi Kumar", phone="9876543210")

    assert order.order_id == "ORD004"
    assert order.period_label == "2025-02"
    assert order.order_date == date(2025, 1, 15)


async def test_order_date_is_shop_local(session):
    # 20:00 UTC on Jan 31 is Feb 1 in the shop
    sequencer = OrderIdentifierSequencer(session, clock=fixed_clock(2025, 1, 31, 20))

    order = await OrderService(session, sequencer=sequencer).create_order(name="Ravi Kumar", phone="9876543210")

    assert order.period_label == "2025-02"
    assert order.order_date == date(2025, 2, 1)

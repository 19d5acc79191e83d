"""
Service layer tests for the orders app.

Tests cover:
- Pricing on create and update
- Completion rules
- Queue projection
- Delete policies and the association gateway
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from apps.core.exceptions import (
    BaristaNotFoundError,
    CoffeeNotFoundError,
    CompletedBeforeCreatedError,
    CompletedNotClearableError,
    CreatedInFutureError,
    DuplicatedElementsError,
    KeyNotPresentError,
    OrderAlreadyCompletedError,
    OrderHasReferencesError,
    OrderNotFoundError,
)
from apps.orders.dto import OrderCreate, OrderUpdate
from apps.orders.models import OrderCoffeeRecord, OrderRecord
from apps.orders.repositories import OrderCoffeeRepository, OrderRepository
from apps.orders.services import (
    create_order,
    update_order,
    complete_order,
    delete_order,
    get_order_by_id,
    get_all_orders,
    get_orders_page,
    get_order_queue,
    reprice_orders,
)


@pytest.mark.django_db
class TestOrderCreate:
    """Tests for create_order."""

    def test_create_prices_order(self, barista, espresso, latte):
        before = timezone.now().replace(microsecond=0)
        order = create_order(data=OrderCreate(
            barista_id=barista.id,
            coffee_id_list=(espresso.id, latte.id),
        ))

        assert order.price == 180.0
        assert order.completed is None
        assert before <= order.created <= timezone.now()
        assert order.created.microsecond == 0
        assert order.barista.id == barista.id
        assert [c.id for c in order.coffees] == [espresso.id, latte.id]

        record = OrderRecord.objects.get(id=order.id)
        assert record.price == 180.0
        assert set(record.coffees.values_list('id', flat=True)) == {espresso.id, latte.id}

    def test_create_without_coffees(self, barista):
        order = create_order(data=OrderCreate(barista_id=barista.id, coffee_id_list=()))

        assert order.price == 0.0
        assert order.coffees == ()

    def test_create_missing_barista(self, espresso):
        with pytest.raises(BaristaNotFoundError):
            create_order(data=OrderCreate(barista_id=999, coffee_id_list=(espresso.id,)))

        assert not OrderRecord.objects.exists()

    def test_create_missing_coffees(self, barista, espresso):
        with pytest.raises(CoffeeNotFoundError) as exc_info:
            create_order(data=OrderCreate(
                barista_id=barista.id,
                coffee_id_list=(espresso.id, 998, 999),
            ))

        assert exc_info.value.ids == [998, 999]
        assert not OrderRecord.objects.exists()

    def test_create_duplicated_coffees(self, barista, espresso):
        with pytest.raises(DuplicatedElementsError):
            create_order(data=OrderCreate(
                barista_id=barista.id,
                coffee_id_list=(espresso.id, espresso.id),
            ))


@pytest.mark.django_db
class TestOrderUpdate:
    """Tests for update_order."""

    def test_update_recomputes_price(self, order, other_barista, espresso):
        result = update_order(data=OrderUpdate(
            id=order.id,
            barista_id=other_barista.id,
            coffee_id_list=(espresso.id,),
            price=1.0,
        ))

        order.refresh_from_db()
        assert result.price == 110.0
        assert order.price == 110.0
        assert order.barista_id == other_barista.id
        assert list(order.coffees.values_list('id', flat=True)) == [espresso.id]

    def test_update_keeps_created(self, order, espresso, latte):
        result = update_order(data=OrderUpdate(
            id=order.id,
            barista_id=order.barista_id,
            coffee_id_list=(espresso.id, latte.id),
        ))

        assert result.created == order.created

    def test_update_sets_completed(self, order, espresso):
        completed = order.created + timedelta(minutes=2)
        result = update_order(data=OrderUpdate(
            id=order.id,
            barista_id=order.barista_id,
            coffee_id_list=(espresso.id,),
            completed=completed,
        ))

        assert result.completed == completed

    def test_update_completed_before_created(self, order):
        with pytest.raises(CompletedBeforeCreatedError):
            update_order(data=OrderUpdate(
                id=order.id,
                barista_id=order.barista_id,
                coffee_id_list=(),
                completed=order.created - timedelta(minutes=2),
            ))

    def test_update_created_in_future(self, order):
        with pytest.raises(CreatedInFutureError):
            update_order(data=OrderUpdate(
                id=order.id,
                barista_id=order.barista_id,
                coffee_id_list=(),
                created=timezone.now() + timedelta(hours=1),
            ))

    def test_update_cannot_reopen(self, make_order, barista, espresso):
        finished = make_order(barista, [espresso], completed=True)

        with pytest.raises(CompletedNotClearableError):
            update_order(data=OrderUpdate(
                id=finished.id,
                barista_id=barista.id,
                coffee_id_list=(espresso.id,),
                completed=None,
            ))

        finished.refresh_from_db()
        assert finished.completed is not None

    def test_update_missing_order(self, barista):
        with pytest.raises(OrderNotFoundError):
            update_order(data=OrderUpdate(id=999, barista_id=barista.id, coffee_id_list=()))


@pytest.mark.django_db
class TestOrderComplete:
    """Tests for complete_order."""

    def test_complete_open_order(self, order):
        result = complete_order(order_id=order.id)

        order.refresh_from_db()
        assert result.completed is not None
        assert order.completed == result.completed
        assert order.completed > order.created
        assert len(result.coffees) == 2

    def test_complete_in_creation_second(self, barista, espresso):
        created = create_order(data=OrderCreate(barista_id=barista.id, coffee_id_list=(espresso.id,)))

        result = complete_order(order_id=created.id)

        assert result.completed.microsecond == 0
        assert result.completed >= created.created + timedelta(seconds=1)

    def test_complete_twice(self, order):
        complete_order(order_id=order.id)

        with pytest.raises(OrderAlreadyCompletedError):
            complete_order(order_id=order.id)

    def test_complete_missing_order(self):
        with pytest.raises(OrderNotFoundError):
            complete_order(order_id=999)


@pytest.mark.django_db
class TestOrderQueue:
    """Tests for get_order_queue."""

    def test_queue_holds_open_orders_oldest_first(self, make_order, barista, espresso):
        newest = make_order(barista, [espresso], minutes_ago=1)
        oldest = make_order(barista, [espresso], minutes_ago=30)
        middle = make_order(barista, [espresso], minutes_ago=15)
        make_order(barista, [espresso], minutes_ago=60, completed=True)

        queue = get_order_queue()

        assert [o.id for o in queue] == [oldest.id, middle.id, newest.id]

    def test_queue_ties_broken_by_id(self, make_order, barista):
        first = make_order(barista)
        second = make_order(barista)
        OrderRecord.objects.filter(id=second.id).update(created=first.created)

        assert [o.id for o in get_order_queue()] == [first.id, second.id]

    def test_empty_queue(self, db):
        assert get_order_queue() == []


@pytest.mark.django_db
class TestOrderDelete:
    """Tests for delete_order."""

    def test_delete_order_without_coffees(self, make_order, barista):
        empty = make_order(barista)

        delete_order(order_id=empty.id)

        assert not OrderRecord.objects.filter(id=empty.id).exists()

    def test_delete_order_with_coffees_rejected(self, order):
        with pytest.raises(OrderHasReferencesError):
            delete_order(order_id=order.id)

        assert OrderRecord.objects.filter(id=order.id).exists()

    def test_delete_order_with_coffees_cascade(self, settings, order):
        settings.SHOP_DELETE_POLICY = 'cascade'

        delete_order(order_id=order.id)

        assert not OrderRecord.objects.filter(id=order.id).exists()
        assert not OrderCoffeeRecord.objects.filter(order_id=order.id).exists()

    def test_delete_missing_order(self, db):
        with pytest.raises(OrderNotFoundError):
            delete_order(order_id=999)


@pytest.mark.django_db
class TestOrderReads:
    """Tests for order lookups and paging."""

    def test_get_order(self, order, barista):
        result = get_order_by_id(order_id=order.id)

        assert result.barista.full_name == barista.full_name
        assert {c.name for c in result.coffees} == {'Espresso', 'Latte'}

    def test_pages_concatenate_to_full_list(self, make_order, barista, espresso):
        for _ in range(5):
            make_order(barista, [espresso])

        everything = [o.id for o in get_all_orders()]
        pages = [get_orders_page(page=page, limit=2) for page in range(3)]
        concatenated = [o.id for page in pages for o in page]

        assert concatenated == everything
        assert len(set(concatenated)) == len(concatenated)

    def test_stored_prices_match_rule(self, order, espresso, latte, barista):
        for result in get_all_orders():
            subtotal = sum(c.price for c in result.coffees)
            assert result.price == round(subtotal * (1 + result.barista.tip_size), 2)


@pytest.mark.django_db
class TestRepriceOrders:
    """Tests for reprice_orders."""

    def test_reprices_stale_orders(self, order):
        OrderRecord.objects.filter(id=order.id).update(price=1.0)

        assert reprice_orders([order.id]) == 1

        order.refresh_from_db()
        assert order.price == 180.0

    def test_nothing_to_do(self, order):
        assert reprice_orders([order.id]) == 0
        assert reprice_orders([]) == 0


@pytest.mark.django_db
class TestOrderRepositories:
    """Tests for the order and association gateways."""

    def test_link_is_idempotent(self, make_order, barista, espresso):
        empty = make_order(barista)
        repository = OrderCoffeeRepository()

        repository.link(empty.id, espresso.id)
        repository.link(empty.id, espresso.id)

        assert OrderCoffeeRecord.objects.filter(order=empty, coffee=espresso).count() == 1

    def test_link_missing_coffee(self, order):
        with pytest.raises(KeyNotPresentError):
            OrderCoffeeRepository().link(order.id, 999)

    def test_link_missing_order(self, espresso):
        with pytest.raises(KeyNotPresentError):
            OrderCoffeeRepository().link(999, espresso.id)

    def test_unlink(self, order, espresso, latte):
        repository = OrderCoffeeRepository()

        assert repository.unlink(order.id, espresso.id) == 1
        assert repository.unlink(order.id, espresso.id) == 0
        assert repository.coffee_ids_for_order(order.id) == {latte.id}

    def test_find_by_barista_and_coffee(self, order, barista, espresso, other_barista):
        repository = OrderRepository()

        assert [o.id for o in repository.find_by_barista_id(barista.id)] == [order.id]
        assert repository.find_by_barista_id(other_barista.id) == []
        assert [o.id for o in repository.find_by_coffee_id(espresso.id)] == [order.id]

    def test_reassign_barista(self, order, other_barista):
        changed = OrderRepository().reassign_barista([order.id], other_barista.id)

        order.refresh_from_db()
        assert changed == 1
        assert order.barista_id == other_barista.id

    def test_delete_missing(self, db):
        with pytest.raises(OrderNotFoundError):
            OrderRepository().delete(999)

"""
Service layer tests for the coffees app.

Tests cover:
- Association reconciliation on update
- Delete policies (reject / cascade)
- Repricing of affected orders
"""

import pytest

from apps.coffees.dto import CoffeeCreate, CoffeeUpdate
from apps.coffees.entities import Coffee
from apps.coffees.models import CoffeeRecord
from apps.coffees.repositories import CoffeeRepository
from apps.coffees.services import coffee_management
from apps.coffees.services import (
    create_coffee,
    update_coffee,
    delete_coffee,
    get_coffee_by_id,
    get_all_coffees,
    get_coffees_page,
)
from apps.core.exceptions import (
    CoffeeHasReferencesError,
    CoffeeNotFoundError,
    DataBaseError,
    NoValidPriceError,
    NullParamError,
    OrderNotFoundError,
)
from apps.orders.models import OrderCoffeeRecord


@pytest.mark.django_db
class TestCoffeeManagement:
    """Tests for coffee_management.py service functions."""

    def test_create_coffee(self):
        coffee = create_coffee(data=CoffeeCreate(name='Flat white', price=75.5))

        assert coffee.id >= 1
        assert coffee.name == 'Flat white'
        assert coffee.price == 75.5
        assert coffee.orders == ()

    def test_create_coffee_negative_price(self):
        with pytest.raises(NoValidPriceError):
            create_coffee(data=CoffeeCreate(name='Free lunch', price=-1))

        assert not CoffeeRecord.objects.exists()

    def test_create_coffee_missing_price(self):
        with pytest.raises(NullParamError):
            create_coffee(data=CoffeeCreate(name='Mystery', price=None))

    def test_get_coffee_with_orders(self, espresso, order):
        result = get_coffee_by_id(coffee_id=espresso.id)

        assert [o.id for o in result.orders] == [order.id]

    def test_get_missing_coffee(self):
        with pytest.raises(CoffeeNotFoundError):
            get_coffee_by_id(coffee_id=999)

    def test_update_price_reprices_orders(self, espresso, order):
        result = update_coffee(data=CoffeeUpdate(
            id=espresso.id,
            name='Double espresso',
            price=200.0,
            order_id_list=(order.id,),
        ))

        order.refresh_from_db()
        assert result.name == 'Double espresso'
        assert order.price == 300.0
        assert result.orders[0].price == 300.0

    def test_update_reconciles_links(self, barista, espresso, latte, make_order):
        kept = make_order(barista, [espresso])
        dropped = make_order(barista, [espresso])
        added = make_order(barista, [latte])

        update_coffee(data=CoffeeUpdate(
            id=espresso.id,
            name=espresso.name,
            price=espresso.price,
            order_id_list=(kept.id, added.id),
        ))

        linked = set(
            OrderCoffeeRecord.objects
            .filter(coffee=espresso)
            .values_list('order_id', flat=True)
        )
        assert linked == {kept.id, added.id}

        dropped.refresh_from_db()
        added.refresh_from_db()
        assert dropped.price == 0.0
        assert added.price == 180.0

    def test_update_missing_orders(self, espresso):
        with pytest.raises(OrderNotFoundError) as exc_info:
            update_coffee(data=CoffeeUpdate(
                id=espresso.id,
                name='Espresso',
                price=100.0,
                order_id_list=(41, 40),
            ))

        assert exc_info.value.ids == [40, 41]

    def test_delete_unreferenced_coffee(self, espresso):
        delete_coffee(coffee_id=espresso.id)

        assert not CoffeeRecord.objects.filter(id=espresso.id).exists()

    def test_delete_referenced_coffee_rejected(self, espresso, order):
        with pytest.raises(CoffeeHasReferencesError):
            delete_coffee(coffee_id=espresso.id)

        assert CoffeeRecord.objects.filter(id=espresso.id).exists()
        assert OrderCoffeeRecord.objects.filter(coffee=espresso).exists()

    def test_delete_referenced_coffee_cascade(self, settings, espresso, order):
        settings.SHOP_DELETE_POLICY = 'cascade'

        delete_coffee(coffee_id=espresso.id)

        order.refresh_from_db()
        assert not CoffeeRecord.objects.filter(id=espresso.id).exists()
        assert not OrderCoffeeRecord.objects.filter(coffee_id=espresso.id).exists()
        assert order.price == 60.0

    def test_delete_missing_coffee(self):
        with pytest.raises(CoffeeNotFoundError):
            delete_coffee(coffee_id=999)

    def test_pages_concatenate_to_full_list(self, db):
        for i in range(5):
            create_coffee(data=CoffeeCreate(name=f'Coffee {i}', price=10.0 + i))

        everything = [c.id for c in get_all_coffees()]
        concatenated = [
            c.id
            for page in range(3)
            for c in get_coffees_page(page=page, limit=2)
        ]

        assert concatenated == everything


@pytest.mark.django_db
class TestCoffeeRepository:
    """Tests for the coffee gateway."""

    def test_create_round_trip(self):
        repository = CoffeeRepository()
        stored = repository.create(Coffee(name='Cortado', price=60.0))

        loaded = repository.find_by_id(stored.id)
        assert loaded.name == 'Cortado'
        assert loaded.price == 60.0

    def test_update_missing(self):
        with pytest.raises(CoffeeNotFoundError):
            CoffeeRepository().update(Coffee(name='Ghost', price=1.0, id=999))

    def test_find_by_order_ids(self, barista, espresso, latte, make_order):
        first = make_order(barista, [espresso, latte])
        second = make_order(barista, [latte])
        empty = make_order(barista, [])

        by_order = CoffeeRepository().find_by_order_ids([first.id, second.id, empty.id])

        assert [c.id for c in by_order[first.id]] == [espresso.id, latte.id]
        assert [c.id for c in by_order[second.id]] == [latte.id]
        assert empty.id not in by_order


@pytest.mark.django_db
class TestCoffeeTransactions:
    """A failure part way through a use case leaves no partial changes."""

    def test_failed_link_restores_unlinked_orders(self, monkeypatch, make_order, order, barista, espresso):
        other = make_order(barista)

        def fail(order_id, coffee_id):
            raise DataBaseError()

        monkeypatch.setattr(coffee_management.order_coffee_repository, 'link', fail)

        with pytest.raises(DataBaseError):
            update_coffee(data=CoffeeUpdate(
                id=espresso.id,
                name='Espresso',
                price=120.0,
                order_id_list=(other.id,),
            ))

        espresso.refresh_from_db()
        order.refresh_from_db()
        assert espresso.price == 100.0
        assert order.price == 180.0
        assert set(
            OrderCoffeeRecord.objects.filter(coffee=espresso).values_list('order_id', flat=True)
        ) == {order.id}

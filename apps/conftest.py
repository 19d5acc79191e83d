"""Fixtures shared by the barista, coffee and order test suites."""
import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient

from apps.baristas.models import BaristaRecord, DEFAULT_BARISTA_ID
from apps.coffees.models import CoffeeRecord
from apps.orders.models import OrderRecord, OrderCoffeeRecord


@pytest.fixture
def api_client():
    """Return an API client. The API has no authentication."""
    return APIClient()


@pytest.fixture
def default_barista(db):
    """Return the barista seeded by the migrations."""
    return BaristaRecord.objects.get(id=DEFAULT_BARISTA_ID)


@pytest.fixture
def barista(db):
    """Create and return a barista with a 20% tip."""
    return BaristaRecord.objects.create(full_name='Anna Novak', tip_size=0.2)


@pytest.fixture
def other_barista(db):
    """Create and return a barista with a 10% tip."""
    return BaristaRecord.objects.create(full_name='Ben Carter', tip_size=0.1)


@pytest.fixture
def espresso(db):
    """Create and return a coffee priced 100."""
    return CoffeeRecord.objects.create(name='Espresso', price=100.0)


@pytest.fixture
def latte(db):
    """Create and return a coffee priced 50."""
    return CoffeeRecord.objects.create(name='Latte', price=50.0)


@pytest.fixture
def make_order(db):
    """
    Return a factory for stored orders.

    The stored price is computed the same way the services do, so
    price assertions hold for fixture orders too.
    """
    def _make_order(barista, coffees=(), minutes_ago=10, completed=False):
        created = timezone.now() - timedelta(minutes=minutes_ago)
        subtotal = sum(coffee.price for coffee in coffees)
        order = OrderRecord.objects.create(
            barista=barista,
            created=created,
            completed=created + timedelta(seconds=30) if completed else None,
            price=round(subtotal * (1 + barista.tip_size), 2),
        )
        for coffee in coffees:
            OrderCoffeeRecord.objects.create(order=order, coffee=coffee)
        return order
    return _make_order


@pytest.fixture
def order(make_order, barista, espresso, latte):
    """Create and return an open order of espresso and latte by ``barista``."""
    return make_order(barista, [espresso, latte])

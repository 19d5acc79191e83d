from django.db import models
from django.db.models import F, Q

from apps.baristas.models import DEFAULT_BARISTA_ID


class OrderRecord(models.Model):
    """Stored order row. ``price`` is derived and kept in sync by the services."""

    id = models.BigAutoField(primary_key=True)
    barista = models.ForeignKey(
        'baristas.BaristaRecord',
        on_delete=models.PROTECT,
        related_name='orders',
        db_column='barista',
        default=DEFAULT_BARISTA_ID,
    )
    coffees = models.ManyToManyField(
        'coffees.CoffeeRecord',
        through='OrderCoffeeRecord',
        related_name='orders',
        blank=True,
    )
    created = models.DateTimeField()
    completed = models.DateTimeField(null=True, blank=True)
    price = models.FloatField(default=0.0)

    class Meta:
        db_table = 'order'
        ordering = ['id']
        indexes = [
            models.Index(fields=['completed', 'created'], name='order_queue_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(price__gte=0),
                name='order_price_non_negative',
            ),
            models.CheckConstraint(
                condition=Q(completed__isnull=True) | Q(completed__gt=F('created')),
                name='order_completed_after_created',
            ),
        ]

    def __str__(self):
        state = 'open' if self.completed is None else 'completed'
        return f"Order {self.id} ({state}, {self.price:.2f})"


class OrderCoffeeRecord(models.Model):
    """One (order, coffee) pair of the association set."""

    id = models.BigAutoField(primary_key=True)
    order = models.ForeignKey(
        OrderRecord,
        on_delete=models.PROTECT,
        related_name='coffee_links',
    )
    coffee = models.ForeignKey(
        'coffees.CoffeeRecord',
        on_delete=models.PROTECT,
        related_name='order_links',
    )

    class Meta:
        db_table = 'order_coffee'
        constraints = [
            models.UniqueConstraint(
                fields=['order', 'coffee'],
                name='unique_order_coffee',
            ),
        ]

    def __str__(self):
        return f"Order {self.order_id} <-> Coffee {self.coffee_id}"

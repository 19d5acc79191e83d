from django.db import models
from django.db.models import Q


class CoffeeRecord(models.Model):
    """Stored coffee row."""

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    price = models.FloatField()

    class Meta:
        db_table = 'coffee'
        ordering = ['id']
        constraints = [
            models.CheckConstraint(
                condition=Q(price__gte=0),
                name='coffee_price_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.price:.2f})"

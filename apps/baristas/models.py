from django.db import models
from django.db.models import Q

# Orders of a deleted barista are handed over to this row.
DEFAULT_BARISTA_ID = 0
DEFAULT_TIP_SIZE = 0.1


class BaristaRecord(models.Model):
    """Stored barista row."""

    id = models.BigAutoField(primary_key=True)
    full_name = models.CharField(max_length=255)
    tip_size = models.FloatField(default=DEFAULT_TIP_SIZE)

    class Meta:
        db_table = 'barista'
        ordering = ['id']
        constraints = [
            models.CheckConstraint(
                condition=Q(tip_size__gte=0),
                name='barista_tip_size_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.tip_size:.0%} tip)"

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import models


class DeletePolicy(models.TextChoices):
    REJECT = 'reject', 'Reject deletes of linked rows'
    CASCADE = 'cascade', 'Unlink, then delete'


def get_delete_policy() -> DeletePolicy:
    """Read SHOP_DELETE_POLICY from settings."""
    value = getattr(settings, 'SHOP_DELETE_POLICY', DeletePolicy.REJECT)
    try:
        return DeletePolicy(value)
    except ValueError:
        raise ImproperlyConfigured(
            f"SHOP_DELETE_POLICY must be one of {DeletePolicy.values}, got '{value}'"
        )

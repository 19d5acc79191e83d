# Generated manually to seed the default barista
from django.db import migrations

DEFAULT_BARISTA_ID = 0


def create_default_barista(apps, schema_editor):
    """Create the barista that takes over orders of deleted baristas."""
    BaristaRecord = apps.get_model('baristas', 'BaristaRecord')
    BaristaRecord.objects.update_or_create(
        id=DEFAULT_BARISTA_ID,
        defaults={'full_name': 'Default barista', 'tip_size': 0.0},
    )


def remove_default_barista(apps, schema_editor):
    BaristaRecord = apps.get_model('baristas', 'BaristaRecord')
    BaristaRecord.objects.filter(id=DEFAULT_BARISTA_ID).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('baristas', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_default_barista, remove_default_barista),
    ]

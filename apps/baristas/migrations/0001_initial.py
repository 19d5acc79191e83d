from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='BaristaRecord',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('full_name', models.CharField(max_length=255)),
                ('tip_size', models.FloatField(default=0.1)),
            ],
            options={
                'db_table': 'barista',
                'ordering': ['id'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(tip_size__gte=0),
                        name='barista_tip_size_non_negative',
                    ),
                ],
            },
        ),
    ]

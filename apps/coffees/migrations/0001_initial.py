from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CoffeeRecord',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('price', models.FloatField()),
            ],
            options={
                'db_table': 'coffee',
                'ordering': ['id'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(price__gte=0),
                        name='coffee_price_non_negative',
                    ),
                ],
            },
        ),
    ]

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('baristas', '0002_default_barista'),
        ('coffees', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OrderRecord',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('created', models.DateTimeField()),
                ('completed', models.DateTimeField(blank=True, null=True)),
                ('price', models.FloatField(default=0.0)),
                ('barista', models.ForeignKey(
                    db_column='barista',
                    default=0,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='orders',
                    to='baristas.baristarecord',
                )),
            ],
            options={
                'db_table': 'order',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='OrderCoffeeRecord',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('coffee', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='order_links',
                    to='coffees.coffeerecord',
                )),
                ('order', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='coffee_links',
                    to='orders.orderrecord',
                )),
            ],
            options={
                'db_table': 'order_coffee',
            },
        ),
        migrations.AddField(
            model_name='orderrecord',
            name='coffees',
            field=models.ManyToManyField(
                blank=True,
                related_name='orders',
                through='orders.OrderCoffeeRecord',
                to='coffees.coffeerecord',
            ),
        ),
        migrations.AddIndex(
            model_name='orderrecord',
            index=models.Index(fields=['completed', 'created'], name='order_queue_idx'),
        ),
        migrations.AddConstraint(
            model_name='orderrecord',
            constraint=models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name='order_price_non_negative',
            ),
        ),
        migrations.AddConstraint(
            model_name='orderrecord',
            constraint=models.CheckConstraint(
                condition=models.Q(completed__isnull=True) | models.Q(completed__gt=models.F('created')),
                name='order_completed_after_created',
            ),
        ),
        migrations.AddConstraint(
            model_name='ordercoffeerecord',
            constraint=models.UniqueConstraint(
                fields=('order', 'coffee'),
                name='unique_order_coffee',
            ),
        ),
    ]

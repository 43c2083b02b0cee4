import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OrderModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('shipping_address', models.JSONField(default=dict, help_text='address, city, postal_code, country', verbose_name='Shipping address')),
                ('payment_method', models.CharField(max_length=50, verbose_name='Payment method')),
                ('payment_result', models.JSONField(blank=True, default=dict, help_text='id, status, update_time, email_address', verbose_name='Payment result')),
                ('items_price', models.DecimalField(decimal_places=2, default=0, max_digits=12, verbose_name='Items price')),
                ('shipping_price', models.DecimalField(decimal_places=2, default=0, max_digits=12, verbose_name='Shipping price')),
                ('tax_price', models.DecimalField(decimal_places=2, default=0, max_digits=12, verbose_name='Tax price')),
                ('total_price', models.DecimalField(decimal_places=2, default=0, max_digits=12, verbose_name='Total price')),
                ('is_paid', models.BooleanField(default=False, verbose_name='Paid')),
                ('paid_at', models.DateTimeField(blank=True, null=True, verbose_name='Paid at')),
                ('is_delivered', models.BooleanField(default=False, verbose_name='Delivered')),
                ('delivered_at', models.DateTimeField(blank=True, null=True, verbose_name='Delivered at')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='orders', to=settings.AUTH_USER_MODEL, verbose_name='Owner')),
            ],
            options={
                'verbose_name': 'Order',
                'verbose_name_plural': 'Orders',
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'created_at'], name='orders_user_created_idx'),
                    models.Index(fields=['is_paid', 'paid_at'], name='orders_paid_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OrderItemModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Product name')),
                ('image', models.CharField(blank=True, default='', max_length=500, verbose_name='Image URL')),
                ('price', models.DecimalField(decimal_places=2, max_digits=10, verbose_name='Unit price')),
                ('qty', models.PositiveIntegerField(verbose_name='Quantity')),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='orders.ordermodel', verbose_name='Order')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='order_items', to='products.productmodel', verbose_name='Product')),
            ],
            options={
                'verbose_name': 'Order Item',
                'verbose_name_plural': 'Order Items',
                'db_table': 'order_items',
                'ordering': ['id'],
            },
        ),
    ]

import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Motorcycle',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('brand', models.CharField(max_length=100)),
                ('model', models.CharField(max_length=100)),
                ('vin', models.CharField(max_length=17, unique=True)),
                ('year', models.IntegerField(blank=True, null=True)),
                ('mileage', models.IntegerField(default=0)),
                ('status', models.CharField(choices=[('AVAILABLE', 'Available'), ('IN_MAINTENANCE', 'In Maintenance'), ('OUT_OF_SERVICE', 'Out of Service')], default='AVAILABLE', max_length=20)),
            ],
            options={
                'db_table': 'motorcycles',
                'ordering': ['brand', 'model'],
            },
        ),
        migrations.CreateModel(
            name='Maintenance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('motorcycle_id', models.UUIDField(db_index=True)),
                ('type', models.CharField(choices=[('PREVENTIVE', 'Preventive'), ('CURATIVE', 'Curative')], max_length=20)),
                ('status', models.CharField(choices=[('SCHEDULED', 'Scheduled'), ('IN_PROGRESS', 'In Progress'), ('COMPLETED', 'Completed'), ('CANCELLED', 'Cancelled')], default='SCHEDULED', max_length=20)),
                ('scheduled_date', models.DateField()),
                ('actual_date', models.DateField(blank=True, null=True)),
                ('next_maintenance_recommendation', models.DateField(blank=True, null=True)),
                ('mileage_at_maintenance', models.IntegerField(default=0)),
                ('technician_notes', models.TextField(blank=True, null=True)),
                ('replaced_parts', models.JSONField(blank=True, default=list)),
                ('total_cost', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'maintenances',
                'ordering': ['scheduled_date', 'id'],
                'indexes': [
                    models.Index(fields=['motorcycle_id'], name='maintenance_motorcy_idx'),
                    models.Index(fields=['status', 'scheduled_date'], name='maintenance_status_sched_idx'),
                    models.Index(fields=['type'], name='maintenance_type_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(mileage_at_maintenance__gte=0), name='maintenance_mileage_non_negative'),
                    models.CheckConstraint(condition=models.Q(total_cost__isnull=True) | models.Q(total_cost__gte=0), name='maintenance_total_cost_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='InventoryPart',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('category', models.CharField(choices=[('OIL_FILTER', 'Oil Filter'), ('BRAKE_PAD', 'Brake Pad'), ('BRAKE_SYSTEM', 'Brake System'), ('TIRE', 'Tire'), ('CHAIN', 'Chain'), ('SPARK_PLUG', 'Spark Plug'), ('OTHER', 'Other')], max_length=20)),
                ('reference_number', models.CharField(max_length=100, unique=True)),
                ('motorcycle_models', models.JSONField(blank=True, default=list)),
                ('current_stock', models.IntegerField(default=0)),
                ('min_stock_threshold', models.IntegerField(default=0)),
                ('unit_price', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Inventory Part',
                'verbose_name_plural': 'Inventory Parts',
                'db_table': 'inventory_parts',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['category'], name='inventory_p_categor_idx'),
                    models.Index(fields=['reference_number'], name='inventory_p_referen_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(current_stock__gte=0), name='inventory_part_stock_non_negative'),
                    models.CheckConstraint(condition=models.Q(min_stock_threshold__gte=0), name='inventory_part_threshold_non_negative'),
                    models.CheckConstraint(condition=models.Q(unit_price__gte=0), name='inventory_part_price_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='StockMovement',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('delta', models.IntegerField()),
                ('stock_after', models.IntegerField()),
                ('reason', models.CharField(max_length=255)),
                ('maintenance_id', models.UUIDField(blank=True, null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('part', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='movements', to='core.inventorypart')),
            ],
            options={
                'db_table': 'stock_movements',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['part', '-created_at'], name='stock_movem_part_created_idx'),
                    models.Index(fields=['maintenance_id'], name='stock_movem_mainten_idx'),
                ],
            },
        ),
    ]

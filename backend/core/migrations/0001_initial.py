from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Region',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.TextField(unique=True)),
            ],
            options={
                'db_table': 'regions',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='District',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.TextField()),
                ('region', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='districts', to='core.region')),
            ],
            options={
                'db_table': 'districts',
                'ordering': ['name'],
                'unique_together': {('region', 'name')},
            },
        ),
        migrations.CreateModel(
            name='Locality',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.TextField()),
                ('district', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='localities', to='core.district')),
            ],
            options={
                'db_table': 'localities',
                'ordering': ['name'],
                'unique_together': {('district', 'name')},
            },
        ),
        migrations.CreateModel(
            name='Partner',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.TextField()),
                ('short_name', models.TextField(blank=True, null=True)),
                ('inn', models.CharField(blank=True, max_length=12, null=True)),
                ('phone', models.TextField(blank=True, null=True)),
                ('email', models.EmailField(blank=True, max_length=254, null=True)),
                ('nds', models.CharField(choices=[('EXCLUDED', 'Без НДС'), ('INCLUDED', 'С НДС')], default='EXCLUDED', max_length=8)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'partners',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Station',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('code', models.CharField(max_length=16, unique=True)),
                ('name', models.TextField()),
                ('is_base', models.BooleanField(default=False)),
                ('district', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='stations', to='core.district')),
                ('locality', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='stations', to='core.locality')),
                ('region', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='stations', to='core.region')),
            ],
            options={
                'db_table': 'stations',
                'ordering': ['code'],
                'indexes': [models.Index(fields=['region', 'district', 'locality', 'is_base'], name='stations_location_idx')],
            },
        ),
        migrations.CreateModel(
            name='Elevator',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.TextField()),
                ('address', models.TextField(blank=True, null=True)),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='elevators', to='core.partner')),
                ('station', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='elevators', to='core.station')),
            ],
            options={
                'db_table': 'elevators',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ServicePrice',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('service_type', models.CharField(choices=[('LOADING', 'Погрузка'), ('STORAGE', 'Хранение'), ('DRYING', 'Сушка')], default='LOADING', max_length=16)),
                ('price', models.DecimalField(decimal_places=2, max_digits=12)),
                ('nds', models.CharField(choices=[('EXCLUDED', 'Без НДС'), ('INCLUDED', 'С НДС')], default='EXCLUDED', max_length=8)),
                ('elevator', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='service_prices', to='core.elevator')),
            ],
            options={
                'db_table': 'service_prices',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='TransportationPrice',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('price', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('price_nds', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('distance', models.PositiveIntegerField(blank=True, null=True)),
                ('loading_date', models.DateField(blank=True, null=True)),
                ('station_from', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tariffs_from', to='core.station')),
                ('station_to', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tariffs_to', to='core.station')),
            ],
            options={
                'db_table': 'transportation_prices',
                'unique_together': {('station_from', 'station_to')},
            },
        ),
    ]

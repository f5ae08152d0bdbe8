from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Bid',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('bid_type', models.CharField(choices=[('BUY', 'Покупка'), ('SELL', 'Продажа')], max_length=4)),
                ('nds', models.CharField(choices=[('EXCLUDED', 'Без НДС'), ('INCLUDED', 'С НДС')], default='EXCLUDED', max_length=8)),
                ('price', models.DecimalField(decimal_places=2, max_digits=12)),
                ('quality_class', models.PositiveSmallIntegerField(choices=[(1, '1 класс'), (2, '2 класс'), (3, '3 класс'), (4, '4 класс'), (5, '5 класс'), (6, '6 класс')])),
                ('volume', models.DecimalField(blank=True, decimal_places=3, max_digits=12, null=True)),
                ('description', models.TextField(blank=True, null=True)),
                ('quality_parameters', models.TextField(blank=True, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('creation_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('archive_date', models.DateTimeField(blank=True, null=True)),
                ('valid_until', models.DateField(blank=True, null=True)),
                ('agent', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='bids', to='core.partner')),
                ('elevator', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='bids', to='core.elevator')),
            ],
            options={
                'db_table': 'bids',
                'indexes': [
                    models.Index(fields=['bid_type', 'is_active', 'archive_date'], name='bids_current_idx'),
                    models.Index(fields=['agent', '-creation_date'], name='bids_agent_idx'),
                ],
            },
        ),
    ]

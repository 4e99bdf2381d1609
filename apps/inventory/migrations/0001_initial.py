# Generated manually for projects, plots and lands

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


PROPERTY_STATUS_CHOICES = [('AVAILABLE', 'Available'), ('ADVANCE', 'Advance paid'), ('SOLD', 'Sold')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('location', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'projects',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Plot',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('dimension', models.CharField(max_length=100)),
                ('price', models.DecimalField(decimal_places=2, max_digits=14, validators=[MinValueValidator(Decimal('0'))])),
                ('price_label', models.CharField(max_length=100)),
                ('status', models.CharField(choices=PROPERTY_STATUS_CHOICES, default='AVAILABLE', max_length=20)),
                ('image_urls', models.JSONField(blank=True, default=list)),
                ('location', models.CharField(max_length=255)),
                ('latitude', models.FloatField()),
                ('longitude', models.FloatField()),
                ('facing', models.CharField(max_length=50)),
                ('amenities', models.JSONField(blank=True, default=list)),
                ('description', models.TextField()),
                ('map_embed_url', models.TextField(blank=True)),
                ('total_area', models.FloatField()),
                ('qr_url', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='owned_plots', to=settings.AUTH_USER_MODEL)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='plots', to='inventory.project')),
            ],
            options={
                'db_table': 'plots',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['project', 'status'], name='plots_project_status_idx'),
                    models.Index(fields=['status'], name='plots_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Land',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('number', models.CharField(max_length=50)),
                ('size', models.CharField(max_length=100)),
                ('price', models.DecimalField(decimal_places=2, max_digits=14, validators=[MinValueValidator(Decimal('0.01'))])),
                ('status', models.CharField(choices=PROPERTY_STATUS_CHOICES, default='AVAILABLE', max_length=20)),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('sold_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='owned_lands', to=settings.AUTH_USER_MODEL)),
                ('plot', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lands', to='inventory.plot')),
            ],
            options={
                'db_table': 'lands',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['plot', 'created_at'], name='lands_plot_created_idx'),
                    models.Index(fields=['status', 'sold_at'], name='lands_status_sold_idx'),
                    models.Index(fields=['owner', 'status'], name='lands_owner_status_idx'),
                ],
            },
        ),
    ]

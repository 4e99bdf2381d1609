from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class PropertyStatus(models.TextChoices):
    AVAILABLE = 'AVAILABLE', 'Available'
    ADVANCE = 'ADVANCE', 'Advance paid'
    SOLD = 'SOLD', 'Sold'


class Project(models.Model):
    """A development site that groups plots."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    location = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class Plot(models.Model):
    """A listed plot inside a project. Sold plots may carry an owner."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey(Project, on_delete=models.PROTECT, related_name='plots')
    title = models.CharField(max_length=200)
    dimension = models.CharField(max_length=100)
    price = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    price_label = models.CharField(max_length=100)
    status = models.CharField(
        max_length=20,
        choices=PropertyStatus.choices,
        default=PropertyStatus.AVAILABLE
    )
    image_urls = models.JSONField(default=list, blank=True)
    location = models.CharField(max_length=255)
    latitude = models.FloatField()
    longitude = models.FloatField()
    facing = models.CharField(max_length=50)
    amenities = models.JSONField(default=list, blank=True)
    description = models.TextField()
    map_embed_url = models.TextField(blank=True)
    total_area = models.FloatField()
    qr_url = models.TextField(blank=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='owned_plots'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'plots'
        indexes = [
            models.Index(fields=['project', 'status'], name='plots_project_status_idx'),
            models.Index(fields=['status'], name='plots_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.project.name} - {self.title}"


class Land(models.Model):
    """A numbered parcel within a plot; the unit that gets sold."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    plot = models.ForeignKey(Plot, on_delete=models.CASCADE, related_name='lands')
    number = models.CharField(max_length=50)
    size = models.CharField(max_length=100)
    price = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    status = models.CharField(
        max_length=20,
        choices=PropertyStatus.choices,
        default=PropertyStatus.AVAILABLE
    )
    image_url = models.URLField(max_length=500, blank=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='owned_lands'
    )
    sold_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'lands'
        indexes = [
            models.Index(fields=['plot', 'created_at'], name='lands_plot_created_idx'),
            models.Index(fields=['status', 'sold_at'], name='lands_status_sold_idx'),
            models.Index(fields=['owner', 'status'], name='lands_owner_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.plot.title} #{self.number}"

    @property
    def is_available(self):
        return self.status == PropertyStatus.AVAILABLE

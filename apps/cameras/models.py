from django.db import models
import uuid


class Camera(models.Model):
    """Surveillance camera installed on a sold plot."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    plot = models.ForeignKey('inventory.Plot', on_delete=models.CASCADE, related_name='cameras')
    ip_address = models.CharField(max_length=255)
    label = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'plot_cameras'
        ordering = ['created_at']

    def __str__(self):
        return self.label or self.ip_address


class LandCamera(models.Model):
    """Surveillance camera installed on a sold land."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    land = models.ForeignKey('inventory.Land', on_delete=models.CASCADE, related_name='cameras')
    ip_address = models.CharField(max_length=255)
    label = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'land_cameras'
        ordering = ['created_at']

    def __str__(self):
        return self.label or self.ip_address

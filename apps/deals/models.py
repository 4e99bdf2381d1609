from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class BuyRequestStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    APPROVED = 'APPROVED', 'Approved'
    REJECTED = 'REJECTED', 'Rejected'


class SellRequestStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    APPROVED = 'APPROVED', 'Approved'
    REJECTED = 'REJECTED', 'Rejected'
    COMPLETED = 'COMPLETED', 'Completed'
    CANCELLED = 'CANCELLED', 'Cancelled'


class Urgency(models.TextChoices):
    LOW = 'LOW', 'Low'
    NORMAL = 'NORMAL', 'Normal'
    HIGH = 'HIGH', 'High'


class BuyRequest(models.Model):
    """A user's request to buy an available land."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    land = models.ForeignKey('inventory.Land', on_delete=models.CASCADE, related_name='buy_requests')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='buy_requests')
    message = models.TextField()
    status = models.CharField(
        max_length=20,
        choices=BuyRequestStatus.choices,
        default=BuyRequestStatus.PENDING
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'buy_requests'
        indexes = [
            models.Index(fields=['user', 'status'], name='buy_req_user_status_idx'),
            models.Index(fields=['land', 'status'], name='buy_req_land_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} -> {self.land} ({self.status})"


class SellRequest(models.Model):
    """An owner's request to resell a land they bought."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    plot = models.ForeignKey('inventory.Plot', on_delete=models.CASCADE, related_name='sell_requests')
    land = models.ForeignKey('inventory.Land', on_delete=models.CASCADE, related_name='sell_requests')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='sell_requests')
    asking_price = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    reason = models.TextField(default='No reason provided')
    urgency = models.CharField(max_length=10, choices=Urgency.choices, default=Urgency.NORMAL)
    agent_assistance = models.BooleanField(default=False)
    documents = models.JSONField(default=list, blank=True)
    terms_accepted = models.BooleanField(default=False)
    status = models.CharField(
        max_length=20,
        choices=SellRequestStatus.choices,
        default=SellRequestStatus.PENDING
    )
    admin_notes = models.TextField(blank=True)

    # Asking price compared with what the owner paid
    potential_profit = models.DecimalField(max_digits=14, decimal_places=2)
    profit_percentage = models.DecimalField(max_digits=20, decimal_places=2)

    approved_at = models.DateTimeField(null=True, blank=True)
    rejected_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sell_requests'
        indexes = [
            models.Index(fields=['user', 'status'], name='sell_req_user_status_idx'),
            models.Index(fields=['land', 'user', 'status'], name='sell_req_land_user_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} sells {self.land} for {self.asking_price}"

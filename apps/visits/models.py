from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone
import uuid


class VisitStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    APPROVED = 'APPROVED', 'Approved'
    REJECTED = 'REJECTED', 'Rejected'
    COMPLETED = 'COMPLETED', 'Completed'


class VisitRequest(models.Model):
    """
    A request to visit a plot.

    Approval issues a QR pass that is valid until ``expires_at``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='visit_requests'
    )
    plot = models.ForeignKey('inventory.Plot', on_delete=models.CASCADE, related_name='visit_requests')
    assigned_manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='managed_visits'
    )

    # Visitor contact details, filled in even for anonymous visitors
    name = models.CharField(max_length=150)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=20)
    date = models.DateField()
    time = models.CharField(max_length=20)

    status = models.CharField(
        max_length=20,
        choices=VisitStatus.choices,
        default=VisitStatus.PENDING
    )
    qr_code = models.TextField(blank=True)
    approved_at = models.DateTimeField(null=True, blank=True)
    expires_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'visit_requests'
        indexes = [
            models.Index(fields=['plot', 'status'], name='visit_req_plot_status_idx'),
            models.Index(fields=['email', 'status'], name='visit_req_email_status_idx'),
            models.Index(fields=['status', 'created_at'], name='visit_req_status_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} - {self.plot_id} ({self.status})"

    @property
    def is_expired(self):
        return self.expires_at is not None and timezone.now() > self.expires_at


class Feedback(models.Model):
    """Visitor feedback left after an approved visit."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    visit_request = models.ForeignKey(VisitRequest, on_delete=models.CASCADE, related_name='feedback')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='feedback')
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    experience = models.TextField()
    suggestions = models.TextField()
    purchase_interest = models.BooleanField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'visit_feedback'
        constraints = [
            models.UniqueConstraint(
                fields=['visit_request', 'user'],
                name='unique_feedback_per_visit'
            ),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} - {self.rating}/5"

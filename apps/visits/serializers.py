from rest_framework import serializers

from .models import VisitRequest, Feedback
from .services import get_visit_pass


class VisitUserSerializer(serializers.Serializer):
    """Requester or manager summary embedded in a visit."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField()
    clerk_id = serializers.CharField(allow_null=True)


class VisitPlotSerializer(serializers.Serializer):
    """Plot summary embedded in a visit."""

    id = serializers.UUIDField()
    title = serializers.CharField()
    location = serializers.CharField()
    project_id = serializers.UUIDField()
    project_name = serializers.CharField(source='project.name')


class VisitRequestSerializer(serializers.ModelSerializer):
    """Visit request with its QR pass."""

    user = VisitUserSerializer(read_only=True, allow_null=True)
    assigned_manager = VisitUserSerializer(read_only=True, allow_null=True)
    plot = VisitPlotSerializer(read_only=True)
    qr_code = serializers.SerializerMethodField()
    is_expired = serializers.BooleanField(read_only=True)

    class Meta:
        model = VisitRequest
        fields = [
            'id',
            'status',
            'date',
            'time',
            'name',
            'email',
            'phone',
            'qr_code',
            'approved_at',
            'expires_at',
            'is_expired',
            'plot',
            'user',
            'assigned_manager',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_qr_code(self, obj):
        return get_visit_pass(obj)


class VisitRequestCreateSerializer(serializers.Serializer):
    """Input for creating a visit request."""

    name = serializers.CharField(max_length=150)
    email = serializers.EmailField(max_length=255)
    phone = serializers.CharField(max_length=20)
    date = serializers.DateField()
    time = serializers.CharField(max_length=20)
    plot = serializers.UUIDField()


class VisitRequestFilterSerializer(serializers.Serializer):
    """Query parameters for the staff visit list."""

    user = serializers.UUIDField(required=False)


class AssignManagerSerializer(serializers.Serializer):
    """Input for assigning a manager."""

    manager = serializers.UUIDField()


class FeedbackVisitSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    status = serializers.CharField()
    date = serializers.DateField()
    time = serializers.CharField()
    plot = VisitPlotSerializer()


class FeedbackSerializer(serializers.ModelSerializer):
    """Feedback with its visit summary."""

    user = VisitUserSerializer(read_only=True)
    visit_request = FeedbackVisitSerializer(read_only=True)

    class Meta:
        model = Feedback
        fields = [
            'id',
            'visit_request',
            'user',
            'rating',
            'experience',
            'suggestions',
            'purchase_interest',
            'created_at',
        ]
        read_only_fields = fields


class FeedbackCreateSerializer(serializers.Serializer):
    """Input for submitting visit feedback."""

    visit_request = serializers.UUIDField()
    rating = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages={
            'min_value': 'Rating must be a number between 1 and 5.',
            'max_value': 'Rating must be a number between 1 and 5.',
        }
    )
    experience = serializers.CharField()
    suggestions = serializers.CharField()
    purchase_interest = serializers.BooleanField(required=False, allow_null=True, default=None)

from decimal import Decimal

from rest_framework import serializers

from .models import BuyRequest, BuyRequestStatus, SellRequest, SellRequestStatus, Urgency


class DealUserSerializer(serializers.Serializer):
    """Requester summary."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()


class DealLandSerializer(serializers.Serializer):
    """Land summary with its plot title."""

    id = serializers.UUIDField()
    number = serializers.CharField()
    size = serializers.CharField()
    price = serializers.DecimalField(max_digits=14, decimal_places=2)
    status = serializers.CharField()
    plot_id = serializers.UUIDField()
    plot_title = serializers.CharField(source='plot.title')


class DealPlotSerializer(serializers.Serializer):
    """Plot summary with its project."""

    id = serializers.UUIDField()
    title = serializers.CharField()
    location = serializers.CharField()
    dimension = serializers.CharField()
    price = serializers.DecimalField(max_digits=14, decimal_places=2)
    image_urls = serializers.ListField(child=serializers.CharField())
    total_area = serializers.FloatField()
    project_id = serializers.UUIDField()
    project_name = serializers.CharField(source='project.name')


class BuyRequestSerializer(serializers.ModelSerializer):
    """Buy request with land and user summaries."""

    land = DealLandSerializer(read_only=True)
    user = DealUserSerializer(read_only=True)

    class Meta:
        model = BuyRequest
        fields = ['id', 'land', 'user', 'message', 'status', 'created_at', 'updated_at']
        read_only_fields = fields


class BuyRequestCreateSerializer(serializers.Serializer):
    """Input for creating a buy request."""

    land = serializers.UUIDField()
    message = serializers.CharField()


class BuyRequestFilterSerializer(serializers.Serializer):
    """Query parameters for the admin buy request list."""

    user = serializers.UUIDField(required=False)
    status = serializers.ChoiceField(choices=BuyRequestStatus.choices, required=False)


class BuyRequestStatusSerializer(serializers.Serializer):
    """Input for deciding a buy request."""

    status = serializers.ChoiceField(
        choices=[BuyRequestStatus.APPROVED, BuyRequestStatus.REJECTED]
    )


class SellRequestSerializer(serializers.ModelSerializer):
    """Sell request with plot, land and user summaries."""

    plot = DealPlotSerializer(read_only=True)
    land = DealLandSerializer(read_only=True)
    user = DealUserSerializer(read_only=True)

    class Meta:
        model = SellRequest
        fields = [
            'id',
            'plot',
            'land',
            'user',
            'asking_price',
            'reason',
            'urgency',
            'agent_assistance',
            'documents',
            'terms_accepted',
            'status',
            'admin_notes',
            'potential_profit',
            'profit_percentage',
            'approved_at',
            'rejected_at',
            'completed_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SellRequestCreateSerializer(serializers.Serializer):
    """Input for creating a sell request."""

    land = serializers.UUIDField()
    asking_price = serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        min_value=Decimal('0.01'),
        error_messages={'min_value': 'Valid asking price is required'}
    )
    reason = serializers.CharField(required=False, allow_blank=True, default='')
    urgency = serializers.ChoiceField(choices=Urgency.choices, default=Urgency.NORMAL)
    agent_assistance = serializers.BooleanField(default=False)
    documents = serializers.ListField(
        child=serializers.URLField(max_length=500),
        required=False,
        default=list
    )
    terms_accepted = serializers.BooleanField()

    def validate_terms_accepted(self, value):
        if not value:
            raise serializers.ValidationError('Terms and conditions must be accepted')
        return value


class SellRequestStatusSerializer(serializers.Serializer):
    """Input for the admin decision on a sell request."""

    status = serializers.ChoiceField(choices=SellRequestStatus.choices)
    admin_notes = serializers.CharField(required=False, allow_blank=True, default='')

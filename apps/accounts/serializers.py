from rest_framework import serializers

from apps.cameras.serializers import CameraSerializer, LandCameraSerializer
from apps.inventory.models import Plot, Land

from .models import User, UserRole, ADMIN_ROLES


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'phone',
            'role',
            'clerk_id',
            'is_active',
            'created_at',
            'updated_at',
            'last_login',
        ]
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserCreateSerializer(serializers.Serializer):
    """Input for creating a user record from the dashboard."""

    name = serializers.CharField(max_length=150)
    email = serializers.EmailField(max_length=255)
    role = serializers.ChoiceField(choices=UserRole.choices)
    clerk_id = serializers.CharField(max_length=64)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)


class UserUpdateSerializer(serializers.Serializer):
    """Input for partially updating a user record."""

    name = serializers.CharField(max_length=150, required=False)
    email = serializers.EmailField(max_length=255, required=False)
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)


class AdminCreateSerializer(UserCreateSerializer):
    """Input for creating an admin account."""

    role = serializers.ChoiceField(
        choices=[(role.value, role.label) for role in ADMIN_ROLES]
    )


class AdminUpdateSerializer(UserUpdateSerializer):
    """Input for updating an admin account."""

    role = serializers.ChoiceField(
        choices=[(role.value, role.label) for role in ADMIN_ROLES],
        required=False
    )


class UserFilterSerializer(serializers.Serializer):
    """Query parameters for the user list."""

    role = serializers.ChoiceField(choices=UserRole.choices, required=False)


# =============================================================================
# Profile Serializers
# =============================================================================

class OwnedPlotSerializer(serializers.ModelSerializer):
    """A plot owned by the user, with its cameras."""

    cameras = CameraSerializer(many=True, read_only=True)
    project_name = serializers.CharField(source='project.name', read_only=True)

    class Meta:
        model = Plot
        fields = [
            'id',
            'title',
            'dimension',
            'price',
            'status',
            'location',
            'image_urls',
            'qr_url',
            'project_name',
            'cameras',
        ]
        read_only_fields = fields


class OwnedLandWithCamerasSerializer(serializers.ModelSerializer):
    """A land owned by the user, with its cameras."""

    cameras = LandCameraSerializer(many=True, read_only=True)
    plot_title = serializers.CharField(source='plot.title', read_only=True)

    class Meta:
        model = Land
        fields = [
            'id',
            'number',
            'size',
            'price',
            'status',
            'image_url',
            'plot',
            'plot_title',
            'sold_at',
            'cameras',
        ]
        read_only_fields = fields


class UserProfileSerializer(UserSerializer):
    """User with the plots and lands they own."""

    owned_plots = OwnedPlotSerializer(many=True, read_only=True)
    owned_lands = OwnedLandWithCamerasSerializer(many=True, read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['owned_plots', 'owned_lands']
        read_only_fields = fields


# =============================================================================
# Admin Overview Serializers
# =============================================================================

class OverviewPlotSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    title = serializers.CharField()
    status = serializers.CharField()


class OverviewVisitSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    plot_id = serializers.UUIDField()
    date = serializers.DateField()
    status = serializers.CharField()


class OverviewFeedbackSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    rating = serializers.IntegerField()
    created_at = serializers.DateTimeField()


class OverviewSellRequestSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    land_id = serializers.UUIDField()
    asking_price = serializers.DecimalField(max_digits=14, decimal_places=2)
    status = serializers.CharField()


class UserOverviewSerializer(UserSerializer):
    """Every user with counts and items of their related records."""

    owned_plots_count = serializers.IntegerField(read_only=True)
    visit_requests_count = serializers.IntegerField(read_only=True)
    feedback_count = serializers.IntegerField(read_only=True)
    sell_requests_count = serializers.IntegerField(read_only=True)

    owned_plots = OverviewPlotSerializer(many=True, read_only=True)
    visit_requests = OverviewVisitSerializer(many=True, read_only=True)
    feedback = OverviewFeedbackSerializer(many=True, read_only=True)
    sell_requests = OverviewSellRequestSerializer(many=True, read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + [
            'owned_plots_count',
            'visit_requests_count',
            'feedback_count',
            'sell_requests_count',
            'owned_plots',
            'visit_requests',
            'feedback',
            'sell_requests',
        ]
        read_only_fields = fields


# =============================================================================
# Response Serializers (API documentation)
# =============================================================================

class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class WebhookResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField(required=False)

from rest_framework import serializers

from apps.accounts.models import UserRole
from .models import Notification, BannerAd


class NotificationSerializer(serializers.ModelSerializer):
    """Notification with recipient email."""

    user_email = serializers.EmailField(source='user.email', read_only=True)

    class Meta:
        model = Notification
        fields = [
            'id',
            'user',
            'user_email',
            'title',
            'message',
            'target_role',
            'is_read',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'user', 'target_role', 'is_read', 'created_at', 'updated_at']


class NotificationCreateSerializer(serializers.Serializer):
    """Input for sending a notification to a user or a role."""

    message = serializers.CharField()
    title = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    user = serializers.UUIDField(required=False)
    target_role = serializers.ChoiceField(choices=UserRole.choices, required=False)

    def validate(self, attrs):
        if not attrs.get('user') and not attrs.get('target_role'):
            raise serializers.ValidationError(
                'Message and user or target_role are required.'
            )
        return attrs


class BannerAdSerializer(serializers.ModelSerializer):
    """Banner ad."""

    class Meta:
        model = BannerAd
        fields = ['id', 'title', 'description', 'image_url', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class BannerAdStatusSerializer(serializers.Serializer):
    """Input for toggling a banner ad."""

    is_active = serializers.BooleanField()

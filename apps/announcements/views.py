from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole

from .models import Notification, BannerAd
from .serializers import (
    NotificationSerializer,
    NotificationCreateSerializer,
    BannerAdSerializer,
    BannerAdStatusSerializer,
)
from .services import send_notification, mark_notification_read

# Detail routes only match UUIDs, anything else is a 404
UUID_LOOKUP = '[0-9a-fA-F-]{36}'


class AnnouncementPagination(PageNumberPagination):
    """Custom pagination for notifications."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class NotificationViewSet(viewsets.ModelViewSet):
    """
    ViewSet for notifications.

    list: All notifications (admin)
    create: Send to a user or broadcast to a role (admin)
    update/partial_update: Edit title and message (admin)
    destroy: Delete a notification (admin)
    mine: The current user's notifications
    read: Mark one of the current user's notifications read
    """

    lookup_value_regex = UUID_LOOKUP
    queryset = Notification.objects.select_related('user')
    serializer_class = NotificationSerializer
    pagination_class = AnnouncementPagination

    def get_permissions(self):
        if self.action in ['mine', 'read']:
            return [IsAuthenticated()]
        return [IsAdminRole()]

    def get_serializer_class(self):
        if self.action == 'create':
            return NotificationCreateSerializer
        return NotificationSerializer

    @extend_schema(request=NotificationCreateSerializer, responses={201: NotificationSerializer(many=True)})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        notifications = send_notification(
            message=data['message'],
            title=data['title'],
            user_id=data.get('user'),
            target_role=data.get('target_role', ''),
        )
        return Response(
            NotificationSerializer(notifications, many=True).data,
            status=status.HTTP_201_CREATED
        )

    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Notifications addressed to the current user."""
        notifications = Notification.objects.filter(user=request.user)
        page = self.paginate_queryset(notifications)
        if page is not None:
            serializer = NotificationSerializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        return Response(NotificationSerializer(notifications, many=True).data)

    @extend_schema(request=None, responses={200: NotificationSerializer})
    @action(detail=True, methods=['post'])
    def read(self, request, pk=None):
        """Mark a notification as read."""
        notification = mark_notification_read(notification_id=pk, user=request.user)
        return Response(NotificationSerializer(notification).data)


class BannerAdViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for banner ads.

    list: Active ads, newest first (public)
    create: Create an ad (admin)
    partial_update: Toggle is_active (admin)
    destroy: Delete an ad (admin)
    """

    serializer_class = BannerAdSerializer

    def get_queryset(self):
        if self.action == 'list':
            return BannerAd.objects.filter(is_active=True).order_by('-created_at')
        return BannerAd.objects.all()

    def get_permissions(self):
        if self.action == 'list':
            return [AllowAny()]
        return [IsAdminRole()]

    @extend_schema(request=BannerAdStatusSerializer, responses={200: BannerAdSerializer})
    def partial_update(self, request, *args, **kwargs):
        banner = self.get_object()
        serializer = BannerAdStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        banner.is_active = serializer.validated_data['is_active']
        banner.save(update_fields=['is_active', 'updated_at'])
        return Response(BannerAdSerializer(banner).data)

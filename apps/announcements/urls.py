from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'announcements'

router = DefaultRouter()
router.register(r'notifications', views.NotificationViewSet, basename='notification')
router.register(r'banner-ads', views.BannerAdViewSet, basename='banner-ad')

urlpatterns = [
    # Notification routes
    # GET    /api/notifications/              - List notifications (admin)
    # POST   /api/notifications/              - Send to user or role (admin)
    # PUT    /api/notifications/{id}/         - Edit notification (admin)
    # DELETE /api/notifications/{id}/         - Delete notification (admin)
    # GET    /api/notifications/mine/         - My notifications
    # POST   /api/notifications/{id}/read/    - Mark as read

    # Banner ad routes
    # GET    /api/banner-ads/                 - Active ads (public)
    # POST   /api/banner-ads/                 - Create ad (admin)
    # PATCH  /api/banner-ads/{id}/            - Toggle is_active (admin)
    # DELETE /api/banner-ads/{id}/            - Delete ad (admin)

    path('', include(router.urls)),
]

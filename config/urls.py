"""
URL configuration for config project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check
from apps.accounts.views import clerk_webhook

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls.auth')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('api/webhooks/clerk/', clerk_webhook, name='clerk-webhook'),

    # API endpoints
    path('api/users/', include('apps.accounts.urls.users')),
    path('api/admins/', include('apps.accounts.urls.admins')),
    path('api/', include('apps.inventory.urls')),
    path('api/', include('apps.cameras.urls')),
    path('api/', include('apps.visits.urls')),
    path('api/', include('apps.deals.urls')),
    path('api/', include('apps.staff.urls')),
    path('api/', include('apps.announcements.urls')),
    path('api/analytics/', include('apps.analytics.urls')),
]

# Media files (development only)
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'

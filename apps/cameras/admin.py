from django.contrib import admin
from apps.cameras.models import Camera, LandCamera


@admin.register(Camera)
class CameraAdmin(admin.ModelAdmin):
    """Admin interface for plot cameras."""

    list_display = ['ip_address', 'label', 'plot', 'created_at']
    search_fields = ['ip_address', 'label', 'plot__title']
    raw_id_fields = ['plot']


@admin.register(LandCamera)
class LandCameraAdmin(admin.ModelAdmin):
    """Admin interface for land cameras."""

    list_display = ['ip_address', 'label', 'land', 'created_at']
    search_fields = ['ip_address', 'label', 'land__number']
    raw_id_fields = ['land']

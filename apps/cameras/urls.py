from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'cameras'

router = DefaultRouter()
router.register(r'cameras', views.CameraViewSet, basename='camera')
router.register(r'land-cameras', views.LandCameraViewSet, basename='land-camera')

urlpatterns = [
    # Plot camera routes
    # GET    /api/cameras/                  - List plot cameras (admin)
    # POST   /api/cameras/assign/           - Install cameras on a plot (admin)
    # GET    /api/cameras/mine/             - Current user's camera feed
    # PATCH  /api/cameras/{id}/             - Update camera (admin)
    # DELETE /api/cameras/{id}/             - Delete camera (admin)

    # Land camera routes
    # GET    /api/land-cameras/?owner=      - Owner's sold lands with cameras
    # POST   /api/land-cameras/assign/      - Install cameras on a land (admin)
    # PATCH  /api/land-cameras/{id}/        - Update camera (admin)
    # DELETE /api/land-cameras/{id}/        - Delete camera (admin)

    path('', include(router.urls)),
]

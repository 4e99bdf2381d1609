from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'staff'

router = DefaultRouter()
router.register(r'offices', views.OfficeViewSet, basename='office')
router.register(r'leave-requests', views.LeaveRequestViewSet, basename='leave-request')

urlpatterns = [
    # Office routes
    # GET    /api/offices/                         - List offices with managers
    # POST   /api/offices/                         - Create office (admin)
    # PATCH  /api/offices/{id}/                    - Update office (admin)
    # DELETE /api/offices/{id}/                    - Delete office (admin)
    # POST   /api/offices/{id}/assign_manager/     - Assign manager (admin)

    # Leave request routes
    # GET    /api/leave-requests/?manager=         - List leave requests
    # POST   /api/leave-requests/                  - Request leave (manager)
    # PATCH  /api/leave-requests/{id}/             - Approve/reject (admin)

    path('', include(router.urls)),
]

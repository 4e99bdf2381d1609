from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'visits'

router = DefaultRouter()
router.register(r'visit-requests', views.VisitRequestViewSet, basename='visit-request')
router.register(r'feedback', views.FeedbackViewSet, basename='feedback')

urlpatterns = [
    # Visit request routes
    # GET    /api/visit-requests/?user=                 - List visit requests
    # POST   /api/visit-requests/                       - Request a visit
    # GET    /api/visit-requests/{id}/                  - Get visit request
    # GET    /api/visit-requests/mine/                  - Requested by or assigned to me
    # POST   /api/visit-requests/{id}/approve/          - Approve and issue QR pass
    # POST   /api/visit-requests/{id}/reject/           - Reject
    # POST   /api/visit-requests/{id}/assign_manager/   - Assign manager (admin)
    # POST   /api/visit-requests/{id}/complete/         - Mark completed

    # Feedback routes
    # GET    /api/feedback/                             - List feedback
    # POST   /api/feedback/                             - Submit feedback

    path('', include(router.urls)),
]

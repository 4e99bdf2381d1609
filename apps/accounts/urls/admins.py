from django.urls import path, include
from rest_framework.routers import SimpleRouter
from apps.accounts.views import AdminViewSet

app_name = 'admins'

router = SimpleRouter()
# /api/admins/ (list, create)
# /api/admins/{id}/ (retrieve, update, destroy)
router.register(r'', AdminViewSet, basename='admin')

urlpatterns = [
    path('', include(router.urls)),
]

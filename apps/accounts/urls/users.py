from django.urls import path, include
from rest_framework.routers import SimpleRouter
from apps.accounts.views import UserViewSet

app_name = 'users'

router = SimpleRouter()
# /api/users/ (list, create)
# /api/users/{id}/ (retrieve, update, destroy)
# /api/users/all/ (admin overview)
# /api/users/by-clerk/{clerk_id}/ (profile with owned properties)
router.register(r'', UserViewSet, basename='user')

urlpatterns = [
    path('', include(router.urls)),
]

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'deals'

router = DefaultRouter()
router.register(r'buy-requests', views.BuyRequestViewSet, basename='buy-request')
router.register(r'sell-requests', views.SellRequestViewSet, basename='sell-request')

urlpatterns = [
    # Buy request routes
    # GET    /api/buy-requests/?user=&status=   - List buy requests
    # POST   /api/buy-requests/                 - Request to buy a land
    # GET    /api/buy-requests/{id}/            - Get buy request
    # PATCH  /api/buy-requests/{id}/            - Approve/reject (admin)

    # Sell request routes
    # GET    /api/sell-requests/                - List sell requests
    # POST   /api/sell-requests/                - Put owned land up for resale
    # GET    /api/sell-requests/{id}/           - Get sell request
    # PATCH  /api/sell-requests/{id}/           - Set status (admin)
    # DELETE /api/sell-requests/{id}/           - Withdraw pending request (owner)

    path('', include(router.urls)),
]

from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Sales chart
    path('sales-stats/', views.sales_stats, name='sales-stats'),

    # Super-admin dashboard
    path('overview/', views.overview, name='overview'),
]

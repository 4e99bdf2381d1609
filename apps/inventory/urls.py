from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'inventory'

router = DefaultRouter()
router.register(r'projects', views.ProjectViewSet, basename='project')
router.register(r'plots', views.PlotViewSet, basename='plot')
router.register(r'lands', views.LandViewSet, basename='land')

urlpatterns = [
    # Project routes
    # GET    /api/projects/            - List projects with plots
    # POST   /api/projects/            - Create project (admin)
    # GET    /api/projects/{id}/       - Get project
    # PUT    /api/projects/{id}/       - Update project (admin)
    # DELETE /api/projects/{id}/       - Delete project without plots (admin)

    # Plot routes
    # GET    /api/plots/?project=      - List plots
    # POST   /api/plots/               - Create plot with QR code (admin)
    # GET    /api/plots/{id}/          - Get plot
    # PUT    /api/plots/{id}/          - Update plot (admin)
    # DELETE /api/plots/{id}/          - Delete plot (admin)

    # Land routes
    # GET    /api/lands/?plot=         - List lands of a plot
    # POST   /api/lands/               - Create land (admin)
    # PATCH  /api/lands/{id}/          - Update land (admin)
    # DELETE /api/lands/{id}/          - Delete land (admin)
    # POST   /api/lands/{id}/assign/   - Assign land to client (admin)
    # GET    /api/lands/assigned/      - Sold lands of clients
    # GET    /api/lands/owned/         - Current client's lands

    path('', include(router.urls)),
]

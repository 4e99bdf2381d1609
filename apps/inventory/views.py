from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole, IsManagerOrAdmin, IsClient

from .models import Project, Plot, Land
from .serializers import (
    ProjectSerializer,
    PlotSerializer,
    PlotCreateSerializer,
    LandSerializer,
    LandCreateSerializer,
    LandUpdateSerializer,
    LandFilterSerializer,
    AssignLandSerializer,
    AssignedLandSerializer,
    OwnedLandSerializer,
)
from .services import (
    delete_project,
    create_plot,
    update_plot,
    create_land,
    assign_land,
    get_assigned_lands,
    get_owned_lands,
    # Exceptions
    ProjectNotFoundError,
    ProjectHasPlotsError,
    PlotNotFoundError,
    LandNotFoundError,
    ClientNotFoundError,
    InvalidAssigneeError,
)

WRITE_ACTIONS = ['create', 'update', 'partial_update', 'destroy']

# Detail routes only match UUIDs, anything else is a 404
UUID_LOOKUP = '[0-9a-fA-F-]{36}'


class InventoryPagination(PageNumberPagination):
    """Custom pagination for inventory listings."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class AdminWriteMixin:
    """Reads are public, writes need an admin role."""

    def get_permissions(self):
        if self.action in WRITE_ACTIONS:
            return [IsAdminRole()]
        return [AllowAny()]


class ProjectViewSet(AdminWriteMixin, viewsets.ModelViewSet):
    """
    ViewSet for projects.

    list: All projects with their plots
    create: Create a project (admin)
    retrieve: Project with its plots
    update/partial_update: Update a project (admin)
    destroy: Delete a project without plots (admin)
    """

    lookup_value_regex = UUID_LOOKUP
    queryset = Project.objects.prefetch_related('plots')
    serializer_class = ProjectSerializer
    pagination_class = InventoryPagination

    def destroy(self, request, *args, **kwargs):
        try:
            delete_project(project_id=self.kwargs['pk'])
        except ProjectNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ProjectHasPlotsError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(status=status.HTTP_204_NO_CONTENT)


class PlotViewSet(AdminWriteMixin, viewsets.ModelViewSet):
    """
    ViewSet for plots.

    list: Plots, optionally filtered by ?project=
    create: Create a plot and its QR code (admin)
    retrieve: Get a plot
    update/partial_update: Update a plot (admin)
    destroy: Delete a plot (admin)
    """

    queryset = Plot.objects.select_related('project', 'owner')
    serializer_class = PlotSerializer
    pagination_class = InventoryPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        project_id = self.request.query_params.get('project')
        if self.action == 'list' and project_id:
            queryset = queryset.filter(project_id=project_id)
        return queryset

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return PlotCreateSerializer
        return PlotSerializer

    @extend_schema(
        parameters=[OpenApiParameter('project', str, description='Project UUID')],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data.copy()
        try:
            plot = create_plot(project_id=data.pop('project'), **data)
        except ProjectNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(PlotSerializer(plot).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        plot = self.get_object()
        serializer = self.get_serializer(plot, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data.copy()
        try:
            plot = update_plot(plot=plot, project_id=data.pop('project', None), **data)
        except ProjectNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(PlotSerializer(plot).data)


class LandViewSet(AdminWriteMixin, viewsets.ModelViewSet):
    """
    ViewSet for lands.

    list: Lands of a plot (?plot= is required), newest first
    create: Create a land (admin)
    retrieve: Get a land
    update/partial_update: Update a land (admin)
    destroy: Delete a land (admin)
    assign: Sell a land to a client (admin)
    assigned: Sold lands owned by clients (manager or admin)
    owned: The current client's lands
    """

    lookup_value_regex = UUID_LOOKUP
    queryset = Land.objects.select_related('plot', 'owner').order_by('-created_at')
    serializer_class = LandSerializer
    pagination_class = InventoryPagination

    def get_permissions(self):
        if self.action == 'assign':
            return [IsAdminRole()]
        if self.action == 'assigned':
            return [IsManagerOrAdmin()]
        if self.action == 'owned':
            return [IsClient()]
        return super().get_permissions()

    def get_serializer_class(self):
        if self.action == 'create':
            return LandCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return LandUpdateSerializer
        return LandSerializer

    @extend_schema(
        parameters=[OpenApiParameter('plot', str, required=True, description='Plot UUID')],
    )
    def list(self, request, *args, **kwargs):
        filters = LandFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = self.get_queryset().filter(plot_id=filters.validated_data['plot'])
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = LandSerializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        return Response(LandSerializer(queryset, many=True).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data.copy()
        try:
            land = create_land(plot_id=data.pop('plot'), **data)
        except PlotNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(LandSerializer(land).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        land = self.get_object()
        serializer = self.get_serializer(land, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(LandSerializer(land).data)

    @extend_schema(request=AssignLandSerializer, responses={200: LandSerializer})
    @action(detail=True, methods=['post'])
    def assign(self, request, pk=None):
        """Assign the land to a client and mark it sold."""
        serializer = AssignLandSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            land = assign_land(land_id=pk, client_id=serializer.validated_data['client'])
        except (LandNotFoundError, ClientNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidAssigneeError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(LandSerializer(land).data)

    @extend_schema(responses={200: AssignedLandSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def assigned(self, request):
        """Sold lands owned by clients."""
        return Response(AssignedLandSerializer(get_assigned_lands(), many=True).data)

    @extend_schema(responses={200: OwnedLandSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def owned(self, request):
        """Lands owned by the current client."""
        lands = get_owned_lands(user=request.user)
        return Response(OwnedLandSerializer(lands, many=True).data)

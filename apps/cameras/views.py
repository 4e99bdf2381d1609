from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole

from .models import Camera, LandCamera
from .serializers import (
    CameraSerializer,
    LandCameraSerializer,
    AssignPlotCamerasSerializer,
    AssignLandCamerasSerializer,
    OwnerFilterSerializer,
    LandWithCamerasSerializer,
    CameraFeedItemSerializer,
)
from .services import CameraAssignmentService


class CameraViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for plot cameras.

    list/retrieve: Plot cameras (admin)
    update/partial_update: Change address or label (admin)
    destroy: Remove a camera (admin)
    assign: Install cameras on an owned plot (admin)
    mine: Camera feed of the current user's plots and lands
    """

    queryset = Camera.objects.select_related('plot')
    serializer_class = CameraSerializer

    def get_permissions(self):
        if self.action == 'mine':
            return [IsAuthenticated()]
        return [IsAdminRole()]

    @extend_schema(request=AssignPlotCamerasSerializer, responses={201: CameraSerializer(many=True)})
    @action(detail=False, methods=['post'])
    def assign(self, request):
        """Install one or more cameras on a plot."""
        serializer = AssignPlotCamerasSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cameras = CameraAssignmentService.assign_plot_cameras(
            plot_id=serializer.validated_data['plot'],
            cameras=serializer.validated_data['cameras'],
        )
        return Response(
            CameraSerializer(cameras, many=True).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(responses={200: CameraFeedItemSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Cameras on the current user's plots and lands."""
        feed = CameraAssignmentService.get_camera_feed(request.user)
        return Response(CameraFeedItemSerializer(feed, many=True).data)


class LandCameraViewSet(
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for land cameras.

    list: Sold lands of ?owner= with their cameras (admin or the owner)
    update/partial_update: Change address or label (admin)
    destroy: Remove a camera (admin)
    assign: Install cameras on an owned land (admin)
    """

    queryset = LandCamera.objects.select_related('land')
    serializer_class = LandCameraSerializer

    def get_permissions(self):
        if self.action == 'list':
            return [IsAuthenticated()]
        return [IsAdminRole()]

    @extend_schema(
        parameters=[OpenApiParameter('owner', str, required=True, description='Owner UUID')],
        responses={200: LandWithCamerasSerializer(many=True)},
    )
    def list(self, request, *args, **kwargs):
        filters = OwnerFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        owner_id = filters.validated_data['owner']

        if owner_id != request.user.id and not request.user.is_admin_role:
            raise PermissionDenied('You can only view cameras on your own lands.')

        lands = CameraAssignmentService.get_owner_lands_with_cameras(owner_id)
        return Response(LandWithCamerasSerializer(lands, many=True).data)

    @extend_schema(request=AssignLandCamerasSerializer, responses={201: LandCameraSerializer(many=True)})
    @action(detail=False, methods=['post'])
    def assign(self, request):
        """Install one or more cameras on a land."""
        serializer = AssignLandCamerasSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cameras = CameraAssignmentService.assign_land_cameras(
            land_id=serializer.validated_data['land'],
            cameras=serializer.validated_data['cameras'],
        )
        return Response(
            LandCameraSerializer(cameras, many=True).data,
            status=status.HTTP_201_CREATED
        )

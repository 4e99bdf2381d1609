from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole, IsManagerOrAdmin, IsManager

from .models import Office, LeaveRequest
from .serializers import (
    OfficeSerializer,
    AssignOfficeManagerSerializer,
    LeaveRequestSerializer,
    LeaveRequestFilterSerializer,
    LeaveStatusSerializer,
)
from .services import (
    assign_manager_to_office,
    create_leave_request,
    update_leave_status,
    # Exceptions
    OfficeNotFoundError,
    ManagerNotFoundError,
    InvalidManagerError,
    LeaveRequestNotFoundError,
    InvalidLeavePeriodError,
    InvalidLeaveStatusError,
)

# Detail routes only match UUIDs, anything else is a 404
UUID_LOOKUP = '[0-9a-fA-F-]{36}'


class StaffPagination(PageNumberPagination):
    """Custom pagination for staff listings."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class OfficeViewSet(viewsets.ModelViewSet):
    """
    ViewSet for offices.

    list/retrieve: Offices with managers (manager or admin)
    create/update/destroy: Manage offices (admin)
    assign_manager: Move a manager to the office (admin)
    """

    lookup_value_regex = UUID_LOOKUP
    queryset = Office.objects.prefetch_related('managers')
    serializer_class = OfficeSerializer
    pagination_class = StaffPagination

    def get_permissions(self):
        if self.action in ['list', 'retrieve']:
            return [IsManagerOrAdmin()]
        return [IsAdminRole()]

    @extend_schema(request=AssignOfficeManagerSerializer, responses={200: OfficeSerializer})
    @action(detail=True, methods=['post'])
    def assign_manager(self, request, pk=None):
        """Assign a manager to this office."""
        serializer = AssignOfficeManagerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            office = assign_manager_to_office(
                office_id=pk,
                manager_id=serializer.validated_data['manager']
            )
        except (OfficeNotFoundError, ManagerNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidManagerError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OfficeSerializer(office).data)


class LeaveRequestViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for leave requests.

    list: Managers see their own, admins all (?manager=)
    create: Request leave (manager)
    partial_update: Approve or reject (admin)
    """

    lookup_value_regex = UUID_LOOKUP
    serializer_class = LeaveRequestSerializer
    pagination_class = StaffPagination

    def get_queryset(self):
        queryset = LeaveRequest.objects.select_related('manager')
        if self.request.user.is_admin_role:
            return queryset
        return queryset.filter(manager=self.request.user)

    def get_permissions(self):
        if self.action == 'create':
            return [IsManager()]
        if self.action == 'partial_update':
            return [IsAdminRole()]
        return [IsManagerOrAdmin()]

    def get_serializer_class(self):
        if self.action == 'partial_update':
            return LeaveStatusSerializer
        return LeaveRequestSerializer

    @extend_schema(
        parameters=[OpenApiParameter('manager', str, description='Manager UUID (admin only)')],
    )
    def list(self, request, *args, **kwargs):
        filters = LeaveRequestFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = self.get_queryset()
        if filters.validated_data.get('manager'):
            queryset = queryset.filter(manager_id=filters.validated_data['manager'])

        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = LeaveRequestSerializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        return Response(LeaveRequestSerializer(queryset, many=True).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            leave = create_leave_request(manager=request.user, **serializer.validated_data)
        except InvalidLeavePeriodError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(LeaveRequestSerializer(leave).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=LeaveStatusSerializer, responses={200: LeaveRequestSerializer})
    def partial_update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            leave = update_leave_status(
                leave_id=self.kwargs['pk'],
                status=serializer.validated_data['status']
            )
        except LeaveRequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidLeaveStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(LeaveRequestSerializer(leave).data)

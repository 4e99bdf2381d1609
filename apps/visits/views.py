from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole, IsManagerOrAdmin

from .models import VisitRequest, Feedback
from .serializers import (
    VisitRequestSerializer,
    VisitRequestCreateSerializer,
    VisitRequestFilterSerializer,
    AssignManagerSerializer,
    FeedbackSerializer,
    FeedbackCreateSerializer,
)
from .services import (
    create_visit_request,
    approve_visit_request,
    reject_visit_request,
    assign_manager,
    complete_visit_request,
    get_visits_for_user,
    submit_feedback,
    # Exceptions
    VisitRequestNotFoundError,
    PlotNotFoundError,
    VisitDateInPastError,
    DuplicateVisitRequestError,
    InvalidVisitStatusError,
    ManagerNotFoundError,
    InvalidManagerError,
    NotAssignedManagerError,
    FeedbackNotAllowedError,
    DuplicateFeedbackError,
)

# Detail routes only match UUIDs, anything else is a 404
UUID_LOOKUP = '[0-9a-fA-F-]{36}'


class VisitPagination(PageNumberPagination):
    """Custom pagination for visit requests and feedback."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class VisitRequestViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for visit requests.

    All business logic is handled by services.

    list: Staff see every request (?user= filter), others their own
    create: Request a visit (anonymous visitors allowed)
    retrieve: Get a visit request
    mine: Requests made by or assigned to the current user
    approve/reject: Decide a pending request (manager or admin)
    assign_manager: Assign a manager to the visit (admin)
    complete: Mark an approved visit completed (admin or assigned manager)
    """

    lookup_value_regex = UUID_LOOKUP
    serializer_class = VisitRequestSerializer
    pagination_class = VisitPagination

    def get_queryset(self):
        queryset = VisitRequest.objects.select_related(
            'user', 'plot__project', 'assigned_manager'
        )
        user = self.request.user
        if not user.is_authenticated:
            return queryset.none()
        if user.is_admin_role or user.is_manager:
            return queryset
        return queryset.filter(user=user)

    def get_permissions(self):
        if self.action == 'create':
            return [AllowAny()]
        if self.action in ['approve', 'reject', 'complete']:
            return [IsManagerOrAdmin()]
        if self.action == 'assign_manager':
            return [IsAdminRole()]
        return [IsAuthenticated()]

    def get_serializer_class(self):
        if self.action == 'create':
            return VisitRequestCreateSerializer
        return VisitRequestSerializer

    @extend_schema(
        parameters=[OpenApiParameter('user', str, description='Requester UUID (staff only)')],
    )
    def list(self, request, *args, **kwargs):
        filters = VisitRequestFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = self.get_queryset()
        user_id = filters.validated_data.get('user')
        if user_id and (request.user.is_admin_role or request.user.is_manager):
            queryset = queryset.filter(user_id=user_id)

        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = VisitRequestSerializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        return Response(VisitRequestSerializer(queryset, many=True).data)

    @extend_schema(request=VisitRequestCreateSerializer, responses={201: VisitRequestSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data.copy()
        user = request.user if request.user.is_authenticated else None
        try:
            visit = create_visit_request(plot_id=data.pop('plot'), user=user, **data)
        except VisitDateInPastError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except PlotNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateVisitRequestError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(VisitRequestSerializer(visit).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Requests made by or assigned to the current user."""
        visits = get_visits_for_user(user=request.user)
        return Response(VisitRequestSerializer(visits, many=True).data)

    @extend_schema(request=None, responses={200: VisitRequestSerializer})
    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        """Approve a pending request and issue the QR pass."""
        try:
            visit = approve_visit_request(visit_id=pk)
        except VisitRequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidVisitStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(VisitRequestSerializer(visit).data)

    @extend_schema(request=None, responses={200: VisitRequestSerializer})
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        """Reject a pending request."""
        try:
            visit = reject_visit_request(visit_id=pk)
        except VisitRequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidVisitStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(VisitRequestSerializer(visit).data)

    @extend_schema(request=AssignManagerSerializer, responses={200: VisitRequestSerializer})
    @action(detail=True, methods=['post'])
    def assign_manager(self, request, pk=None):
        """Assign a manager to the visit."""
        serializer = AssignManagerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            visit = assign_manager(
                visit_id=pk,
                manager_id=serializer.validated_data['manager']
            )
        except (VisitRequestNotFoundError, ManagerNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidManagerError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(VisitRequestSerializer(visit).data)

    @extend_schema(request=None, responses={200: VisitRequestSerializer})
    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """Mark an approved visit as completed."""
        try:
            visit = complete_visit_request(visit_id=pk, user=request.user)
        except VisitRequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotAssignedManagerError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidVisitStatusError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(VisitRequestSerializer(visit).data)


class FeedbackViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for visit feedback.

    list: The caller's feedback (admins see all)
    create: Leave feedback for an approved visit
    """

    serializer_class = FeedbackSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = VisitPagination

    def get_queryset(self):
        queryset = Feedback.objects.select_related(
            'user', 'visit_request__plot__project'
        )
        if self.request.user.is_admin_role:
            return queryset
        return queryset.filter(user=self.request.user)

    def get_serializer_class(self):
        if self.action == 'create':
            return FeedbackCreateSerializer
        return FeedbackSerializer

    @extend_schema(request=FeedbackCreateSerializer, responses={201: FeedbackSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data.copy()
        try:
            feedback = submit_feedback(
                visit_id=data.pop('visit_request'),
                user=request.user,
                **data
            )
        except VisitRequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except FeedbackNotAllowedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DuplicateFeedbackError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(FeedbackSerializer(feedback).data, status=status.HTTP_201_CREATED)

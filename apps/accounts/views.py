import logging

from django.db.models import Count, Prefetch
from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes, authentication_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.cameras.models import Camera, LandCamera
from apps.inventory.models import Plot, Land

from .models import User, ADMIN_ROLES
from .permissions import IsAdminRole, IsSuperAdmin, IsSelfOrAdmin
from .serializers import (
    UserSerializer,
    UserLoginSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
    AdminCreateSerializer,
    AdminUpdateSerializer,
    UserFilterSerializer,
    UserProfileSerializer,
    UserOverviewSerializer,
    AuthResponseSerializer,
    ErrorResponseSerializer,
    WebhookResponseSerializer,
)
from .services import (
    authenticate_user,
    get_user_by_clerk_id,
    create_user,
    update_user,
    delete_user,
    verify_webhook,
    sync_user_from_event,
    # Exceptions
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    UserAlreadyExistsError,
    InvalidRoleError,
    RoleEscalationError,
    WebhookConfigurationError,
    WebhookVerificationError,
    InvalidWebhookPayloadError,
)

logger = logging.getLogger(__name__)


class UserPagination(PageNumberPagination):
    """Custom pagination for user listings."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


# =============================================================================
# Authentication
# =============================================================================

@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    refresh = RefreshToken.for_user(user)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=None,
    responses={
        200: WebhookResponseSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Mirror Clerk user.created/user.updated events into the users table.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def clerk_webhook(request):
    """Verify a Svix-signed Clerk event and sync the user it describes."""
    payload = request.body

    try:
        event = verify_webhook(payload=payload, headers=request.headers)
    except WebhookConfigurationError as e:
        logger.error("Clerk webhook received but %s", e)
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except WebhookVerificationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = sync_user_from_event(event=event)
    except InvalidWebhookPayloadError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except UserAlreadyExistsError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    if user is None:
        return Response({'success': True, 'message': 'Event ignored'})
    return Response({'success': True})


# =============================================================================
# Users
# =============================================================================

class UserViewSet(viewsets.ModelViewSet):
    """
    ViewSet for users.

    list: Users, optionally filtered by ?role= (admin)
    create: Create a user record (admin)
    retrieve/update/partial_update: The user themselves or an admin
    destroy: Delete a user (admin)
    by_clerk: Profile with owned plots and lands by Clerk id
    all: Every user with related counts (admin)
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    pagination_class = UserPagination

    def get_permissions(self):
        if self.action in ['retrieve', 'update', 'partial_update', 'by_clerk']:
            return [IsAuthenticated(), IsSelfOrAdmin()]
        return [IsAdminRole()]

    def get_serializer_class(self):
        if self.action == 'create':
            return UserCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return UserUpdateSerializer
        return UserSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            filters = UserFilterSerializer(data=self.request.query_params)
            filters.is_valid(raise_exception=True)
            role = filters.validated_data.get('role')
            if role:
                queryset = queryset.filter(role=role)
        return queryset

    @extend_schema(
        parameters=[OpenApiParameter('role', str, description='Filter by role')],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=UserCreateSerializer, responses={201: UserSerializer})
    def create(self, request, *args, **kwargs):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = create_user(created_by=request.user, **serializer.validated_data)
        except InvalidRoleError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except RoleEscalationError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except UserAlreadyExistsError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=UserUpdateSerializer, responses={200: UserSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        user = self.get_object()
        serializer = UserUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            user = update_user(
                user_id=user.id,
                updated_by=request.user,
                **serializer.validated_data
            )
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidRoleError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except RoleEscalationError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except UserAlreadyExistsError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(UserSerializer(user).data)

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()
        delete_user(user_id=user.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: UserProfileSerializer})
    @action(detail=False, methods=['get'], url_path=r'by-clerk/(?P<clerk_id>[^/.]+)')
    def by_clerk(self, request, clerk_id=None):
        """Profile of a user with owned plots and lands, including cameras."""
        try:
            user = get_user_by_clerk_id(clerk_id=clerk_id)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        self.check_object_permissions(request, user)

        user = (
            User.objects
            .prefetch_related(
                Prefetch(
                    'owned_plots',
                    queryset=Plot.objects.select_related('project').prefetch_related(
                        Prefetch('cameras', queryset=Camera.objects.order_by('created_at'))
                    )
                ),
                Prefetch(
                    'owned_lands',
                    queryset=Land.objects.select_related('plot').prefetch_related(
                        Prefetch('cameras', queryset=LandCamera.objects.order_by('created_at'))
                    )
                ),
            )
            .get(id=user.id)
        )
        return Response(UserProfileSerializer(user).data)

    @extend_schema(responses={200: UserOverviewSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def all(self, request):
        """Every user with owned plots, visit requests, feedback and sell requests."""
        users = (
            User.objects
            .annotate(
                owned_plots_count=Count('owned_plots', distinct=True),
                visit_requests_count=Count('visit_requests', distinct=True),
                feedback_count=Count('feedback', distinct=True),
                sell_requests_count=Count('sell_requests', distinct=True),
            )
            .prefetch_related('owned_plots', 'visit_requests', 'feedback', 'sell_requests')
        )
        return Response(UserOverviewSerializer(users, many=True).data)


class AdminViewSet(viewsets.ModelViewSet):
    """
    ViewSet for admin accounts.

    list/retrieve: ADMIN and SUPERADMIN accounts (admin)
    create/update/partial_update/destroy: Super admin only
    """

    serializer_class = UserSerializer
    pagination_class = UserPagination

    def get_queryset(self):
        return User.objects.filter(role__in=ADMIN_ROLES)

    def get_permissions(self):
        if self.action in ['list', 'retrieve']:
            return [IsAdminRole()]
        return [IsSuperAdmin()]

    def get_serializer_class(self):
        if self.action == 'create':
            return AdminCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return AdminUpdateSerializer
        return UserSerializer

    @extend_schema(request=AdminCreateSerializer, responses={201: UserSerializer})
    def create(self, request, *args, **kwargs):
        serializer = AdminCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = create_user(
                created_by=request.user,
                allowed_roles=ADMIN_ROLES,
                **serializer.validated_data
            )
        except InvalidRoleError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except UserAlreadyExistsError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=AdminUpdateSerializer, responses={200: UserSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        user = self.get_object()
        serializer = AdminUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            user = update_user(
                user_id=user.id,
                updated_by=request.user,
                allowed_roles=ADMIN_ROLES,
                **serializer.validated_data
            )
        except InvalidRoleError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except UserAlreadyExistsError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(UserSerializer(user).data)

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()
        delete_user(user_id=user.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

from rest_framework import viewsets, mixins, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole

from .models import BuyRequest, SellRequest
from .serializers import (
    BuyRequestSerializer,
    BuyRequestCreateSerializer,
    BuyRequestFilterSerializer,
    BuyRequestStatusSerializer,
    SellRequestSerializer,
    SellRequestCreateSerializer,
    SellRequestStatusSerializer,
)
from .services import (
    create_buy_request,
    update_buy_request_status,
    create_sell_request,
    update_sell_request_status,
    delete_sell_request,
)

# Detail routes only match UUIDs, anything else is a 404
UUID_LOOKUP = '[0-9a-fA-F-]{36}'


class DealPagination(PageNumberPagination):
    """Custom pagination for buy and sell requests."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class BuyRequestViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for buy requests.

    list: Admins see all (?user=&status=), others their own
    create: Request to buy an available land
    retrieve: Get a buy request
    partial_update: Approve or reject (admin)
    """

    lookup_value_regex = UUID_LOOKUP
    serializer_class = BuyRequestSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = DealPagination

    def get_queryset(self):
        queryset = BuyRequest.objects.select_related('land__plot', 'user')
        if self.request.user.is_admin_role:
            return queryset
        return queryset.filter(user=self.request.user)

    def get_permissions(self):
        if self.action == 'partial_update':
            return [IsAdminRole()]
        return [IsAuthenticated()]

    def get_serializer_class(self):
        if self.action == 'create':
            return BuyRequestCreateSerializer
        elif self.action == 'partial_update':
            return BuyRequestStatusSerializer
        return BuyRequestSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter('user', str, description='Requester UUID (admin only)'),
            OpenApiParameter('status', str, description='PENDING, APPROVED or REJECTED'),
        ],
    )
    def list(self, request, *args, **kwargs):
        filters = BuyRequestFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = self.get_queryset()
        if filters.validated_data.get('user') and request.user.is_admin_role:
            queryset = queryset.filter(user_id=filters.validated_data['user'])
        if filters.validated_data.get('status'):
            queryset = queryset.filter(status=filters.validated_data['status'])

        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = BuyRequestSerializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        return Response(BuyRequestSerializer(queryset, many=True).data)

    @extend_schema(request=BuyRequestCreateSerializer, responses={201: BuyRequestSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        buy_request = create_buy_request(
            user=request.user,
            land_id=serializer.validated_data['land'],
            message=serializer.validated_data['message'],
        )
        return Response(BuyRequestSerializer(buy_request).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=BuyRequestStatusSerializer, responses={200: BuyRequestSerializer})
    def partial_update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        buy_request = update_buy_request_status(
            buy_request_id=self.kwargs['pk'],
            status=serializer.validated_data['status'],
        )
        return Response(BuyRequestSerializer(buy_request).data)


class SellRequestViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for sell requests.

    list: Own requests (admins see all)
    create: Put an owned land up for resale
    retrieve: Get a sell request
    partial_update: Set status and admin notes (admin)
    destroy: Withdraw a pending request (owner)
    """

    lookup_value_regex = UUID_LOOKUP
    serializer_class = SellRequestSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = DealPagination

    def get_queryset(self):
        queryset = SellRequest.objects.select_related('plot__project', 'land__plot', 'user')
        if self.request.user.is_admin_role:
            return queryset
        return queryset.filter(user=self.request.user)

    def get_permissions(self):
        if self.action == 'partial_update':
            return [IsAdminRole()]
        return [IsAuthenticated()]

    def get_serializer_class(self):
        if self.action == 'create':
            return SellRequestCreateSerializer
        elif self.action == 'partial_update':
            return SellRequestStatusSerializer
        return SellRequestSerializer

    @extend_schema(request=SellRequestCreateSerializer, responses={201: SellRequestSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data.copy()
        sell_request = create_sell_request(
            user=request.user,
            land_id=data.pop('land'),
            **data
        )
        return Response(SellRequestSerializer(sell_request).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=SellRequestStatusSerializer, responses={200: SellRequestSerializer})
    def partial_update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sell_request = update_sell_request_status(
            sell_request_id=self.kwargs['pk'],
            status=serializer.validated_data['status'],
            admin_notes=serializer.validated_data['admin_notes'],
        )
        return Response(SellRequestSerializer(sell_request).data)

    def destroy(self, request, *args, **kwargs):
        delete_sell_request(sell_request_id=self.kwargs['pk'], user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

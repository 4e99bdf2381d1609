from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole, IsSuperAdmin
from .analytics import AnalyticsQueries
from .serializers import (
    SalesStatsQuerySerializer,
    MonthlySalesSerializer,
    OverviewSerializer,
)


@extend_schema(
    parameters=[
        OpenApiParameter('year', OpenApiTypes.INT, description='Only include sales from this year'),
    ],
    responses={200: MonthlySalesSerializer(many=True)},
    description="Revenue from sold lands grouped by month, oldest first.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAdminRole])
def sales_stats(request):
    """Monthly sales totals - thin HTTP handler."""
    query_serializer = SalesStatsQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = AnalyticsQueries.sales_by_month(year=query_serializer.validated_data.get('year'))
    return Response(MonthlySalesSerializer(data, many=True).data)


@extend_schema(
    responses={200: OverviewSerializer},
    description="Counts of projects, plots, users, requests and offices.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsSuperAdmin])
def overview(request):
    """Dashboard overview counts - thin HTTP handler."""
    return Response(OverviewSerializer(AnalyticsQueries.overview()).data)

from decimal import Decimal

from rest_framework import serializers

from .models import Project, Plot, Land, PropertyStatus


class PlotSerializer(serializers.ModelSerializer):
    """Full plot representation."""

    project_name = serializers.CharField(source='project.name', read_only=True)
    owner_email = serializers.EmailField(source='owner.email', read_only=True, default=None)

    class Meta:
        model = Plot
        fields = [
            'id',
            'project',
            'project_name',
            'title',
            'dimension',
            'price',
            'price_label',
            'status',
            'image_urls',
            'location',
            'latitude',
            'longitude',
            'facing',
            'amenities',
            'description',
            'map_embed_url',
            'total_area',
            'qr_url',
            'owner',
            'owner_email',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'qr_url', 'created_at', 'updated_at']


class PlotCreateSerializer(serializers.ModelSerializer):
    """Input serializer for creating and updating plots."""

    project = serializers.UUIDField()
    price = serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        min_value=Decimal('0')
    )
    image_urls = serializers.ListField(
        child=serializers.URLField(max_length=500),
        allow_empty=True
    )
    amenities = serializers.ListField(
        child=serializers.CharField(max_length=100),
        allow_empty=True
    )
    map_embed_url = serializers.CharField(required=False, allow_blank=True)

    class Meta:
        model = Plot
        fields = [
            'project',
            'title',
            'dimension',
            'price',
            'price_label',
            'status',
            'image_urls',
            'location',
            'latitude',
            'longitude',
            'facing',
            'amenities',
            'description',
            'map_embed_url',
            'total_area',
            'owner',
        ]
        extra_kwargs = {'owner': {'required': False}}


class ProjectSerializer(serializers.ModelSerializer):
    """Project with its plots."""

    plots = PlotSerializer(many=True, read_only=True)

    class Meta:
        model = Project
        fields = [
            'id',
            'name',
            'location',
            'description',
            'image_url',
            'plots',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'plots', 'created_at', 'updated_at']


class LandSerializer(serializers.ModelSerializer):
    """Full land representation."""

    class Meta:
        model = Land
        fields = [
            'id',
            'plot',
            'number',
            'size',
            'price',
            'status',
            'image_url',
            'owner',
            'sold_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'owner', 'sold_at', 'created_at', 'updated_at']


class LandCreateSerializer(serializers.ModelSerializer):
    """Input serializer for creating lands."""

    plot = serializers.UUIDField()
    price = serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    status = serializers.ChoiceField(choices=PropertyStatus.choices)

    class Meta:
        model = Land
        fields = ['plot', 'number', 'size', 'price', 'status', 'image_url']


class LandUpdateSerializer(serializers.ModelSerializer):
    """Input serializer for updating lands. The plot cannot change."""

    price = serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=False
    )

    class Meta:
        model = Land
        fields = ['number', 'size', 'price', 'status', 'image_url']


class AssignLandSerializer(serializers.Serializer):
    """Input for assigning a land to a client."""

    client = serializers.UUIDField()


class LandFilterSerializer(serializers.Serializer):
    """Query parameters for the land list."""

    plot = serializers.UUIDField(
        required=True,
        error_messages={'required': 'Plot ID is required'}
    )


class AssignedLandSerializer(serializers.Serializer):
    """Sold land row of the dashboard's assigned-lands table."""

    id = serializers.UUIDField()
    land_number = serializers.CharField()
    land_size = serializers.CharField()
    assigned_at = serializers.DateTimeField()
    client_name = serializers.CharField()
    client_email = serializers.CharField()
    plot_title = serializers.CharField()


class PlotSummarySerializer(serializers.ModelSerializer):
    """Plot fields shown next to an owned land."""

    class Meta:
        model = Plot
        fields = [
            'id',
            'title',
            'dimension',
            'price',
            'location',
            'image_urls',
            'map_embed_url',
            'qr_url',
        ]
        read_only_fields = fields


class OwnedLandSerializer(serializers.ModelSerializer):
    """A land owned by the current client, with its plot summary."""

    plot = PlotSummarySerializer(read_only=True)

    class Meta:
        model = Land
        fields = [
            'id',
            'number',
            'size',
            'price',
            'status',
            'image_url',
            'plot',
            'sold_at',
            'created_at',
        ]
        read_only_fields = fields

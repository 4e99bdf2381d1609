from rest_framework import serializers

from .models import Camera, LandCamera


class CameraSerializer(serializers.ModelSerializer):
    """Camera attached to a plot."""

    class Meta:
        model = Camera
        fields = ['id', 'plot', 'ip_address', 'label', 'created_at', 'updated_at']
        read_only_fields = ['id', 'plot', 'created_at', 'updated_at']


class LandCameraSerializer(serializers.ModelSerializer):
    """Camera attached to a land."""

    class Meta:
        model = LandCamera
        fields = ['id', 'land', 'ip_address', 'label', 'created_at', 'updated_at']
        read_only_fields = ['id', 'land', 'created_at', 'updated_at']


class CameraInputSerializer(serializers.Serializer):
    """One camera in a bulk assignment."""

    ip_address = serializers.CharField(max_length=255)
    label = serializers.CharField(max_length=100, required=False, allow_blank=True)


class AssignPlotCamerasSerializer(serializers.Serializer):
    """Input for installing cameras on a plot."""

    plot = serializers.UUIDField()
    cameras = CameraInputSerializer(many=True, allow_empty=False)


class AssignLandCamerasSerializer(serializers.Serializer):
    """Input for installing cameras on a land."""

    land = serializers.UUIDField()
    cameras = CameraInputSerializer(many=True, allow_empty=False)


class OwnerFilterSerializer(serializers.Serializer):
    """Query parameters for the land camera list."""

    owner = serializers.UUIDField(
        required=True,
        error_messages={'required': 'Owner ID is required'}
    )


class LandWithCamerasSerializer(serializers.Serializer):
    """A sold land with its cameras and plot summary."""

    id = serializers.UUIDField()
    number = serializers.CharField()
    size = serializers.CharField()
    status = serializers.CharField()
    plot_title = serializers.CharField(source='plot.title')
    plot_location = serializers.CharField(source='plot.location')
    cameras = LandCameraSerializer(many=True)


class CameraProjectSerializer(serializers.Serializer):
    name = serializers.CharField()
    location = serializers.CharField()


class CameraFeedItemSerializer(serializers.Serializer):
    """Flattened camera entry of the owner's camera feed."""

    id = serializers.UUIDField()
    type = serializers.ChoiceField(choices=['plot', 'land'])
    title = serializers.CharField()
    location = serializers.CharField()
    number = serializers.CharField(required=False)
    size = serializers.CharField(required=False)
    ip_address = serializers.CharField()
    label = serializers.CharField(allow_blank=True)
    project = CameraProjectSerializer()

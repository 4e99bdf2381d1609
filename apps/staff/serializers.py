from rest_framework import serializers

from .models import Office, LeaveRequest, LeaveStatus


class StaffUserSerializer(serializers.Serializer):
    """Manager summary."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()


class OfficeSerializer(serializers.ModelSerializer):
    """Office with its managers."""

    managers = StaffUserSerializer(many=True, read_only=True)

    class Meta:
        model = Office
        fields = ['id', 'name', 'latitude', 'longitude', 'managers', 'created_at', 'updated_at']
        read_only_fields = ['id', 'managers', 'created_at', 'updated_at']


class AssignOfficeManagerSerializer(serializers.Serializer):
    """Input for assigning a manager to an office."""

    manager = serializers.UUIDField()


class LeaveRequestSerializer(serializers.ModelSerializer):
    """Leave request with the manager summary."""

    manager = StaffUserSerializer(read_only=True)

    class Meta:
        model = LeaveRequest
        fields = [
            'id',
            'manager',
            'start_date',
            'end_date',
            'reason',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'manager', 'status', 'created_at', 'updated_at']


class LeaveRequestFilterSerializer(serializers.Serializer):
    """Query parameters for the admin leave list."""

    manager = serializers.UUIDField(required=False)


class LeaveStatusSerializer(serializers.Serializer):
    """Input for deciding a leave request."""

    status = serializers.ChoiceField(choices=[LeaveStatus.APPROVED, LeaveStatus.REJECTED])

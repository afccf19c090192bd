# ============================================
# tracker/serializers/invitation.py
# ============================================
from rest_framework import serializers
from tracker.models import Invitation
from tracker.serializers.user import UserSummarySerializer


class InvitationCreateSerializer(serializers.Serializer):
    email = serializers.EmailField()


class InvitationAcceptSerializer(serializers.Serializer):
    token = serializers.UUIDField()


class InvitationOutputSerializer(serializers.ModelSerializer):
    invited_by = UserSummarySerializer(read_only=True)
    
    class Meta:
        model = Invitation
        fields = ['id', 'project_id', 'email', 'invited_by', 'created_at', 'accepted_at']

# ============================================
# tracker/serializers/attachment.py
# ============================================
from rest_framework import serializers
from tracker.models import Attachment
from tracker.serializers.user import UserSummarySerializer


class AttachmentCreateSerializer(serializers.Serializer):
    file_name = serializers.CharField(max_length=255)
    file_path = serializers.CharField(max_length=500)
    file_type = serializers.CharField(max_length=100, required=False, allow_blank=True)
    file_size = serializers.IntegerField(required=False, allow_null=True, min_value=0)


class AttachmentOutputSerializer(serializers.ModelSerializer):
    uploader = UserSummarySerializer(read_only=True)
    
    class Meta:
        model = Attachment
        fields = [
            'id', 'issue_id', 'uploader', 'file_name', 'file_type',
            'file_path', 'file_size', 'upload_date'
        ]

# ============================================
# tracker/serializers/message.py
# ============================================
from rest_framework import serializers
from tracker.models import Message
from tracker.serializers.user import UserSummarySerializer


class MessageSendSerializer(serializers.Serializer):
    sender_id = serializers.IntegerField(required=False)
    project_id = serializers.IntegerField()
    content = serializers.CharField()


class MessageContentSerializer(serializers.Serializer):
    content = serializers.CharField()


class MessageOutputSerializer(serializers.ModelSerializer):
    sender = UserSummarySerializer(read_only=True)
    
    class Meta:
        model = Message
        fields = ['id', 'chat_id', 'sender', 'content', 'created_at']

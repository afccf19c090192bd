# ============================================
# tracker/views/message.py
# ============================================
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied
from drf_spectacular.utils import extend_schema
from rest_framework.parsers import FormParser, JSONParser
from rest_framework.views import APIView
from rest_framework.response import Response

from tracker.parsers import PlainTextParser
from tracker.serializers.message import (
    MessageSendSerializer,
    MessageContentSerializer,
    MessageOutputSerializer
)
from tracker.selectors.user import UserSelector
from tracker.services.message import MessageService
from tracker.views.utils import DetailMessageSerializer, path_int, std_errors

User = get_user_model()


class MessageSendAPIView(APIView):
    """
    POST: Send a message to the chat of a project
    
    Request body:
    - sender_id: int (optional, must be the authenticated user)
    - project_id: int (required)
    - content: string (required)
    """
    
    @extend_schema(
        tags=["Messages"],
        request=MessageSendSerializer,
        responses={200: MessageOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = MessageSendSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        sender_id = serializer.validated_data.get('sender_id', request.user.id)
        if UserSelector.get_user_by_id(sender_id) is None:
            raise User.DoesNotExist(f"User {sender_id} not found")
        if sender_id != request.user.id:
            raise PermissionDenied("Messages can only be sent on behalf of yourself")
        
        message = MessageService.send_message(
            sender_id=sender_id,
            project_id=serializer.validated_data['project_id'],
            content=serializer.validated_data['content']
        )
        
        return Response(MessageOutputSerializer(message).data)


class ProjectChatMessagesAPIView(APIView):
    """
    GET: Messages of a project's chat, oldest first
    
    Path params:
    - project_id: int
    """
    
    @extend_schema(
        tags=["Messages"],
        parameters=[path_int("project_id", "Project ID")],
        responses={200: MessageOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request, project_id):
        messages = MessageService.get_messages_by_project(project_id)
        serializer = MessageOutputSerializer(messages, many=True)
        return Response(serializer.data)


class MessageDetailAPIView(APIView):
    """
    PUT: Edit message content (sender only). Body is the raw text or {"content": ...}
    DELETE: Delete message (sender only)
    
    Path params:
    - message_id: int
    """
    parser_classes = [JSONParser, PlainTextParser, FormParser]
    
    @extend_schema(
        tags=["Messages"],
        request=MessageContentSerializer,
        responses={200: MessageOutputSerializer, **std_errors()},
    )
    def put(self, request, message_id):
        payload = {'content': request.data} if isinstance(request.data, str) else request.data
        serializer = MessageContentSerializer(data=payload)
        serializer.is_valid(raise_exception=True)
        
        message = MessageService.update_message(
            message_id=message_id,
            user_id=request.user.id,
            content=serializer.validated_data['content']
        )
        
        return Response(MessageOutputSerializer(message).data)
    
    @extend_schema(tags=["Messages"], responses={200: DetailMessageSerializer, **std_errors()})
    def delete(self, request, message_id):
        MessageService.delete_message(
            message_id=message_id,
            user_id=request.user.id
        )
        
        return Response({'message': 'Message deleted successfully'})

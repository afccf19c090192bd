# ============================================
# tracker/services/message.py
# ============================================
import logging
from django.core.exceptions import PermissionDenied
from django.db.models import QuerySet
from django.utils import timezone
from tracker.models import Chat, Message, Project
from tracker.selectors.message import MessageSelector
from tracker.selectors.project import ProjectSelector
from tracker.services.issue import IssueService

logger = logging.getLogger(__name__)


class MessageService:
    
    @staticmethod
    def _get_chat(project_id: int) -> Chat:
        if ProjectSelector.get_project_by_id(project_id) is None:
            raise Project.DoesNotExist(f"Project {project_id} not found")
        
        chat = ProjectSelector.get_chat_by_project_id(project_id)
        if chat is None:
            raise Chat.DoesNotExist(f"Chat not found for project {project_id}")
        return chat
    
    @staticmethod
    def _get_message(message_id: int) -> Message:
        message = MessageSelector.get_message_by_id(message_id)
        if message is None:
            raise Message.DoesNotExist(f"Message {message_id} not found")
        return message
    
    @staticmethod
    def send_message(*, sender_id: int, project_id: int, content: str) -> Message:
        """Post a message to the chat of a project"""
        sender = IssueService._get_user(sender_id)
        chat = MessageService._get_chat(project_id)
        
        message = Message.objects.create(
            chat=chat,
            sender=sender,
            content=content,
            created_at=timezone.now(),
        )
        
        logger.info("[message] sent id=%s chat_id=%s sender_id=%s", message.id, chat.id, sender.id)
        return message
    
    @staticmethod
    def get_messages_by_project(project_id: int) -> QuerySet:
        chat = MessageService._get_chat(project_id)
        return MessageSelector.get_messages_by_chat(chat.id)
    
    @staticmethod
    def delete_message(*, message_id: int, user_id: int) -> None:
        message = MessageService._get_message(message_id)
        
        if message.sender_id != user_id:
            raise PermissionDenied("Only the sender can delete this message")
        
        message.delete()
        logger.info("[message] deleted id=%s by user_id=%s", message_id, user_id)
    
    @staticmethod
    def update_message(*, message_id: int, user_id: int, content: str) -> Message:
        message = MessageService._get_message(message_id)
        
        if message.sender_id != user_id:
            raise PermissionDenied("Only the sender can edit this message")
        
        message.content = content
        message.save(update_fields=['content'])
        return message

# ============================================
# tracker/selectors/message.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from tracker.models import Message


class MessageSelector:
    
    @staticmethod
    def get_message_by_id(message_id: int) -> Optional[Message]:
        try:
            return Message.objects.select_related('sender', 'chat').get(id=message_id)
        except Message.DoesNotExist:
            return None
    
    @staticmethod
    def get_messages_by_chat(chat_id: int) -> QuerySet:
        """Messages of a chat, oldest first"""
        return Message.objects.select_related('sender').filter(
            chat_id=chat_id
        ).order_by('created_at', 'id')

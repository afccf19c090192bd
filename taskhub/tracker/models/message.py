# ============================================
# tracker/models/message.py
# ============================================
from django.conf import settings
from django.db import models
from django.utils import timezone


class Message(models.Model):
    chat = models.ForeignKey(
        'Chat',
        on_delete=models.CASCADE,
        related_name='messages'
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    content = models.TextField()
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'messages'
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['chat', 'created_at'], name='message_chat_created_idx'),
        ]

    def __str__(self):
        return f"Message #{self.pk} in {self.chat_id}"

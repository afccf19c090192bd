# ============================================
# tracker/models/chat.py
# ============================================
from django.conf import settings
from django.db import models


class Chat(models.Model):
    name = models.CharField(max_length=255)
    project = models.OneToOneField(
        'Project',
        on_delete=models.CASCADE,
        related_name='chat'
    )
    participants = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name='chats'
    )

    class Meta:
        db_table = 'chats'

    def __str__(self):
        return self.name

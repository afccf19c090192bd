# ============================================
# tracker/models/invitation.py
# ============================================
import uuid
from django.conf import settings
from django.db import models


class Invitation(models.Model):
    """Email invitation to join a project; the token is sent to the invitee"""
    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='invitations'
    )
    email = models.EmailField()
    token = models.UUIDField(default=uuid.uuid4, editable=False, unique=True)
    invited_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='sent_invitations'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    accepted_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'invitations'
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['project', 'email'], name='invitation_project_email_idx'),
        ]

    @property
    def is_accepted(self) -> bool:
        return self.accepted_at is not None

    def __str__(self):
        return f"{self.email} -> {self.project_id}"

# ============================================
# tracker/selectors/invitation.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from tracker.models import Invitation


class InvitationSelector:
    
    @staticmethod
    def get_invitation_by_token(token) -> Optional[Invitation]:
        try:
            return Invitation.objects.select_related('project').get(token=token)
        except Invitation.DoesNotExist:
            return None
    
    @staticmethod
    def get_pending_invitation(project_id: int, email: str) -> Optional[Invitation]:
        return Invitation.objects.filter(
            project_id=project_id,
            email__iexact=email,
            accepted_at__isnull=True
        ).first()
    
    @staticmethod
    def get_pending_by_project(project_id: int) -> QuerySet:
        """Invitations of a project nobody has accepted yet"""
        return Invitation.objects.select_related('invited_by').filter(
            project_id=project_id,
            accepted_at__isnull=True
        )

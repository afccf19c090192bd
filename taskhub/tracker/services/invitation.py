# ============================================
# tracker/services/invitation.py
# ============================================
import logging
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone
from tracker.emails import send_invitation_email
from tracker.models import Invitation, ProjectRole
from tracker.selectors.invitation import InvitationSelector
from tracker.services.project import ProjectService

User = get_user_model()

logger = logging.getLogger(__name__)


class InvitationService:
    
    @staticmethod
    def send_invitation(*, project_id: int, user_id: int, email: str) -> Invitation:
        """
        Invite an email address to a project (OWNER/ADMINISTRATOR only).
        
        A pending invitation for the same address is mailed again instead of
        creating a second one.
        """
        project = ProjectService.get_project_by_id(project_id)
        ProjectService._check_management(project, user_id)
        
        email = User.objects.normalize_email(email)
        already_member = (
            project.owner.email.lower() == email.lower()
            or project.roles.filter(user__email__iexact=email).exists()
        )
        if already_member:
            raise ValidationError(f"{email} is already a member of the project")
        
        invitation = InvitationSelector.get_pending_invitation(project.id, email)
        if invitation is None:
            invitation = Invitation.objects.create(
                project=project,
                email=email,
                invited_by_id=user_id
            )
        
        send_invitation_email(invitation)
        logger.info("[invitation] sent id=%s project_id=%s", invitation.id, project.id)
        return invitation
    
    @staticmethod
    def get_pending_invitations(*, project_id: int, user_id: int) -> QuerySet:
        project = ProjectService.get_project_by_id(project_id)
        ProjectService._check_management(project, user_id)
        return InvitationSelector.get_pending_by_project(project.id)
    
    @staticmethod
    @transaction.atomic
    def accept_invitation(*, token, user: User) -> ProjectRole:
        """Join the invited project as MEMBER; an existing role is kept"""
        invitation = InvitationSelector.get_invitation_by_token(token)
        if invitation is None:
            raise Invitation.DoesNotExist("Invitation not found")
        
        if invitation.is_accepted:
            raise ValidationError("Invitation has already been accepted")
        
        if (user.email or '').lower() != invitation.email.lower():
            raise PermissionDenied("Invitation was sent to a different email address")
        
        project = invitation.project
        project_role, _ = ProjectRole.objects.get_or_create(
            project=project,
            user=user,
            defaults={'role': ProjectRole.Role.MEMBER}
        )
        ProjectService.add_chat_participant(project, user)
        
        invitation.accepted_at = timezone.now()
        invitation.save(update_fields=['accepted_at'])
        
        logger.info("[invitation] accepted id=%s user_id=%s", invitation.id, user.id)
        return project_role

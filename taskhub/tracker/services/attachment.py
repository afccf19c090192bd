# ============================================
# tracker/services/attachment.py
# ============================================
import logging
from typing import Optional
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied
from tracker.models import Attachment
from tracker.selectors.attachment import AttachmentSelector
from tracker.selectors.project import ProjectSelector
from tracker.services.issue import IssueService

User = get_user_model()

logger = logging.getLogger(__name__)


class AttachmentService:
    
    @staticmethod
    def create_attachment(
        *,
        issue_id: int,
        uploader: User,
        file_name: str,
        file_path: str,
        file_type: str = '',
        file_size: Optional[int] = None
    ) -> Attachment:
        """Register a file attached to an issue"""
        
        issue = IssueService.get_issue_by_id(issue_id)
        
        if not ProjectSelector.is_member(issue.project, uploader.id):
            raise PermissionDenied("User is not a member of this project")
        
        attachment = Attachment.objects.create(
            issue=issue,
            uploader=uploader,
            file_name=file_name,
            file_path=file_path,
            file_type=file_type or '',
            file_size=file_size
        )
        
        logger.info("[attachment] id=%s added to issue_id=%s", attachment.id, issue.id)
        return attachment
    
    @staticmethod
    def delete_attachment(*, attachment_id: int, user_id: int) -> None:
        attachment = AttachmentSelector.get_attachment_by_id(attachment_id)
        if attachment is None:
            raise Attachment.DoesNotExist(f"Attachment {attachment_id} not found")
        
        user = IssueService._get_user(user_id)
        
        if attachment.uploader_id != user_id and not IssueService.has_management_permission(attachment.issue, user):
            raise PermissionDenied("Only the uploader or project managers can delete attachment")
        
        attachment.delete()

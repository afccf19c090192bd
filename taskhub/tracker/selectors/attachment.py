# ============================================
# tracker/selectors/attachment.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from tracker.models import Attachment


class AttachmentSelector:
    
    @staticmethod
    def get_attachment_by_id(attachment_id: int) -> Optional[Attachment]:
        try:
            return Attachment.objects.select_related('issue__project').get(id=attachment_id)
        except Attachment.DoesNotExist:
            return None
    
    @staticmethod
    def get_attachments_by_issue(issue_id: int) -> QuerySet:
        return Attachment.objects.filter(issue_id=issue_id).order_by('upload_date')

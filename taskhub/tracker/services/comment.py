# ============================================
# tracker/services/comment.py
# ============================================
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied
from tracker.models import Comment
from tracker.selectors.comment import CommentSelector
from tracker.selectors.project import ProjectSelector
from tracker.services.issue import IssueService

User = get_user_model()


class CommentService:
    
    @staticmethod
    def _get_comment(comment_id: int) -> Comment:
        comment = CommentSelector.get_comment_by_id(comment_id)
        if comment is None:
            raise Comment.DoesNotExist(f"Comment {comment_id} not found")
        return comment
    
    @staticmethod
    def create_comment(
        *,
        issue_id: int,
        author: User,
        content: str
    ) -> Comment:
        """Create a comment on an issue"""
        
        issue = IssueService.get_issue_by_id(issue_id)
        
        # Check membership
        if not ProjectSelector.is_member(issue.project, author.id):
            raise PermissionDenied("User is not a member of this project")
        
        comment = Comment.objects.create(
            issue=issue,
            author=author,
            content=content
        )
        
        return comment
    
    @staticmethod
    def update_comment(
        *,
        comment_id: int,
        user_id: int,
        content: str
    ) -> Comment:
        """Update a comment"""
        
        comment = CommentService._get_comment(comment_id)
        
        # Only author can update
        if comment.author_id != user_id:
            raise PermissionDenied("Only comment author can update comment")
        
        comment.content = content
        comment.save()
        
        return comment
    
    @staticmethod
    def delete_comment(*, comment_id: int, user_id: int) -> None:
        """Delete a comment"""
        
        comment = CommentService._get_comment(comment_id)
        user = IssueService._get_user(user_id)
        
        # Author or project manager can delete
        if comment.author_id != user_id and not IssueService.has_management_permission(comment.issue, user):
            raise PermissionDenied("Only comment author or project managers can delete comment")
        
        comment.delete()

# ============================================
# tracker/models/comment.py
# ============================================
from django.conf import settings
from django.db import models


class Comment(models.Model):
    """Discussion entry on an issue; removed together with the issue"""
    issue = models.ForeignKey('Issue', on_delete=models.CASCADE, related_name='comments')
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='issue_comments'
    )
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'issue_comments'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.author_id} on issue #{self.issue_id}"

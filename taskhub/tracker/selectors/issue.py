# ============================================
# tracker/selectors/issue.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from tracker.models import Issue


class IssueSelector:
    
    @staticmethod
    def get_issue_by_id(issue_id: int) -> Optional[Issue]:
        """Get single issue with related data"""
        try:
            return Issue.objects.select_related(
                'project', 'creator', 'assignee', 'milestone'
            ).get(id=issue_id)
        except Issue.DoesNotExist:
            return None
    
    @staticmethod
    def get_issues_by_project(project_id: int) -> QuerySet:
        """Get all issues for a project"""
        return Issue.objects.select_related(
            'creator', 'assignee', 'milestone'
        ).prefetch_related('tags').filter(project_id=project_id)
    
    @staticmethod
    def get_issues_by_milestone(milestone_id: int) -> QuerySet:
        """Get all issues currently attached to a milestone"""
        return Issue.objects.filter(milestone_id=milestone_id)

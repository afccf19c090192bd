# ============================================
# tracker/services/issue.py
# ============================================
import logging
from datetime import datetime
from typing import Iterable, Optional, Union
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone
from tracker.models import Issue, Milestone, Project, ProjectRole, Tag
from tracker.selectors.issue import IssueSelector
from tracker.selectors.milestone import MilestoneSelector
from tracker.selectors.project import ProjectSelector
from tracker.selectors.user import UserSelector

User = get_user_model()

logger = logging.getLogger(__name__)


class _Unchanged:
    def __repr__(self):
        return 'MILESTONE_UNCHANGED'


# Passed as milestone_id to keep the current milestone on a full update.
MILESTONE_UNCHANGED = _Unchanged()


def parse_choice(choices: type, value: str, field_name: str) -> str:
    """Parse the string encoding of a choice field"""
    if value in choices.values:
        return choices(value)
    raise ValidationError(
        f"Invalid {field_name} '{value}'. Expected one of: {', '.join(choices.values)}"
    )


def is_past(value: datetime) -> bool:
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value < timezone.now()


class IssueService:
    
    @staticmethod
    def _get_user(user_id: int) -> User:
        user = UserSelector.get_user_by_id(user_id)
        if user is None:
            raise User.DoesNotExist(f"User {user_id} not found")
        return user
    
    @staticmethod
    def _resolve_milestone(milestone_id: int, project: Project) -> Milestone:
        """Load a milestone and check it belongs to the issue's project"""
        milestone = MilestoneSelector.get_milestone_by_id(milestone_id)
        if milestone is None:
            raise Milestone.DoesNotExist(f"Milestone {milestone_id} not found")
        
        if milestone.project_id != project.id:
            raise ValidationError("Milestone belongs to a different project")
        
        return milestone
    
    @staticmethod
    def _set_tags(issue: Issue, tag_names: Iterable[str]) -> None:
        tags = [
            Tag.objects.get_or_create(name=name.strip())[0]
            for name in tag_names
            if name and name.strip()
        ]
        issue.tags.set(tags)
    
    @staticmethod
    def has_management_permission(issue: Issue, user: User) -> bool:
        """Project owner, OWNER or ADMINISTRATOR role on the issue's project"""
        role = ProjectSelector.get_role(issue.project, user.id)
        return role in ProjectRole.MANAGEMENT_ROLES
    
    @staticmethod
    def get_issue_by_id(issue_id: int) -> Issue:
        issue = IssueSelector.get_issue_by_id(issue_id)
        if issue is None:
            raise Issue.DoesNotExist(f"Issue {issue_id} not found")
        return issue
    
    @staticmethod
    def get_issues_by_project(project_id: int) -> QuerySet:
        return IssueSelector.get_issues_by_project(project_id)
    
    @staticmethod
    @transaction.atomic
    def create_issue(
        *,
        creator: User,
        project_id: int,
        title: str,
        description: str = '',
        status: Optional[str] = None,
        priority: Optional[str] = None,
        issue_type: Optional[str] = None,
        due_date: Optional[datetime] = None,
        milestone_id: Optional[int] = None,
        tags: Optional[Iterable[str]] = None
    ) -> Issue:
        """Create a new issue"""
        
        project = ProjectSelector.get_project_by_id(project_id)
        if project is None:
            raise Project.DoesNotExist(f"Project {project_id} not found")
        
        if due_date is not None and is_past(due_date):
            raise ValidationError("Due date cannot be in the past")
        
        issue = Issue(
            project=project,
            creator=creator,
            title=title,
            description=description or '',
            status=parse_choice(Issue.Status, status, 'status') if status else Issue.Status.TODO,
            priority=parse_choice(Issue.Priority, priority, 'priority') if priority else Issue.Priority.LOW,
            issue_type=parse_choice(Issue.IssueType, issue_type, 'type') if issue_type else Issue.IssueType.TASK,
            due_date=due_date,
        )
        
        if milestone_id is not None:
            issue.milestone = IssueService._resolve_milestone(milestone_id, project)
        
        issue.save()
        
        if tags:
            IssueService._set_tags(issue, tags)
        
        logger.info("[issue] created id=%s project_id=%s by user_id=%s", issue.id, project.id, creator.id)
        return issue
    
    @staticmethod
    def update_status(*, issue_id: int, status: str) -> Issue:
        """Set the status of an issue"""
        issue = IssueService.get_issue_by_id(issue_id)
        issue.status = parse_choice(Issue.Status, status, 'status')
        issue.save()
        return issue
    
    @staticmethod
    def delete_issue(*, issue_id: int, user_id: int) -> None:
        """Delete issue"""
        
        user = IssueService._get_user(user_id)
        issue = IssueService.get_issue_by_id(issue_id)
        
        if not IssueService.has_management_permission(issue, user):
            raise PermissionDenied("You do not have permission to delete this issue")
        
        issue.delete()
        logger.info("[issue] deleted id=%s by user_id=%s", issue_id, user_id)
    
    @staticmethod
    def assign_user(*, issue_id: int, user_id: int) -> Issue:
        """Make a user the assignee of an issue"""
        user = IssueService._get_user(user_id)
        issue = IssueService.get_issue_by_id(issue_id)
        issue.assignee = user
        issue.save()
        return issue
    
    @staticmethod
    @transaction.atomic
    def update_issue_full(
        *,
        issue_id: int,
        user_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        issue_type: Optional[str] = None,
        due_date: Optional[datetime] = None,
        milestone_id: Union[int, None, _Unchanged] = None
    ) -> Issue:
        """
        Merge the given fields into an issue.
        
        None fields are left untouched. The milestone is the exception:
        None detaches it, an id attaches that milestone and
        MILESTONE_UNCHANGED keeps the current one.
        """
        
        issue = IssueService.get_issue_by_id(issue_id)
        user = IssueService._get_user(user_id)
        
        can_update = (
            IssueService.has_management_permission(issue, user)
            or (issue.assignee_id is not None and issue.assignee_id == user.id)
        )
        if not can_update:
            raise PermissionDenied("You do not have permission to edit this issue")
        
        if title is not None:
            issue.title = title
        if description is not None:
            issue.description = description
        if status is not None:
            issue.status = parse_choice(Issue.Status, status, 'status')
        if priority is not None:
            issue.priority = parse_choice(Issue.Priority, priority, 'priority')
        if issue_type is not None:
            issue.issue_type = parse_choice(Issue.IssueType, issue_type, 'type')
        if due_date is not None:
            issue.due_date = due_date
        
        if milestone_id is MILESTONE_UNCHANGED:
            pass
        elif milestone_id is not None:
            issue.milestone = IssueService._resolve_milestone(milestone_id, issue.project)
        else:
            if issue.milestone_id is not None:
                logger.info("[issue] id=%s detached from milestone_id=%s", issue.id, issue.milestone_id)
            issue.milestone = None
        
        issue.save()
        return issue

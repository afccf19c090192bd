# ============================================
# tracker/services/milestone.py
# ============================================
import logging
from datetime import date
from typing import List, Optional
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.utils import timezone
from tracker.models import Issue, Milestone, Project
from tracker.selectors.issue import IssueSelector
from tracker.selectors.milestone import MilestoneProgress, MilestoneSelector
from tracker.selectors.project import ProjectSelector
from tracker.services.issue import IssueService, parse_choice

logger = logging.getLogger(__name__)


class MilestoneService:
    
    @staticmethod
    def _validate_dates(start_date: Optional[date], end_date: Optional[date]) -> None:
        today = timezone.localdate()
        if start_date is not None and start_date < today:
            raise ValidationError("Milestone start date cannot be in the past")
        if end_date is not None and end_date < today:
            raise ValidationError("Milestone end date cannot be in the past")
    
    @staticmethod
    def _get_project(project_id: int) -> Project:
        project = ProjectSelector.get_project_by_id(project_id)
        if project is None:
            raise Project.DoesNotExist(f"Project {project_id} not found")
        return project
    
    @staticmethod
    def get_milestone_by_id(milestone_id: int) -> Milestone:
        milestone = MilestoneSelector.get_milestone_by_id(milestone_id)
        if milestone is None:
            raise Milestone.DoesNotExist(f"Milestone {milestone_id} not found")
        return milestone
    
    @staticmethod
    def create_milestone(
        *,
        project_id: int,
        user_id: int,
        name: str,
        description: str = '',
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: str = Milestone.MilestoneStatus.PLANNED
    ) -> Milestone:
        """Create a milestone. Only the project owner may do so."""
        
        project = MilestoneService._get_project(project_id)
        IssueService._get_user(user_id)
        
        if project.owner_id != user_id:
            raise PermissionDenied("Only the project owner can create milestones")
        
        MilestoneService._validate_dates(start_date, end_date)
        
        milestone = Milestone.objects.create(
            project=project,
            name=name,
            description=description or '',
            start_date=start_date,
            end_date=end_date,
            status=parse_choice(Milestone.MilestoneStatus, status, 'status'),
        )
        
        logger.info("[milestone] created id=%s project_id=%s", milestone.id, project.id)
        return milestone
    
    @staticmethod
    def get_milestones_by_project(project_id: int) -> List[MilestoneProgress]:
        """Milestones of a project with their completion progress"""
        MilestoneService._get_project(project_id)
        return MilestoneSelector.get_progress_by_project(project_id)
    
    @staticmethod
    def update_milestone(
        *,
        milestone_id: int,
        name: str,
        description: str = '',
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: str = Milestone.MilestoneStatus.PLANNED
    ) -> Milestone:
        """
        Replace the editable fields of a milestone.
        Unlike issues this is not a partial merge: omitted values are cleared.
        """
        milestone = MilestoneService.get_milestone_by_id(milestone_id)
        
        MilestoneService._validate_dates(start_date, end_date)
        
        milestone.name = name
        milestone.description = description or ''
        milestone.start_date = start_date
        milestone.end_date = end_date
        milestone.status = parse_choice(Milestone.MilestoneStatus, status, 'status')
        milestone.save()
        
        return milestone
    
    @staticmethod
    @transaction.atomic
    def delete_milestone(*, milestone_id: int, user_id: int) -> None:
        """Detach every issue of the milestone, then delete it"""
        
        milestone = MilestoneService.get_milestone_by_id(milestone_id)
        IssueService._get_user(user_id)
        
        if milestone.project.owner_id != user_id:
            raise PermissionDenied("Only the project owner can delete milestones")
        
        detached = 0
        for issue in IssueSelector.get_issues_by_milestone(milestone.id):
            issue.milestone = None
            issue.save()
            detached += 1
        
        milestone.delete()
        logger.info("[milestone] deleted id=%s, detached %s issues", milestone_id, detached)
    
    @staticmethod
    def add_issue(*, milestone_id: int, issue_id: int) -> Issue:
        """Attach an issue of the same project to a milestone"""
        milestone = MilestoneService.get_milestone_by_id(milestone_id)
        issue = IssueService.get_issue_by_id(issue_id)
        
        if issue.project_id != milestone.project_id:
            raise ValidationError("Issue does not belong to the milestone's project")
        
        issue.milestone = milestone
        issue.save()
        return issue
    
    @staticmethod
    def remove_issue(*, milestone_id: int, issue_id: int) -> Issue:
        MilestoneService.get_milestone_by_id(milestone_id)
        issue = IssueService.get_issue_by_id(issue_id)
        
        issue.milestone = None
        issue.save()
        return issue

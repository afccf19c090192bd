# ============================================
# tracker/selectors/milestone.py
# ============================================
from dataclasses import dataclass
from datetime import date
from typing import List, Optional
from django.db.models import QuerySet
from tracker.models import Issue, Milestone
from tracker.selectors.issue import IssueSelector


@dataclass(frozen=True)
class MilestoneProgress:
    """Milestone fields plus its derived completion figures"""
    id: int
    project_id: int
    name: str
    description: str
    status: str
    start_date: Optional[date]
    end_date: Optional[date]
    total_issues: int
    completed_issues: int
    completion_percentage: float


def completion_percentage(completed: int, total: int) -> float:
    if total == 0:
        return 0.0
    return completed / total * 100


class MilestoneSelector:
    
    @staticmethod
    def get_milestone_by_id(milestone_id: int) -> Optional[Milestone]:
        """Get single milestone by ID"""
        try:
            return Milestone.objects.select_related('project').get(id=milestone_id)
        except Milestone.DoesNotExist:
            return None
    
    @staticmethod
    def get_milestones_by_project(project_id: int) -> QuerySet:
        return Milestone.objects.filter(project_id=project_id)
    
    @staticmethod
    def build_progress(milestone: Milestone) -> MilestoneProgress:
        issues = IssueSelector.get_issues_by_milestone(milestone.id)
        total = issues.count()
        completed = issues.filter(status=Issue.Status.DONE).count()
        
        return MilestoneProgress(
            id=milestone.id,
            project_id=milestone.project_id,
            name=milestone.name,
            description=milestone.description,
            status=milestone.status,
            start_date=milestone.start_date,
            end_date=milestone.end_date,
            total_issues=total,
            completed_issues=completed,
            completion_percentage=completion_percentage(completed, total),
        )
    
    @staticmethod
    def get_progress_by_project(project_id: int) -> List[MilestoneProgress]:
        """Progress view for every milestone of a project"""
        return [
            MilestoneSelector.build_progress(milestone)
            for milestone in MilestoneSelector.get_milestones_by_project(project_id)
        ]

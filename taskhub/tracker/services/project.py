# ============================================
# tracker/services/project.py
# ============================================
import logging
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from tracker.models import Chat, Project, ProjectRole
from tracker.selectors.project import ProjectSelector
from tracker.services.issue import IssueService, parse_choice

User = get_user_model()

logger = logging.getLogger(__name__)


class ProjectService:
    
    @staticmethod
    def _check_management(project: Project, user_id: int) -> None:
        if ProjectSelector.get_role(project, user_id) not in ProjectRole.MANAGEMENT_ROLES:
            raise PermissionDenied("Only project owners and administrators can manage members")
    
    @staticmethod
    def add_chat_participant(project: Project, member: User) -> None:
        chat = ProjectSelector.get_chat_by_project_id(project.id)
        if chat is not None:
            chat.participants.add(member)
    
    @staticmethod
    def get_project_by_id(project_id: int) -> Project:
        project = ProjectSelector.get_project_by_id(project_id)
        if project is None:
            raise Project.DoesNotExist(f"Project {project_id} not found")
        return project
    
    @staticmethod
    @transaction.atomic
    def create_project(
        *,
        owner: User,
        name: str,
        description: str = ''
    ) -> Project:
        """Create a project together with its owner role and chat"""
        
        project = Project.objects.create(
            name=name,
            description=description or '',
            owner=owner
        )
        
        ProjectRole.objects.create(
            project=project,
            user=owner,
            role=ProjectRole.Role.OWNER
        )
        
        chat = Chat.objects.create(name=name, project=project)
        chat.participants.add(owner)
        
        logger.info("[project] created id=%s owner_id=%s", project.id, owner.id)
        return project
    
    @staticmethod
    def update_project(
        *,
        project_id: int,
        user_id: int,
        **data
    ) -> Project:
        """Update project"""
        
        project = ProjectService.get_project_by_id(project_id)
        
        if project.owner_id != user_id:
            raise PermissionDenied("Only project owner can update project")
        
        for field in ('name', 'description'):
            if field in data:
                setattr(project, field, data[field])
        
        project.save()
        return project
    
    @staticmethod
    def delete_project(*, project_id: int, user_id: int) -> None:
        """Delete project"""
        
        project = ProjectService.get_project_by_id(project_id)
        
        if project.owner_id != user_id:
            raise PermissionDenied("Only project owner can delete project")
        
        project.delete()
        logger.info("[project] deleted id=%s", project_id)
    
    @staticmethod
    @transaction.atomic
    def add_member(
        *,
        project_id: int,
        user_id: int,
        member_id: int,
        role: str = ProjectRole.Role.MEMBER
    ) -> ProjectRole:
        """Add member to project, or change the role of an existing one"""
        
        project = ProjectService.get_project_by_id(project_id)
        ProjectService._check_management(project, user_id)
        
        member = IssueService._get_user(member_id)
        role = parse_choice(ProjectRole.Role, role, 'role')
        
        if member.id == project.owner_id and role != ProjectRole.Role.OWNER:
            raise ValidationError("Cannot change the role of the project owner")
        
        project_role, _ = ProjectRole.objects.update_or_create(
            project=project,
            user=member,
            defaults={'role': role}
        )
        
        ProjectService.add_chat_participant(project, member)
        return project_role
    
    @staticmethod
    @transaction.atomic
    def remove_member(*, project_id: int, user_id: int, member_id: int) -> None:
        """Remove member from project"""
        
        project = ProjectService.get_project_by_id(project_id)
        ProjectService._check_management(project, user_id)
        
        if member_id == project.owner_id:
            raise ValidationError("Cannot remove project owner")
        
        ProjectRole.objects.filter(project=project, user_id=member_id).delete()
        
        chat = ProjectSelector.get_chat_by_project_id(project.id)
        if chat is not None:
            chat.participants.remove(member_id)

# ============================================
# tracker/selectors/project.py
# ============================================
from typing import Optional
from django.db.models import Q, QuerySet
from tracker.models import Chat, Project, ProjectRole


class ProjectSelector:
    
    @staticmethod
    def get_project_by_id(project_id: int) -> Optional[Project]:
        """Get single project by ID"""
        try:
            return Project.objects.select_related('owner').get(id=project_id)
        except Project.DoesNotExist:
            return None
    
    @staticmethod
    def get_chat_by_project_id(project_id: int) -> Optional[Chat]:
        """Get the chat bound to a project"""
        return Chat.objects.filter(project_id=project_id).first()
    
    @staticmethod
    def get_projects_by_user(user_id: int) -> QuerySet:
        """Get all projects where user is owner or holds a role"""
        return Project.objects.filter(
            Q(owner_id=user_id) | Q(roles__user_id=user_id)
        ).distinct()
    
    @staticmethod
    def get_role(project: Project, user_id: int) -> Optional[str]:
        """Role of a user on a project, None when the user has none"""
        if project.owner_id == user_id:
            return ProjectRole.Role.OWNER
        
        role = ProjectRole.objects.filter(
            project=project,
            user_id=user_id
        ).values_list('role', flat=True).first()
        return role
    
    @staticmethod
    def is_member(project: Project, user_id: int) -> bool:
        return ProjectSelector.get_role(project, user_id) is not None

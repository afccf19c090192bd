# ============================================
# tracker/models/role.py
# ============================================
from django.conf import settings
from django.db import models


class ProjectRole(models.Model):
    class Role(models.TextChoices):
        OWNER = 'OWNER', 'Owner'
        ADMINISTRATOR = 'ADMINISTRATOR', 'Administrator'
        MEMBER = 'MEMBER', 'Member'

    MANAGEMENT_ROLES = (Role.OWNER, Role.ADMINISTRATOR)

    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='roles'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='project_roles'
    )
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.MEMBER
    )

    class Meta:
        db_table = 'project_roles'
        unique_together = ['project', 'user']
        indexes = [
            models.Index(fields=['project', 'role'], name='role_project_role_idx'),
        ]

    def __str__(self):
        return f"{self.project.name} - {self.user} ({self.role})"

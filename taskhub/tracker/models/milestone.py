# ============================================
# tracker/models/milestone.py
# ============================================
from django.db import models


class Milestone(models.Model):
    class MilestoneStatus(models.TextChoices):
        PLANNED = 'PLANNED', 'Planned'
        IN_PROGRESS = 'IN_PROGRESS', 'In progress'
        COMPLETED = 'COMPLETED', 'Completed'

    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='milestones'
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    status = models.CharField(
        max_length=20,
        choices=MilestoneStatus.choices,
        default=MilestoneStatus.PLANNED
    )
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'milestones'
        ordering = ['start_date', 'id']
        indexes = [
            models.Index(fields=['project', 'status'], name='milestone_project_status_idx'),
        ]

    def __str__(self):
        return f"{self.project.name} - {self.name}"

import pytest
from datetime import timedelta
from django.core.exceptions import PermissionDenied, ValidationError
from django.utils import timezone

from tracker.models import Issue, Milestone, Project
from tracker.selectors.milestone import completion_percentage
from tracker.services.milestone import MilestoneService


@pytest.mark.django_db
def test_create_milestone_by_owner(project, owner):
    today = timezone.localdate()
    milestone = MilestoneService.create_milestone(
        project_id=project.id,
        user_id=owner.id,
        name="Beta",
        start_date=today,
        end_date=today + timedelta(days=30),
    )

    assert milestone.project == project
    assert milestone.status == Milestone.MilestoneStatus.PLANNED

@pytest.mark.django_db
def test_create_milestone_is_owner_only(project, administrator):
    # ADMINISTRATOR role is not enough
    with pytest.raises(PermissionDenied):
        MilestoneService.create_milestone(project_id=project.id, user_id=administrator.id, name="Beta")

@pytest.mark.django_db
@pytest.mark.parametrize("field", ["start_date", "end_date"])
def test_create_milestone_rejects_past_dates(project, owner, field):
    yesterday = timezone.localdate() - timedelta(days=1)
    with pytest.raises(ValidationError):
        MilestoneService.create_milestone(
            project_id=project.id, user_id=owner.id, name="Old", **{field: yesterday}
        )

@pytest.mark.django_db
def test_create_milestone_unknown_project(owner):
    with pytest.raises(Project.DoesNotExist):
        MilestoneService.create_milestone(project_id=424242, user_id=owner.id, name="x")

@pytest.mark.django_db
def test_get_milestone_by_id_not_found(db):
    with pytest.raises(Milestone.DoesNotExist):
        MilestoneService.get_milestone_by_id(777)

@pytest.mark.django_db
def test_update_milestone_replaces_all_fields(milestone):
    milestone.description = "keep me?"
    milestone.save()

    updated = MilestoneService.update_milestone(
        milestone_id=milestone.id,
        name="Sprint 1b",
        status="IN_PROGRESS",
    )

    updated.refresh_from_db()
    assert updated.name == "Sprint 1b"
    assert updated.status == Milestone.MilestoneStatus.IN_PROGRESS
    assert updated.description == ""
    assert updated.start_date is None
    assert updated.end_date is None

@pytest.mark.django_db
def test_update_milestone_rejects_past_dates(milestone):
    with pytest.raises(ValidationError):
        MilestoneService.update_milestone(
            milestone_id=milestone.id,
            name="x",
            end_date=timezone.localdate() - timedelta(days=3),
        )

@pytest.mark.django_db
def test_delete_milestone_detaches_issues(project, owner, member, milestone):
    issues = [
        Issue.objects.create(project=project, creator=member, title=f"t{i}", milestone=milestone)
        for i in range(3)
    ]
    milestone_id = milestone.id

    MilestoneService.delete_milestone(milestone_id=milestone_id, user_id=owner.id)

    assert not Milestone.objects.filter(id=milestone_id).exists()
    assert not Issue.objects.filter(milestone_id=milestone_id).exists()
    for issue in issues:
        issue.refresh_from_db()
        assert issue.milestone is None

@pytest.mark.django_db
def test_delete_milestone_is_owner_only(milestone, administrator):
    with pytest.raises(PermissionDenied):
        MilestoneService.delete_milestone(milestone_id=milestone.id, user_id=administrator.id)
    assert Milestone.objects.filter(id=milestone.id).exists()

@pytest.mark.django_db
def test_add_and_remove_issue(milestone, issue):
    added = MilestoneService.add_issue(milestone_id=milestone.id, issue_id=issue.id)
    assert added.milestone == milestone

    removed = MilestoneService.remove_issue(milestone_id=milestone.id, issue_id=issue.id)
    removed.refresh_from_db()
    assert removed.milestone is None

@pytest.mark.django_db
def test_add_issue_from_other_project(foreign_milestone, issue):
    with pytest.raises(ValidationError):
        MilestoneService.add_issue(milestone_id=foreign_milestone.id, issue_id=issue.id)
    issue.refresh_from_db()
    assert issue.milestone is None

@pytest.mark.django_db
def test_remove_issue_unknown_milestone(issue):
    with pytest.raises(Milestone.DoesNotExist):
        MilestoneService.remove_issue(milestone_id=31337, issue_id=issue.id)

@pytest.mark.django_db
def test_progress_by_project(project, member, milestone):
    empty = Milestone.objects.create(project=project, name="Empty")
    for status in (Issue.Status.DONE, Issue.Status.TODO, Issue.Status.IN_PROGRESS):
        Issue.objects.create(project=project, creator=member, title=status, status=status, milestone=milestone)

    progress = {p.id: p for p in MilestoneService.get_milestones_by_project(project.id)}

    assert progress[milestone.id].total_issues == 3
    assert progress[milestone.id].completed_issues == 1
    assert progress[milestone.id].completion_percentage == pytest.approx(100 / 3)
    assert progress[milestone.id].name == "Sprint 1"

    assert progress[empty.id].total_issues == 0
    assert progress[empty.id].completion_percentage == 0

@pytest.mark.django_db
def test_progress_unknown_project(db):
    with pytest.raises(Project.DoesNotExist):
        MilestoneService.get_milestones_by_project(5150)

@pytest.mark.parametrize("completed,total,expected", [
    (0, 0, 0.0),
    (0, 4, 0.0),
    (2, 4, 50.0),
    (4, 4, 100.0),
])
def test_completion_percentage(completed, total, expected):
    assert completion_percentage(completed, total) == expected

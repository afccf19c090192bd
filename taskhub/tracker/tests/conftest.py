import pytest
from datetime import timedelta
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from tracker.models import Issue, Milestone, ProjectRole
from tracker.services.project import ProjectService

User = get_user_model()


@pytest.fixture
def owner(db):
    return User.objects.create_user(username="owner", email="owner@example.com", password="pass")

@pytest.fixture
def administrator(db):
    return User.objects.create_user(username="administrator", email="administrator@example.com", password="pass")

@pytest.fixture
def member(db):
    return User.objects.create_user(username="member", email="member@example.com", password="pass")

@pytest.fixture
def outsider(db):
    return User.objects.create_user(username="outsider", email="outsider@example.com", password="pass")

@pytest.fixture
def project(owner, administrator, member):
    project = ProjectService.create_project(owner=owner, name="Apollo", description="Moon shot")
    ProjectRole.objects.create(project=project, user=administrator, role=ProjectRole.Role.ADMINISTRATOR)
    ProjectRole.objects.create(project=project, user=member, role=ProjectRole.Role.MEMBER)
    return project

@pytest.fixture
def other_project(outsider):
    return ProjectService.create_project(owner=outsider, name="Gemini")

@pytest.fixture
def milestone(project):
    return Milestone.objects.create(
        project=project,
        name="Sprint 1",
        start_date=timezone.localdate(),
        end_date=timezone.localdate() + timedelta(days=14),
    )

@pytest.fixture
def foreign_milestone(other_project):
    return Milestone.objects.create(project=other_project, name="Gemini 1")

@pytest.fixture
def issue(project, member):
    return Issue.objects.create(project=project, creator=member, title="Fix login")

@pytest.fixture
def future():
    return timezone.now() + timedelta(days=3)

@pytest.fixture
def api_client():
    return APIClient()

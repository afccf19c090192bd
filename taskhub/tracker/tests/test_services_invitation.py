import pytest
import uuid
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError

from tracker.models import Invitation, Project, ProjectRole
from tracker.services.invitation import InvitationService

User = get_user_model()


@pytest.mark.django_db
def test_send_invitation_mails_the_token(project, administrator, mailoutbox):
    invitation = InvitationService.send_invitation(
        project_id=project.id,
        user_id=administrator.id,
        email="newbie@example.com"
    )

    assert invitation.invited_by == administrator
    assert invitation.accepted_at is None
    assert len(mailoutbox) == 1
    assert mailoutbox[0].to == ["newbie@example.com"]
    assert str(invitation.token) in mailoutbox[0].body

@pytest.mark.django_db
def test_send_invitation_reuses_pending(project, owner, mailoutbox):
    first = InvitationService.send_invitation(project_id=project.id, user_id=owner.id, email="newbie@example.com")
    again = InvitationService.send_invitation(project_id=project.id, user_id=owner.id, email="newbie@example.com")

    assert first.id == again.id
    assert Invitation.objects.count() == 1
    assert len(mailoutbox) == 2

@pytest.mark.django_db
def test_send_invitation_requires_management(project, member):
    with pytest.raises(PermissionDenied):
        InvitationService.send_invitation(project_id=project.id, user_id=member.id, email="x@example.com")

@pytest.mark.django_db
def test_send_invitation_to_existing_member(project, owner, member):
    with pytest.raises(ValidationError):
        InvitationService.send_invitation(project_id=project.id, user_id=owner.id, email=member.email)

@pytest.mark.django_db
def test_send_invitation_unknown_project(owner):
    with pytest.raises(Project.DoesNotExist):
        InvitationService.send_invitation(project_id=99999, user_id=owner.id, email="x@example.com")

@pytest.mark.django_db
def test_accept_invitation_joins_project_and_chat(project, owner):
    invitation = InvitationService.send_invitation(project_id=project.id, user_id=owner.id, email="newbie@example.com")
    newbie = User.objects.create_user(username="newbie", email="newbie@example.com", password="pass")

    role = InvitationService.accept_invitation(token=invitation.token, user=newbie)

    assert role.role == ProjectRole.Role.MEMBER
    assert role.project == project
    assert project.chat.participants.filter(id=newbie.id).exists()
    invitation.refresh_from_db()
    assert invitation.is_accepted

    with pytest.raises(ValidationError):
        InvitationService.accept_invitation(token=invitation.token, user=newbie)

@pytest.mark.django_db
def test_accept_invitation_wrong_email(project, owner, outsider):
    invitation = InvitationService.send_invitation(project_id=project.id, user_id=owner.id, email="newbie@example.com")

    with pytest.raises(PermissionDenied):
        InvitationService.accept_invitation(token=invitation.token, user=outsider)

    assert not ProjectRole.objects.filter(project=project, user=outsider).exists()

@pytest.mark.django_db
def test_accept_unknown_invitation(outsider):
    with pytest.raises(Invitation.DoesNotExist):
        InvitationService.accept_invitation(token=uuid.uuid4(), user=outsider)

import pytest
from django.contrib.auth import get_user_model

from tracker.models import Invitation, ProjectRole

User = get_user_model()


@pytest.mark.django_db
def test_invite_and_accept(api_client, project, owner, mailoutbox):
    api_client.force_authenticate(user=owner)

    resp = api_client.post(f"/api/projects/{project.id}/invitations/", {"email": "newbie@example.com"}, format="json")
    assert resp.status_code == 201, resp.content
    assert resp.json()["email"] == "newbie@example.com"
    assert "token" not in resp.json()
    assert len(mailoutbox) == 1

    resp = api_client.get(f"/api/projects/{project.id}/invitations/")
    assert [i["email"] for i in resp.json()] == ["newbie@example.com"]

    newbie = User.objects.create_user(username="newbie", email="newbie@example.com", password="pass")
    token = Invitation.objects.get(project=project).token
    api_client.force_authenticate(user=newbie)

    resp = api_client.post("/api/invitations/accept/", {"token": str(token)}, format="json")
    assert resp.status_code == 200, resp.content
    assert resp.json()["role"] == "MEMBER"
    assert ProjectRole.objects.filter(project=project, user=newbie).exists()

@pytest.mark.django_db
def test_invite_forbidden_for_member(api_client, project, member):
    api_client.force_authenticate(user=member)
    resp = api_client.post(f"/api/projects/{project.id}/invitations/", {"email": "x@example.com"}, format="json")
    assert resp.status_code == 403

@pytest.mark.django_db
def test_accept_bad_token(api_client, outsider):
    api_client.force_authenticate(user=outsider)
    assert api_client.post("/api/invitations/accept/", {"token": "not-a-uuid"}, format="json").status_code == 400
    resp = api_client.post(
        "/api/invitations/accept/",
        {"token": "6f1c2a4e-9d1b-4c51-9a8e-2f0d4b7c9e11"},
        format="json",
    )
    assert resp.status_code == 404

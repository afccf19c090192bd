import pytest
from rest_framework.authtoken.models import Token

from tracker.models import Message


@pytest.mark.django_db
def test_send_and_list_messages(api_client, project, member):
    api_client.force_authenticate(user=member)

    resp = api_client.post(
        "/api/messages/send",
        {"sender_id": member.id, "project_id": project.id, "content": "hi team"},
        format="json",
    )
    assert resp.status_code == 200, resp.content
    assert resp.json()["sender"]["id"] == member.id

    resp = api_client.post("/api/messages/send", {"project_id": project.id, "content": "again"}, format="json")
    assert resp.status_code == 200

    resp = api_client.get(f"/api/messages/chat/{project.id}")
    assert resp.status_code == 200
    assert [m["content"] for m in resp.json()] == ["hi team", "again"]

@pytest.mark.django_db
def test_send_message_on_behalf_of_someone_else(api_client, project, member, owner):
    api_client.force_authenticate(user=member)
    resp = api_client.post(
        "/api/messages/send",
        {"sender_id": owner.id, "project_id": project.id, "content": "spoof"},
        format="json",
    )
    assert resp.status_code == 403
    assert not Message.objects.exists()

@pytest.mark.django_db
def test_send_message_project_without_chat(api_client, project, member):
    project.chat.delete()
    api_client.force_authenticate(user=member)
    resp = api_client.post("/api/messages/send", {"project_id": project.id, "content": "x"}, format="json")
    assert resp.status_code == 404
    assert "Chat not found" in resp.json()["detail"]

@pytest.mark.django_db
def test_update_message_with_raw_body_and_bearer_token(api_client, project, member):
    message = Message.objects.create(chat=project.chat, sender=member, content="draft")
    token = Token.objects.create(user=member)
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")

    resp = api_client.put(f"/api/messages/{message.id}", "final", content_type="text/plain")

    assert resp.status_code == 200, resp.content
    assert resp.json()["content"] == "final"
    message.refresh_from_db()
    assert message.content == "final"

@pytest.mark.django_db
def test_update_message_forbidden_for_other_user(api_client, project, member, owner):
    message = Message.objects.create(chat=project.chat, sender=member, content="mine")
    api_client.force_authenticate(user=owner)

    resp = api_client.put(f"/api/messages/{message.id}", {"content": "changed"}, format="json")

    assert resp.status_code == 403
    message.refresh_from_db()
    assert message.content == "mine"

@pytest.mark.django_db
def test_delete_message(api_client, project, member, owner):
    message = Message.objects.create(chat=project.chat, sender=member, content="bye")

    api_client.force_authenticate(user=owner)
    assert api_client.delete(f"/api/messages/{message.id}").status_code == 403

    api_client.force_authenticate(user=member)
    resp = api_client.delete(f"/api/messages/{message.id}")
    assert resp.status_code == 200
    assert resp.json()["message"]
    assert not Message.objects.filter(id=message.id).exists()

@pytest.mark.django_db
def test_invalid_bearer_token(api_client, project):
    api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
    resp = api_client.get(f"/api/messages/chat/{project.id}")
    assert resp.status_code == 401

@pytest.mark.django_db
def test_send_message_unknown_sender(api_client, project, owner):
    api_client.force_authenticate(user=owner)
    resp = api_client.post(
        "/api/messages/send",
        {"sender_id": 999999, "project_id": project.id, "content": "ghost"},
        format="json",
    )
    assert resp.status_code == 404
    assert not Message.objects.exists()

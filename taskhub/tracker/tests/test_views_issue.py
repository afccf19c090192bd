import pytest
from datetime import timedelta
from django.utils import timezone

from tracker.models import Issue


@pytest.mark.django_db
def test_issue_create_defaults(api_client, project, member):
    api_client.force_authenticate(user=member)

    resp = api_client.post("/api/issues/", {"project_id": project.id, "title": "New"}, format="json")

    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["status"] == "TODO"
    assert body["priority"] == "LOW"
    assert body["issue_type"] == "TASK"
    assert body["creator"]["id"] == member.id
    assert body["milestone_id"] is None

@pytest.mark.django_db
def test_issue_create_past_due_date(api_client, project, member):
    api_client.force_authenticate(user=member)
    past = (timezone.now() - timedelta(days=1)).isoformat()

    resp = api_client.post(
        "/api/issues/",
        {"project_id": project.id, "title": "Late", "due_date": past},
        format="json",
    )

    assert resp.status_code == 400
    assert "past" in resp.json()["detail"]

@pytest.mark.django_db
def test_issue_create_unknown_project(api_client, member):
    api_client.force_authenticate(user=member)
    resp = api_client.post("/api/issues/", {"project_id": 99999, "title": "x"}, format="json")
    assert resp.status_code == 404

@pytest.mark.django_db
def test_issue_create_cross_project_milestone(api_client, project, owner, foreign_milestone):
    api_client.force_authenticate(user=owner)
    resp = api_client.post(
        "/api/issues/",
        {"project_id": project.id, "title": "x", "milestone_id": foreign_milestone.id},
        format="json",
    )
    assert resp.status_code == 400

@pytest.mark.django_db
def test_issue_list_by_project(api_client, project, issue, member):
    api_client.force_authenticate(user=member)

    resp = api_client.get("/api/issues/", {"project_id": project.id})

    assert resp.status_code == 200
    assert [x["id"] for x in resp.json()["results"]] == [issue.id]

@pytest.mark.django_db
def test_issue_list_requires_project_id(api_client, member):
    api_client.force_authenticate(user=member)
    assert api_client.get("/api/issues/").status_code == 400

@pytest.mark.django_db
def test_issue_detail_not_found(api_client, member):
    api_client.force_authenticate(user=member)
    assert api_client.get("/api/issues/424242/").status_code == 404

@pytest.mark.django_db
def test_issue_update_without_milestone_clears_it(api_client, issue, milestone, administrator):
    issue.milestone = milestone
    issue.save()
    api_client.force_authenticate(user=administrator)

    resp = api_client.put(f"/api/issues/{issue.id}/", {"title": "Renamed"}, format="json")

    assert resp.status_code == 200, resp.content
    issue.refresh_from_db()
    assert issue.title == "Renamed"
    assert issue.milestone is None

@pytest.mark.django_db
def test_issue_update_keep_milestone(api_client, issue, milestone, administrator):
    issue.milestone = milestone
    issue.save()
    api_client.force_authenticate(user=administrator)

    resp = api_client.put(f"/api/issues/{issue.id}/", {"priority": "HIGH", "keep_milestone": True}, format="json")

    assert resp.status_code == 200, resp.content
    issue.refresh_from_db()
    assert issue.priority == Issue.Priority.HIGH
    assert issue.milestone == milestone

@pytest.mark.django_db
def test_issue_update_forbidden(api_client, issue, outsider):
    api_client.force_authenticate(user=outsider)
    resp = api_client.put(f"/api/issues/{issue.id}/", {"title": "x"}, format="json")
    assert resp.status_code == 403

@pytest.mark.django_db
def test_issue_update_bad_enum(api_client, issue, owner):
    api_client.force_authenticate(user=owner)
    resp = api_client.put(f"/api/issues/{issue.id}/", {"status": "BLOCKED"}, format="json")
    assert resp.status_code == 400

@pytest.mark.django_db
def test_issue_status_and_assignee(api_client, issue, member, outsider):
    api_client.force_authenticate(user=member)

    resp = api_client.put(f"/api/issues/{issue.id}/status/", {"status": "DONE"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["status"] == "DONE"

    resp = api_client.put(f"/api/issues/{issue.id}/assignee/{outsider.id}/")
    assert resp.status_code == 200
    assert resp.json()["assignee"]["id"] == outsider.id

@pytest.mark.django_db
def test_issue_delete(api_client, issue, member, owner):
    api_client.force_authenticate(user=member)
    assert api_client.delete(f"/api/issues/{issue.id}/").status_code == 403

    api_client.force_authenticate(user=owner)
    assert api_client.delete(f"/api/issues/{issue.id}/").status_code == 204
    assert not Issue.objects.filter(id=issue.id).exists()

@pytest.mark.django_db
def test_issue_endpoints_require_authentication(api_client, issue):
    resp = api_client.get(f"/api/issues/{issue.id}/")
    assert resp.status_code == 401

@pytest.mark.django_db
def test_issue_update_keep_milestone_wins_over_null(api_client, issue, milestone, administrator):
    issue.milestone = milestone
    issue.save()
    api_client.force_authenticate(user=administrator)

    resp = api_client.put(
        f"/api/issues/{issue.id}/",
        {"milestone_id": None, "keep_milestone": True},
        format="json",
    )

    assert resp.status_code == 200, resp.content
    assert resp.json()["milestone_id"] == milestone.id

import pytest
from rest_framework.authtoken.models import Token

from tracker.selectors.user import UserSelector


@pytest.mark.django_db
@pytest.mark.parametrize("prefix", ["Bearer ", "Token ", "bearer ", "TOKEN ", ""])
def test_get_user_by_credential(member, prefix):
    token = Token.objects.create(user=member)
    assert UserSelector.get_user_by_credential(prefix + token.key) == member

@pytest.mark.django_db
def test_get_user_by_credential_unknown_or_inactive(member):
    token = Token.objects.create(user=member)
    assert UserSelector.get_user_by_credential("Bearer nope") is None
    assert UserSelector.get_user_by_credential("") is None

    member.is_active = False
    member.save()
    assert UserSelector.get_user_by_credential(token.key) is None

@pytest.mark.django_db
def test_get_user_by_id(member):
    assert UserSelector.get_user_by_id(member.id) == member
    assert UserSelector.get_user_by_id(424242) is None

@pytest.mark.django_db
def test_bare_key_header_authenticates(api_client, project, member):
    token = Token.objects.create(user=member)
    api_client.credentials(HTTP_AUTHORIZATION=token.key)

    resp = api_client.get(f"/api/projects/{project.id}/")

    assert resp.status_code == 200
    assert resp.json()["name"] == "Apollo"

@pytest.mark.django_db
def test_scheme_is_case_insensitive(api_client, project, member):
    token = Token.objects.create(user=member)
    api_client.credentials(HTTP_AUTHORIZATION=f"bearer {token.key}")

    resp = api_client.get(f"/api/projects/{project.id}/")

    assert resp.status_code == 200

@pytest.mark.django_db
def test_unknown_scheme_is_rejected(member):
    token = Token.objects.create(user=member)
    assert UserSelector.get_user_by_credential(f"Basic {token.key}") is None

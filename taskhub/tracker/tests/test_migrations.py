import pytest
from io import StringIO
from django.core.management import call_command


@pytest.mark.django_db
def test_models_match_migrations():
    call_command("makemigrations", "tracker", "--check", "--dry-run", stdout=StringIO())

import pytest
from datetime import timedelta
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied
from django.utils import timezone

from tracker.models import Chat, Message, Project
from tracker.services.message import MessageService

User = get_user_model()


@pytest.mark.django_db
def test_send_message(project, member):
    before = timezone.now()
    message = MessageService.send_message(sender_id=member.id, project_id=project.id, content="hello")

    assert message.pk is not None
    assert message.sender == member
    assert message.chat == project.chat
    assert message.created_at >= before
    assert list(project.chat.messages.all()) == [message]

@pytest.mark.django_db
def test_send_message_unknown_sender(project):
    with pytest.raises(User.DoesNotExist):
        MessageService.send_message(sender_id=99999, project_id=project.id, content="x")

@pytest.mark.django_db
def test_send_message_unknown_project(member):
    with pytest.raises(Project.DoesNotExist):
        MessageService.send_message(sender_id=member.id, project_id=99999, content="x")

@pytest.mark.django_db
def test_send_message_project_without_chat(project, member):
    project.chat.delete()
    with pytest.raises(Chat.DoesNotExist):
        MessageService.send_message(sender_id=member.id, project_id=project.id, content="x")

@pytest.mark.django_db
def test_deleting_chat_deletes_messages(project, member):
    MessageService.send_message(sender_id=member.id, project_id=project.id, content="x")
    project.chat.delete()
    assert Message.objects.count() == 0

@pytest.mark.django_db
def test_messages_are_listed_by_timestamp_not_insertion(project, member):
    chat = project.chat
    t1 = timezone.now() - timedelta(hours=3)
    t3 = t1 + timedelta(hours=1)
    t2 = t1 + timedelta(hours=2)

    # inserted T1, T2, T3
    m1 = Message.objects.create(chat=chat, sender=member, content="first", created_at=t1)
    m2 = Message.objects.create(chat=chat, sender=member, content="last", created_at=t2)
    m3 = Message.objects.create(chat=chat, sender=member, content="middle", created_at=t3)

    messages = list(MessageService.get_messages_by_project(project.id))

    assert messages == [m1, m3, m2]
    assert [m.created_at for m in messages] == [t1, t3, t2]

@pytest.mark.django_db
def test_update_message_by_sender_keeps_created_at(project, member):
    message = MessageService.send_message(sender_id=member.id, project_id=project.id, content="typo")
    created_at = message.created_at

    updated = MessageService.update_message(message_id=message.id, user_id=member.id, content="fixed")

    updated.refresh_from_db()
    assert updated.content == "fixed"
    assert updated.created_at == created_at

@pytest.mark.django_db
def test_update_message_by_other_user(project, member, owner):
    message = MessageService.send_message(sender_id=member.id, project_id=project.id, content="mine")

    with pytest.raises(PermissionDenied):
        MessageService.update_message(message_id=message.id, user_id=owner.id, content="hijack")

    message.refresh_from_db()
    assert message.content == "mine"

@pytest.mark.django_db
def test_delete_message_by_sender(project, member):
    message = MessageService.send_message(sender_id=member.id, project_id=project.id, content="bye")
    MessageService.delete_message(message_id=message.id, user_id=member.id)
    assert not Message.objects.filter(id=message.id).exists()

@pytest.mark.django_db
def test_delete_message_by_other_user(project, member, owner):
    message = MessageService.send_message(sender_id=member.id, project_id=project.id, content="stay")

    with pytest.raises(PermissionDenied):
        MessageService.delete_message(message_id=message.id, user_id=owner.id)
    assert Message.objects.filter(id=message.id).exists()

@pytest.mark.django_db
def test_delete_unknown_message(member):
    with pytest.raises(Message.DoesNotExist):
        MessageService.delete_message(message_id=4040, user_id=member.id)

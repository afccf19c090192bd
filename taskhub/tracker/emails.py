# ============================================
# tracker/emails.py
# ============================================
from django.conf import settings
from django.core.mail import send_mail
from tracker.models import Invitation


def build_invitation_url(invitation: Invitation) -> str:
    """Link the invitee follows; the client posts the token back to accept"""
    return settings.INVITATION_ACCEPT_URL.format(token=invitation.token)


def send_invitation_email(invitation: Invitation) -> None:
    project = invitation.project
    inviter = invitation.invited_by
    inviter_name = (inviter.get_full_name() or inviter.username) if inviter else "A teammate"

    subject = f"You are invited to join {project.name}"
    message = (
        f"Hi,\n\n"
        f"{inviter_name} invited you to collaborate on the project:\n"
        f"  {project.name}\n\n"
        f"Accept the invitation here:\n"
        f"{build_invitation_url(invitation)}\n\n"
        f"If you don't have an account yet, sign up with {invitation.email} first."
    )

    send_mail(
        subject=subject,
        message=message,
        from_email=getattr(settings, "DEFAULT_FROM_EMAIL", None),
        recipient_list=[invitation.email],
        fail_silently=True,
    )

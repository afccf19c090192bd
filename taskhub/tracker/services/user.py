# ============================================
# tracker/services/user.py
# ============================================
import logging
from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from rest_framework.authtoken.models import Token

User = get_user_model()

logger = logging.getLogger(__name__)


class UserService:
    
    @staticmethod
    def register_user(
        *,
        email: str,
        password: str,
        full_name: str = '',
        username: str = None
    ) -> User:
        """Create an account; the email doubles as username when none is given"""
        email = User.objects.normalize_email(email)
        if User.objects.filter(email__iexact=email).exists():
            raise ValidationError("An account with this email already exists")
        
        username = username or email
        if User.objects.filter(username=username).exists():
            raise ValidationError("Username is already taken")
        
        first_name, _, last_name = (full_name or '').strip().partition(' ')
        user = User(
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name.strip()
        )
        validate_password(password, user=user)
        user.set_password(password)
        user.save()
        
        logger.info("[user] registered id=%s", user.id)
        return user
    
    @staticmethod
    def authenticate_by_email(*, email: str, password: str):
        """User for the email/password pair, or None"""
        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            return None
        return authenticate(username=user.get_username(), password=password)
    
    @staticmethod
    def issue_credential(user: User) -> str:
        """Bearer credential for the user, reused across logins"""
        token, _ = Token.objects.get_or_create(user=user)
        return token.key

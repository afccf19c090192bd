# ============================================
# tracker/selectors/user.py
# ============================================
from typing import Optional
from django.contrib.auth import get_user_model
from rest_framework.authtoken.models import Token

User = get_user_model()

CREDENTIAL_SCHEMES = ('bearer', 'token')


class UserSelector:
    
    @staticmethod
    def get_user_by_id(user_id: int) -> Optional[User]:
        """Get single user by ID"""
        try:
            return User.objects.get(id=user_id)
        except (User.DoesNotExist, ValueError, TypeError):
            return None
    
    @staticmethod
    def get_user_by_credential(credential: str) -> Optional[User]:
        """
        Resolve the owner of an opaque bearer credential.
        Accepts the raw token or an Authorization header value.
        """
        if not credential:
            return None
        
        parts = credential.split()
        if len(parts) == 2 and parts[0].lower() in CREDENTIAL_SCHEMES:
            key = parts[1]
        elif len(parts) == 1:
            key = parts[0]
        else:
            return None
        
        try:
            token = Token.objects.select_related('user').get(key=key)
        except Token.DoesNotExist:
            return None
        
        if not token.user.is_active:
            return None
        return token.user

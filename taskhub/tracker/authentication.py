# ============================================
# tracker/authentication.py
# ============================================
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from tracker.selectors.user import UserSelector


class BearerCredentialAuthentication(BaseAuthentication):
    """
    Resolve the Authorization header through the user directory.
    
    Accepts "Bearer <key>", "Token <key>" or the bare key.
    """
    keyword = 'Bearer'
    
    def authenticate(self, request):
        header = get_authorization_header(request)
        if not header:
            return None
        
        try:
            credential = header.decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Invalid credential header')
        
        user = UserSelector.get_user_by_credential(credential)
        if user is None:
            raise exceptions.AuthenticationFailed('Invalid or expired credential')
        
        return (user, credential)
    
    def authenticate_header(self, request):
        return self.keyword

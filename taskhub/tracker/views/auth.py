# ============================================
# tracker/views/auth.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from tracker.serializers.auth import (
    SignupSerializer,
    LoginSerializer,
    CredentialOutputSerializer
)
from tracker.serializers.user import UserSummarySerializer
from tracker.services.user import UserService
from tracker.views.utils import std_errors


class SignupAPIView(APIView):
    """
    POST: Create an account and return its bearer credential
    
    Request body:
    - email: string (required, unique)
    - password: string (required)
    - full_name: string (optional)
    - username: string (optional, defaults to email)
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    
    @extend_schema(
        tags=["Auth"],
        request=SignupSerializer,
        responses={201: CredentialOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        user = UserService.register_user(**serializer.validated_data)
        
        data = {'token': UserService.issue_credential(user), 'user': user}
        return Response(CredentialOutputSerializer(data).data, status=status.HTTP_201_CREATED)


class LoginAPIView(APIView):
    """
    POST: Exchange email and password for a bearer credential
    
    Request body:
    - email: string (required)
    - password: string (required)
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    
    @extend_schema(
        tags=["Auth"],
        request=LoginSerializer,
        responses={200: CredentialOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        user = serializer.validated_data['user']
        data = {'token': UserService.issue_credential(user), 'user': user}
        return Response(CredentialOutputSerializer(data).data)


class MeAPIView(APIView):
    """
    GET: The authenticated user
    """
    
    @extend_schema(tags=["Auth"], responses={200: UserSummarySerializer, **std_errors()})
    def get(self, request):
        return Response(UserSummarySerializer(request.user).data)

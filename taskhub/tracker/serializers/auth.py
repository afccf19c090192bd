# ============================================
# tracker/serializers/auth.py
# ============================================
from rest_framework import serializers
from tracker.serializers.user import UserSummarySerializer
from tracker.services.user import UserService


class SignupSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    username = serializers.CharField(max_length=150, required=False)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        user = UserService.authenticate_by_email(
            email=attrs['email'],
            password=attrs['password']
        )
        if user is None:
            raise serializers.ValidationError("Invalid credentials")

        attrs['user'] = user
        return attrs


class CredentialOutputSerializer(serializers.Serializer):
    token = serializers.CharField()
    user = UserSummarySerializer()

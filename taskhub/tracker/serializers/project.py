# ============================================
# tracker/serializers/project.py
# ============================================
from rest_framework import serializers
from tracker.models import Project, ProjectRole
from tracker.serializers.user import UserSummarySerializer


class ProjectCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)


class ProjectUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)


class ProjectMemberSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    role = serializers.ChoiceField(
        choices=ProjectRole.Role.choices,
        default=ProjectRole.Role.MEMBER
    )


class ProjectRoleOutputSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    
    class Meta:
        model = ProjectRole
        fields = ['user', 'role']


class ProjectOutputSerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)
    roles = ProjectRoleOutputSerializer(many=True, read_only=True)
    chat_id = serializers.SerializerMethodField()
    
    class Meta:
        model = Project
        fields = [
            'id', 'name', 'description', 'owner',
            'roles', 'chat_id', 'created_at', 'updated_at'
        ]
    
    def get_chat_id(self, obj):
        chat = getattr(obj, 'chat', None)
        return chat.id if chat else None

# ============================================
# tracker/serializers/issue.py
# ============================================
from rest_framework import serializers
from tracker.models import Issue
from tracker.serializers.user import UserSummarySerializer


class IssueCreateSerializer(serializers.Serializer):
    project_id = serializers.IntegerField()
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Issue.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=Issue.Priority.choices, required=False)
    issue_type = serializers.ChoiceField(choices=Issue.IssueType.choices, required=False)
    due_date = serializers.DateTimeField(required=False, allow_null=True)
    milestone_id = serializers.IntegerField(required=False, allow_null=True)
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False
    )


class IssueUpdateSerializer(serializers.Serializer):
    """
    Partial update. A missing or null milestone_id detaches the issue from
    its milestone unless keep_milestone is true. A numeric milestone_id
    always attaches.
    """
    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Issue.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=Issue.Priority.choices, required=False)
    issue_type = serializers.ChoiceField(choices=Issue.IssueType.choices, required=False)
    due_date = serializers.DateTimeField(required=False)
    milestone_id = serializers.IntegerField(required=False, allow_null=True)
    keep_milestone = serializers.BooleanField(required=False, default=False)


class IssueStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Issue.Status.choices)


class IssueOutputSerializer(serializers.ModelSerializer):
    creator = UserSummarySerializer(read_only=True)
    assignee = UserSummarySerializer(read_only=True)
    tags = serializers.SlugRelatedField(many=True, read_only=True, slug_field='name')
    
    class Meta:
        model = Issue
        fields = [
            'id', 'project_id', 'title', 'description', 'issue_type',
            'priority', 'status', 'creator', 'assignee', 'milestone_id',
            'tags', 'due_date', 'created_at', 'updated_at'
        ]

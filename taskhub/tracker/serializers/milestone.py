# ============================================
# tracker/serializers/milestone.py
# ============================================
from rest_framework import serializers
from tracker.models import Milestone


class MilestoneWriteSerializer(serializers.Serializer):
    """Used for create and for the full-replace update"""
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    start_date = serializers.DateField(required=False, allow_null=True, default=None)
    end_date = serializers.DateField(required=False, allow_null=True, default=None)
    status = serializers.ChoiceField(
        choices=Milestone.MilestoneStatus.choices,
        default=Milestone.MilestoneStatus.PLANNED
    )


class MilestoneOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = Milestone
        fields = [
            'id', 'project_id', 'name', 'description', 'status',
            'start_date', 'end_date', 'created_at'
        ]


class MilestoneProgressSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    project_id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField()
    status = serializers.CharField()
    start_date = serializers.DateField(allow_null=True)
    end_date = serializers.DateField(allow_null=True)
    total_issues = serializers.IntegerField()
    completed_issues = serializers.IntegerField()
    completion_percentage = serializers.FloatField()

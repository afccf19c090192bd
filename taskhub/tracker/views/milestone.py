# ============================================
# tracker/views/milestone.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from tracker.serializers.issue import IssueOutputSerializer
from tracker.serializers.milestone import (
    MilestoneWriteSerializer,
    MilestoneOutputSerializer,
    MilestoneProgressSerializer
)
from tracker.services.milestone import MilestoneService
from tracker.views.utils import path_int, std_errors


class ProjectMilestoneListCreateAPIView(APIView):
    """
    GET: List milestones of a project with completion progress
    POST: Create a milestone (project owner only)
    
    Path params:
    - project_id: int
    
    Request body (POST):
    - name: string (required)
    - description: string (optional)
    - start_date: date (optional, not in the past)
    - end_date: date (optional, not in the past)
    - status: PLANNED/IN_PROGRESS/COMPLETED (optional)
    """
    
    @extend_schema(
        tags=["Milestones"],
        parameters=[path_int("project_id", "Project ID")],
        responses={200: MilestoneProgressSerializer(many=True), **std_errors()},
    )
    def get(self, request, project_id):
        progress = MilestoneService.get_milestones_by_project(project_id)
        serializer = MilestoneProgressSerializer(progress, many=True)
        return Response(serializer.data)
    
    @extend_schema(
        tags=["Milestones"],
        request=MilestoneWriteSerializer,
        responses={201: MilestoneOutputSerializer, **std_errors()},
    )
    def post(self, request, project_id):
        serializer = MilestoneWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        milestone = MilestoneService.create_milestone(
            project_id=project_id,
            user_id=request.user.id,
            **serializer.validated_data
        )
        
        output_serializer = MilestoneOutputSerializer(milestone)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


class MilestoneDetailAPIView(APIView):
    """
    GET: Retrieve milestone
    PUT: Replace milestone fields (omitted optional fields are cleared)
    DELETE: Delete milestone, detaching its issues (project owner only)
    
    Path params:
    - milestone_id: int
    """
    
    @extend_schema(
        tags=["Milestones"],
        parameters=[path_int("milestone_id", "Milestone ID")],
        responses={200: MilestoneOutputSerializer, **std_errors()},
    )
    def get(self, request, milestone_id):
        milestone = MilestoneService.get_milestone_by_id(milestone_id)
        return Response(MilestoneOutputSerializer(milestone).data)
    
    @extend_schema(
        tags=["Milestones"],
        request=MilestoneWriteSerializer,
        responses={200: MilestoneOutputSerializer, **std_errors()},
    )
    def put(self, request, milestone_id):
        serializer = MilestoneWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        milestone = MilestoneService.update_milestone(
            milestone_id=milestone_id,
            **serializer.validated_data
        )
        
        return Response(MilestoneOutputSerializer(milestone).data)
    
    @extend_schema(tags=["Milestones"], responses={204: None, **std_errors()})
    def delete(self, request, milestone_id):
        MilestoneService.delete_milestone(
            milestone_id=milestone_id,
            user_id=request.user.id
        )
        
        return Response(status=status.HTTP_204_NO_CONTENT)


class MilestoneIssueAPIView(APIView):
    """
    POST: Attach an issue to the milestone
    DELETE: Detach an issue from the milestone
    
    Path params:
    - milestone_id: int
    - issue_id: int
    """
    
    @extend_schema(tags=["Milestones"], request=None, responses={200: IssueOutputSerializer, **std_errors()})
    def post(self, request, milestone_id, issue_id):
        issue = MilestoneService.add_issue(milestone_id=milestone_id, issue_id=issue_id)
        return Response(IssueOutputSerializer(issue).data)
    
    @extend_schema(tags=["Milestones"], responses={200: IssueOutputSerializer, **std_errors()})
    def delete(self, request, milestone_id, issue_id):
        issue = MilestoneService.remove_issue(milestone_id=milestone_id, issue_id=issue_id)
        return Response(IssueOutputSerializer(issue).data)

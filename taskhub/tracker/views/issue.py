# ============================================
# tracker/views/issue.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import PageNumberPagination

from tracker.serializers.issue import (
    IssueCreateSerializer,
    IssueUpdateSerializer,
    IssueStatusSerializer,
    IssueOutputSerializer
)
from tracker.services.issue import IssueService, MILESTONE_UNCHANGED
from tracker.views.utils import path_int, q_int, std_errors


class IssuePagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class IssueListCreateAPIView(APIView):
    """
    GET: List issues of a project
    POST: Create a new issue
    
    Query params (GET):
    - project_id: int (required)
    - page: int
    - page_size: int
    
    Request body (POST):
    - project_id: int (required)
    - title: string (required)
    - description: string (optional)
    - status: TODO/IN_PROGRESS/DONE (optional, default TODO)
    - priority: LOW/MEDIUM/HIGH (optional, default LOW)
    - issue_type: TASK/BUG/STORY/EPIC (optional, default TASK)
    - due_date: datetime (optional, not in the past)
    - milestone_id: int (optional, same project)
    - tags: list of string (optional)
    """
    
    @extend_schema(
        tags=["Issues"],
        parameters=[q_int("project_id", "Project ID", required=True)],
        responses={200: IssueOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request):
        project_id = request.query_params.get('project_id')
        if not project_id or not project_id.isdigit():
            raise ValidationError({'project_id': 'A numeric project_id is required'})
        
        issues = IssueService.get_issues_by_project(int(project_id))
        
        # Paginate
        paginator = IssuePagination()
        page = paginator.paginate_queryset(issues, request)
        
        serializer = IssueOutputSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)
    
    @extend_schema(
        tags=["Issues"],
        request=IssueCreateSerializer,
        responses={201: IssueOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = IssueCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        issue = IssueService.create_issue(
            creator=request.user,
            **serializer.validated_data
        )
        
        output_serializer = IssueOutputSerializer(issue)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


class IssueDetailAPIView(APIView):
    """
    GET: Retrieve issue details
    PUT: Update issue (managers or the assignee)
    DELETE: Delete issue (project OWNER/ADMINISTRATOR)
    
    Path params:
    - issue_id: int
    """
    
    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: IssueOutputSerializer, **std_errors()},
    )
    def get(self, request, issue_id):
        issue = IssueService.get_issue_by_id(issue_id)
        serializer = IssueOutputSerializer(issue)
        return Response(serializer.data)
    
    @extend_schema(
        tags=["Issues"],
        request=IssueUpdateSerializer,
        responses={200: IssueOutputSerializer, **std_errors()},
    )
    def put(self, request, issue_id):
        serializer = IssueUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        data = dict(serializer.validated_data)
        keep_milestone = data.pop('keep_milestone', False)
        if keep_milestone and data.get('milestone_id') is None:
            data['milestone_id'] = MILESTONE_UNCHANGED
        
        updated_issue = IssueService.update_issue_full(
            issue_id=issue_id,
            user_id=request.user.id,
            **data
        )
        
        output_serializer = IssueOutputSerializer(updated_issue)
        return Response(output_serializer.data)
    
    @extend_schema(tags=["Issues"], responses={204: None, **std_errors()})
    def delete(self, request, issue_id):
        IssueService.delete_issue(
            issue_id=issue_id,
            user_id=request.user.id
        )
        
        return Response(status=status.HTTP_204_NO_CONTENT)


class IssueStatusAPIView(APIView):
    """
    PUT: Change the status of an issue
    
    Request body:
    - status: TODO/IN_PROGRESS/DONE
    """
    
    @extend_schema(
        tags=["Issues"],
        request=IssueStatusSerializer,
        responses={200: IssueOutputSerializer, **std_errors()},
    )
    def put(self, request, issue_id):
        serializer = IssueStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        issue = IssueService.update_status(
            issue_id=issue_id,
            status=serializer.validated_data['status']
        )
        
        return Response(IssueOutputSerializer(issue).data)


class IssueAssigneeAPIView(APIView):
    """
    PUT: Assign a user to an issue
    
    Path params:
    - issue_id: int
    - user_id: int
    """
    
    @extend_schema(tags=["Issues"], request=None, responses={200: IssueOutputSerializer, **std_errors()})
    def put(self, request, issue_id, user_id):
        issue = IssueService.assign_user(issue_id=issue_id, user_id=user_id)
        return Response(IssueOutputSerializer(issue).data)

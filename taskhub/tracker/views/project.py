# ============================================
# tracker/views/project.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.pagination import PageNumberPagination

from tracker.serializers.project import (
    ProjectCreateSerializer,
    ProjectUpdateSerializer,
    ProjectMemberSerializer,
    ProjectOutputSerializer,
    ProjectRoleOutputSerializer
)
from tracker.selectors.project import ProjectSelector
from tracker.services.project import ProjectService
from tracker.views.utils import path_int, std_errors


class ProjectPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ProjectListCreateAPIView(APIView):
    """
    GET: List all projects for current user
    POST: Create a new project
    
    Query params (GET):
    - page: int
    - page_size: int
    
    Request body (POST):
    - name: string (required)
    - description: string (optional)
    """
    
    @extend_schema(tags=["Projects"], responses={200: ProjectOutputSerializer(many=True)})
    def get(self, request):
        projects = ProjectSelector.get_projects_by_user(request.user.id).select_related(
            'owner', 'chat'
        ).prefetch_related('roles__user')
        
        paginator = ProjectPagination()
        page = paginator.paginate_queryset(projects, request)
        
        serializer = ProjectOutputSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)
    
    @extend_schema(
        tags=["Projects"],
        request=ProjectCreateSerializer,
        responses={201: ProjectOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        project = ProjectService.create_project(
            owner=request.user,
            **serializer.validated_data
        )
        
        output_serializer = ProjectOutputSerializer(project)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


class ProjectDetailAPIView(APIView):
    """
    GET: Retrieve project details
    PUT: Update project (owner only)
    DELETE: Delete project (owner only)
    
    Path params:
    - project_id: int
    """
    
    @extend_schema(
        tags=["Projects"],
        parameters=[path_int("project_id", "Project ID")],
        responses={200: ProjectOutputSerializer, **std_errors()},
    )
    def get(self, request, project_id):
        project = ProjectService.get_project_by_id(project_id)
        serializer = ProjectOutputSerializer(project)
        return Response(serializer.data)
    
    @extend_schema(
        tags=["Projects"],
        request=ProjectUpdateSerializer,
        responses={200: ProjectOutputSerializer, **std_errors()},
    )
    def put(self, request, project_id):
        serializer = ProjectUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        updated_project = ProjectService.update_project(
            project_id=project_id,
            user_id=request.user.id,
            **serializer.validated_data
        )
        
        output_serializer = ProjectOutputSerializer(updated_project)
        return Response(output_serializer.data)
    
    @extend_schema(tags=["Projects"], responses={204: None, **std_errors()})
    def delete(self, request, project_id):
        ProjectService.delete_project(
            project_id=project_id,
            user_id=request.user.id
        )
        
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProjectMemberAPIView(APIView):
    """
    POST: Add a member or change their role
    DELETE: Remove a member
    
    Path params:
    - project_id: int
    - member_id: int (DELETE)
    
    Request body (POST):
    - user_id: int (required)
    - role: OWNER/ADMINISTRATOR/MEMBER (optional, default MEMBER)
    """
    
    @extend_schema(
        tags=["Projects"],
        request=ProjectMemberSerializer,
        responses={201: ProjectRoleOutputSerializer, **std_errors()},
    )
    def post(self, request, project_id):
        serializer = ProjectMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        project_role = ProjectService.add_member(
            project_id=project_id,
            user_id=request.user.id,
            member_id=serializer.validated_data['user_id'],
            role=serializer.validated_data['role']
        )
        
        output_serializer = ProjectRoleOutputSerializer(project_role)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)
    
    @extend_schema(tags=["Projects"], responses={204: None, **std_errors()})
    def delete(self, request, project_id, member_id):
        ProjectService.remove_member(
            project_id=project_id,
            user_id=request.user.id,
            member_id=member_id
        )
        
        return Response(status=status.HTTP_204_NO_CONTENT)

# ============================================
# tracker/views/invitation.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from tracker.serializers.invitation import (
    InvitationCreateSerializer,
    InvitationAcceptSerializer,
    InvitationOutputSerializer
)
from tracker.serializers.project import ProjectRoleOutputSerializer
from tracker.services.invitation import InvitationService
from tracker.views.utils import path_int, std_errors


class ProjectInvitationListCreateAPIView(APIView):
    """
    GET: Pending invitations of a project (OWNER/ADMINISTRATOR)
    POST: Invite someone by email (OWNER/ADMINISTRATOR)
    
    Path params:
    - project_id: int
    
    Request body (POST):
    - email: string (required)
    """
    
    @extend_schema(
        tags=["Invitations"],
        parameters=[path_int("project_id", "Project ID")],
        responses={200: InvitationOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request, project_id):
        invitations = InvitationService.get_pending_invitations(
            project_id=project_id,
            user_id=request.user.id
        )
        return Response(InvitationOutputSerializer(invitations, many=True).data)
    
    @extend_schema(
        tags=["Invitations"],
        request=InvitationCreateSerializer,
        responses={201: InvitationOutputSerializer, **std_errors()},
    )
    def post(self, request, project_id):
        serializer = InvitationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        invitation = InvitationService.send_invitation(
            project_id=project_id,
            user_id=request.user.id,
            email=serializer.validated_data['email']
        )
        
        return Response(InvitationOutputSerializer(invitation).data, status=status.HTTP_201_CREATED)


class InvitationAcceptAPIView(APIView):
    """
    POST: Accept an invitation sent to the authenticated user's email
    
    Request body:
    - token: uuid (required)
    """
    
    @extend_schema(
        tags=["Invitations"],
        request=InvitationAcceptSerializer,
        responses={200: ProjectRoleOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = InvitationAcceptSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        project_role = InvitationService.accept_invitation(
            token=serializer.validated_data['token'],
            user=request.user
        )
        
        return Response(ProjectRoleOutputSerializer(project_role).data)

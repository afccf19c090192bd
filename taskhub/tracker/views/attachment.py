# ============================================
# tracker/views/attachment.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from tracker.serializers.attachment import (
    AttachmentCreateSerializer,
    AttachmentOutputSerializer
)
from tracker.selectors.attachment import AttachmentSelector
from tracker.services.attachment import AttachmentService
from tracker.services.issue import IssueService
from tracker.views.utils import std_errors


class AttachmentListCreateAPIView(APIView):
    """
    GET: List attachments of an issue
    POST: Register an attachment
    
    Path params:
    - issue_id: int
    
    Request body (POST):
    - file_name: string (required)
    - file_path: string (required)
    - file_type: string (optional)
    - file_size: int (optional)
    """
    
    @extend_schema(tags=["Attachments"], responses={200: AttachmentOutputSerializer(many=True), **std_errors()})
    def get(self, request, issue_id):
        IssueService.get_issue_by_id(issue_id)
        attachments = AttachmentSelector.get_attachments_by_issue(issue_id)
        return Response(AttachmentOutputSerializer(attachments, many=True).data)
    
    @extend_schema(
        tags=["Attachments"],
        request=AttachmentCreateSerializer,
        responses={201: AttachmentOutputSerializer, **std_errors()},
    )
    def post(self, request, issue_id):
        serializer = AttachmentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        attachment = AttachmentService.create_attachment(
            issue_id=issue_id,
            uploader=request.user,
            **serializer.validated_data
        )
        
        return Response(AttachmentOutputSerializer(attachment).data, status=status.HTTP_201_CREATED)


class AttachmentDetailAPIView(APIView):
    """
    DELETE: Delete attachment (uploader or project managers)
    """
    
    @extend_schema(tags=["Attachments"], responses={204: None, **std_errors()})
    def delete(self, request, attachment_id):
        AttachmentService.delete_attachment(
            attachment_id=attachment_id,
            user_id=request.user.id
        )
        
        return Response(status=status.HTTP_204_NO_CONTENT)

# ============================================
# tracker/views/comment.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from tracker.serializers.comment import (
    CommentCreateSerializer,
    CommentUpdateSerializer,
    CommentOutputSerializer
)
from tracker.selectors.comment import CommentSelector
from tracker.services.comment import CommentService
from tracker.services.issue import IssueService
from tracker.views.utils import std_errors


class CommentListCreateAPIView(APIView):
    """
    GET: List comments for an issue
    POST: Create a comment
    
    Path params:
    - issue_id: int
    
    Request body (POST):
    - content: string (required)
    """
    
    @extend_schema(tags=["Comments"], responses={200: CommentOutputSerializer(many=True), **std_errors()})
    def get(self, request, issue_id):
        IssueService.get_issue_by_id(issue_id)
        comments = CommentSelector.get_comments_by_issue(issue_id)
        
        serializer = CommentOutputSerializer(comments, many=True)
        return Response(serializer.data)
    
    @extend_schema(
        tags=["Comments"],
        request=CommentCreateSerializer,
        responses={201: CommentOutputSerializer, **std_errors()},
    )
    def post(self, request, issue_id):
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        comment = CommentService.create_comment(
            issue_id=issue_id,
            author=request.user,
            **serializer.validated_data
        )
        
        output_serializer = CommentOutputSerializer(comment)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


class CommentDetailAPIView(APIView):
    """
    PUT: Update comment
    DELETE: Delete comment
    
    Path params:
    - comment_id: int
    """
    
    @extend_schema(
        tags=["Comments"],
        request=CommentUpdateSerializer,
        responses={200: CommentOutputSerializer, **std_errors()},
    )
    def put(self, request, comment_id):
        serializer = CommentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        updated_comment = CommentService.update_comment(
            comment_id=comment_id,
            user_id=request.user.id,
            **serializer.validated_data
        )
        
        output_serializer = CommentOutputSerializer(updated_comment)
        return Response(output_serializer.data)
    
    @extend_schema(tags=["Comments"], responses={204: None, **std_errors()})
    def delete(self, request, comment_id):
        CommentService.delete_comment(
            comment_id=comment_id,
            user_id=request.user.id
        )
        
        return Response(status=status.HTTP_204_NO_CONTENT)

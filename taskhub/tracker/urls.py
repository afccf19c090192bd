# ============================================
# tracker/urls.py
# ============================================
from django.urls import path
from tracker.views.project import (
    ProjectListCreateAPIView,
    ProjectDetailAPIView,
    ProjectMemberAPIView
)
from tracker.views.issue import (
    IssueListCreateAPIView,
    IssueDetailAPIView,
    IssueStatusAPIView,
    IssueAssigneeAPIView
)
from tracker.views.milestone import (
    ProjectMilestoneListCreateAPIView,
    MilestoneDetailAPIView,
    MilestoneIssueAPIView
)
from tracker.views.message import (
    MessageSendAPIView,
    ProjectChatMessagesAPIView,
    MessageDetailAPIView
)
from tracker.views.comment import (
    CommentListCreateAPIView,
    CommentDetailAPIView
)
from tracker.views.attachment import (
    AttachmentListCreateAPIView,
    AttachmentDetailAPIView
)
from tracker.views.invitation import (
    ProjectInvitationListCreateAPIView,
    InvitationAcceptAPIView
)
from tracker.views.auth import (
    SignupAPIView,
    LoginAPIView,
    MeAPIView
)

app_name = 'tracker'

urlpatterns = [
    # Auth
    path('auth/signup/', SignupAPIView.as_view(), name='auth-signup'),
    path('auth/login/', LoginAPIView.as_view(), name='auth-login'),
    path('auth/me/', MeAPIView.as_view(), name='auth-me'),
    
    # Projects
    path('projects/', ProjectListCreateAPIView.as_view(), name='project-list-create'),
    path('projects/<int:project_id>/', ProjectDetailAPIView.as_view(), name='project-detail'),
    path('projects/<int:project_id>/members/', ProjectMemberAPIView.as_view(), name='project-member-add'),
    path('projects/<int:project_id>/members/<int:member_id>/', ProjectMemberAPIView.as_view(), name='project-member-remove'),
    
    # Invitations
    path('projects/<int:project_id>/invitations/', ProjectInvitationListCreateAPIView.as_view(), name='invitation-list-create'),
    path('invitations/accept/', InvitationAcceptAPIView.as_view(), name='invitation-accept'),
    
    # Milestones
    path('projects/<int:project_id>/milestones/', ProjectMilestoneListCreateAPIView.as_view(), name='milestone-list-create'),
    path('milestones/<int:milestone_id>/', MilestoneDetailAPIView.as_view(), name='milestone-detail'),
    path('milestones/<int:milestone_id>/issues/<int:issue_id>/', MilestoneIssueAPIView.as_view(), name='milestone-issue'),
    
    # Issues
    path('issues/', IssueListCreateAPIView.as_view(), name='issue-list-create'),
    path('issues/<int:issue_id>/', IssueDetailAPIView.as_view(), name='issue-detail'),
    path('issues/<int:issue_id>/status/', IssueStatusAPIView.as_view(), name='issue-status'),
    path('issues/<int:issue_id>/assignee/<int:user_id>/', IssueAssigneeAPIView.as_view(), name='issue-assignee'),
    
    # Comments
    path('issues/<int:issue_id>/comments/', CommentListCreateAPIView.as_view(), name='comment-list-create'),
    path('comments/<int:comment_id>/', CommentDetailAPIView.as_view(), name='comment-detail'),
    
    # Attachments
    path('issues/<int:issue_id>/attachments/', AttachmentListCreateAPIView.as_view(), name='attachment-list-create'),
    path('attachments/<int:attachment_id>/', AttachmentDetailAPIView.as_view(), name='attachment-detail'),
    
    # Messages
    path('messages/send', MessageSendAPIView.as_view(), name='message-send'),
    path('messages/chat/<int:project_id>', ProjectChatMessagesAPIView.as_view(), name='message-list'),
    path('messages/<int:message_id>', MessageDetailAPIView.as_view(), name='message-detail'),
]

# ============================================
# tracker/models/__init__.py
# ============================================
from .project import Project
from .role import ProjectRole
from .milestone import Milestone
from .tag import Tag
from .issue import Issue
from .comment import Comment
from .attachment import Attachment
from .chat import Chat
from .message import Message
from .invitation import Invitation

__all__ = [
    'Project',
    'ProjectRole',
    'Milestone',
    'Tag',
    'Issue',
    'Comment',
    'Attachment',
    'Chat',
    'Message',
    'Invitation',
]

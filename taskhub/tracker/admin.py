from django.contrib import admin
from .models import Attachment, Chat, Comment, Invitation, Issue, Message, Milestone, Project, ProjectRole, Tag


class ProjectRoleInline(admin.TabularInline):
    model = ProjectRole
    extra = 0


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "owner", "created_at")
    search_fields = ("name",)
    inlines = [ProjectRoleInline]


@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "project", "status", "priority", "issue_type", "assignee", "milestone")
    list_filter = ("status", "priority", "issue_type")
    search_fields = ("title",)


@admin.register(Milestone)
class MilestoneAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "project", "status", "start_date", "end_date")
    list_filter = ("status",)


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "chat", "sender", "created_at")


@admin.register(Invitation)
class InvitationAdmin(admin.ModelAdmin):
    list_display = ("id", "email", "project", "invited_by", "created_at", "accepted_at")
    search_fields = ("email",)


admin.site.register([Tag, Comment, Attachment, Chat])

from django.contrib import admin
from .models import Team, TeamEmail, TeamGlobalSettings, TeamMember


class TeamMemberInline(admin.TabularInline):
    model = TeamMember
    extra = 0
    fields = ['user', 'role', 'created_at']
    readonly_fields = ['created_at']
    autocomplete_fields = ['user']


class TeamEmailInline(admin.StackedInline):
    model = TeamEmail
    can_delete = True
    extra = 0
    fields = ['name', 'email']


class TeamGlobalSettingsInline(admin.StackedInline):
    model = TeamGlobalSettings
    can_delete = False
    extra = 0
    fields = ['document_visibility']


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ['name', 'url', 'owner', 'get_member_count', 'created_at']
    search_fields = ['name', 'url', 'owner__email']
    readonly_fields = ['created_at']
    inlines = [TeamEmailInline, TeamGlobalSettingsInline, TeamMemberInline]

    def get_member_count(self, obj):
        return obj.members.count()
    get_member_count.short_description = 'Members'


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    list_display = ['user', 'team', 'role', 'created_at']
    list_filter = ['role', 'team']
    search_fields = ['user__email', 'team__name', 'team__url']
    autocomplete_fields = ['user', 'team']

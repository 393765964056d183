from django.contrib import admin
from .models import Folder


@admin.register(Folder)
class FolderAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'visibility', 'user', 'team', 'parent', 'pinned', 'created_at']
    list_filter = ['type', 'visibility', 'pinned']
    search_fields = ['name', 'user__email', 'team__url']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['parent']

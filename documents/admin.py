from django.contrib import admin
from .models import Document, DocumentData, File, Recipient


class RecipientInline(admin.TabularInline):
    model = Recipient
    extra = 0
    fields = ['email', 'name', 'role', 'signing_status', 'signed_at']


@admin.register(DocumentData)
class DocumentDataAdmin(admin.ModelAdmin):
    list_display = ['id', 'data', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ['title', 'status', 'visibility', 'user', 'team', 'folder', 'created_at', 'deleted_at']
    list_filter = ['status', 'visibility', 'team']
    search_fields = ['title', 'external_id', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['folder', 'document_data']
    inlines = [RecipientInline]


@admin.register(File)
class FileAdmin(admin.ModelAdmin):
    list_display = ['title', 'visibility', 'user', 'team', 'folder', 'use_to_chat', 'created_at', 'deleted_at']
    list_filter = ['visibility', 'use_to_chat', 'team']
    search_fields = ['title', 'qr_token', 'user__email']
    readonly_fields = ['qr_token', 'created_at', 'updated_at']
    raw_id_fields = ['folder', 'document_data']

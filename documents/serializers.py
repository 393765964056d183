from rest_framework import serializers

from api.serializers import TeamSummarySerializer, UserSummarySerializer
from .models import Document, File, Recipient


class RecipientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Recipient
        fields = ['id', 'email', 'name', 'role', 'signing_status', 'signed_at']
        read_only_fields = fields


class FileSerializer(serializers.ModelSerializer):
    """Serializer for file listings"""
    user = UserSummarySerializer(read_only=True)
    team = TeamSummarySerializer(read_only=True)
    folder_id = serializers.UUIDField(read_only=True, allow_null=True)
    document_data_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = File
        fields = [
            'id', 'title', 'qr_token', 'user', 'team', 'folder_id',
            'document_data_id', 'visibility', 'use_to_chat',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class DocumentSerializer(serializers.ModelSerializer):
    """Serializer for document listings, recipients embedded"""
    user = UserSummarySerializer(read_only=True)
    team = TeamSummarySerializer(read_only=True)
    folder_id = serializers.UUIDField(read_only=True, allow_null=True)
    recipients = RecipientSerializer(many=True, read_only=True)

    class Meta:
        model = Document
        fields = [
            'id', 'title', 'external_id', 'status', 'visibility', 'user', 'team',
            'folder_id', 'recipients', 'completed_at', 'created_at', 'updated_at',
        ]
        read_only_fields = fields


class FileCreateSerializer(serializers.Serializer):
    """Input for creating a file from an uploaded blob"""
    title = serializers.CharField(max_length=255)
    document_data_id = serializers.IntegerField(min_value=1)
    folder_id = serializers.UUIDField(required=False, allow_null=True)
    use_to_chat = serializers.BooleanField(required=False, default=False)

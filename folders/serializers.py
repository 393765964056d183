from rest_framework import serializers

from .models import Folder


class FolderSerializer(serializers.ModelSerializer):
    parent_id = serializers.UUIDField(read_only=True, allow_null=True)
    team_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Folder
        fields = [
            'id', 'name', 'type', 'visibility', 'pinned', 'parent_id', 'team_id',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields

from rest_framework import serializers
from django.contrib.auth import get_user_model

from .models import Team, TeamMember

User = get_user_model()


class UserSummarySerializer(serializers.ModelSerializer):
    """Owner/sender summary embedded in record listings."""
    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'name', 'email']

    def get_name(self, obj):
        return obj.get_full_name() or obj.get_username()


class TeamSummarySerializer(serializers.ModelSerializer):
    """Team summary embedded in record listings."""

    class Meta:
        model = Team
        fields = ['id', 'url']


class TeamMemberSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = TeamMember
        fields = ['id', 'team', 'user', 'role', 'created_at']
        read_only_fields = fields


def serialize_find_result(result, serializer_class, context=None):
    """
    Render a FindResult as the listing response body.

    Returns:
        dict: {'data', 'count', 'current_page', 'per_page', 'total_pages'}
    """
    return {
        'data': serializer_class(result.data, many=True, context=context or {}).data,
        'count': result.count,
        'current_page': result.current_page,
        'per_page': result.per_page,
        'total_pages': result.total_pages,
    }

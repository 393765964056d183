from rest_framework import serializers

from api.serializers import TeamSummarySerializer, UserSummarySerializer
from .models import Artist, IsrcSong, Lpm


class ArtistSerializer(serializers.ModelSerializer):
    class Meta:
        model = Artist
        fields = ['id', 'name']


class IsrcSongSerializer(serializers.ModelSerializer):
    """Serializer for ISRC listings"""
    user = UserSummarySerializer(read_only=True)
    team = TeamSummarySerializer(read_only=True)
    artists = serializers.SerializerMethodField()

    class Meta:
        model = IsrcSong
        fields = [
            'id', 'isrc', 'track_name', 'title', 'license', 'duration', 'date',
            'artists', 'visibility', 'user', 'team', 'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_artists(self, obj):
        # Reads the prefetched link rows
        return ArtistSerializer([link.artist for link in obj.isrc_artists.all()], many=True).data


class LpmSerializer(serializers.ModelSerializer):
    """Serializer for LPM listings"""
    user = UserSummarySerializer(read_only=True)
    team = TeamSummarySerializer(read_only=True)
    artists = serializers.SerializerMethodField()

    class Meta:
        model = Lpm
        fields = [
            'id', 'product_id', 'product_title', 'product_type', 'product_version',
            'label_name', 'original_release_date', 'artists', 'visibility',
            'user', 'team', 'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_artists(self, obj):
        return ArtistSerializer([link.artist for link in obj.lpm_artists.all()], many=True).data

"""
Finders for the ISRC registry and LPM product listings.

Neither model is foldered. In a team context the listing covers team entries
and entries created from the team email account, gated by role.
"""
from api.finders import RecordFinder
from .filters import IsrcSongFilter, LpmFilter
from .models import IsrcSong, Lpm


class IsrcFinder(RecordFinder):
    model = IsrcSong
    filterset_class = IsrcSongFilter
    ordering_fields = ['id', 'isrc', 'track_name', 'title', 'license', 'date', 'created_at']
    default_ordering = ('id', 'asc')
    prefetch_related_fields = ['isrc_artists__artist']


class LpmFinder(RecordFinder):
    model = Lpm
    filterset_class = LpmFilter
    ordering_fields = [
        'id', 'product_id', 'product_title', 'product_type',
        'original_release_date', 'created_at',
    ]
    default_ordering = ('product_type', 'asc')
    prefetch_related_fields = ['lpm_artists__artist']

from django.db.models import Exists, OuterRef

from api.filters import NumberInFilter, RecordFilterSet
from .models import IsrcArtist, IsrcSong, Lpm, LpmArtist


class IsrcSongFilter(RecordFilterSet):
    """Filter set for ISRC listings"""
    search_fields = ('track_name', 'isrc', 'title', 'license')
    period_field = 'date'

    artist_ids = NumberInFilter(method='filter_artist_ids')

    class Meta:
        model = IsrcSong
        fields = []

    def filter_artist_ids(self, queryset, name, value):
        """Songs crediting any of the given artists."""
        credited = IsrcArtist.objects.filter(isrc_song=OuterRef('pk'), artist_id__in=value)
        return queryset.filter(Exists(credited))


class LpmFilter(RecordFilterSet):
    """Filter set for LPM listings"""
    search_fields = ('product_title',)
    period_field = 'original_release_date'

    artist_ids = NumberInFilter(method='filter_artist_ids')

    class Meta:
        model = Lpm
        fields = []

    def filter_artist_ids(self, queryset, name, value):
        """Products crediting any of the given artists."""
        credited = LpmArtist.objects.filter(lpm=OuterRef('pk'), artist_id__in=value)
        return queryset.filter(Exists(credited))

from api.views import RecordListView
from .finders import IsrcFinder, LpmFinder
from .serializers import IsrcSongSerializer, LpmSerializer


class IsrcListView(RecordListView):
    """GET: ISRC registry entries, ordered by id unless requested otherwise"""
    finder_class = IsrcFinder
    serializer_class = IsrcSongSerializer
    filter_params = ['artist_ids']


class LpmListView(RecordListView):
    """GET: LPM products, ordered by product type unless requested otherwise"""
    finder_class = LpmFinder
    serializer_class = LpmSerializer
    filter_params = ['artist_ids']

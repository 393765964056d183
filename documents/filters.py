from api.filters import NumberInFilter, RecordFilterSet
from .models import Document, File


class FileFilter(RecordFilterSet):
    """Filter set for File listings"""
    search_fields = ('title',)
    period_field = 'created_at'

    sender_ids = NumberInFilter(field_name='user_id', lookup_expr='in')

    class Meta:
        model = File
        fields = []


class DocumentFilter(RecordFilterSet):
    """Filter set for Document listings"""
    search_fields = ('title', 'external_id')
    period_field = 'created_at'

    sender_ids = NumberInFilter(field_name='user_id', lookup_expr='in')

    class Meta:
        model = Document
        fields = []

"""
Base listing view for record finders.

Personal and team listings share one view class; the team variant is routed
with a `team_id` URL kwarg (e.g. /api/v1/teams/<team_id>/files/).
"""
import uuid

from django.apps import apps
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .errors import AppError, AppErrorCode
from .finders import UNSET
from .serializers import serialize_find_result

ROOT_FOLDER_VALUES = ('', 'root', 'null')


def parse_folder_param(value):
    """
    Folder scope from the query string.

    - absent: UNSET (finder default)
    - '', 'root', 'null': None (root level)
    - a UUID: that folder
    """
    if value is None:
        return UNSET
    if value.lower() in ROOT_FOLDER_VALUES:
        return None
    try:
        return uuid.UUID(value)
    except ValueError:
        raise AppError(AppErrorCode.INVALID_REQUEST, message=f"Invalid folder id '{value}'")


def get_records_config():
    return apps.get_app_config('api').records_config


class RecordListView(APIView):
    """
    GET: one page of records visible to the requesting user.

    Configuration attributes (override in subclass):
    - finder_class: RecordFinder subclass
    - serializer_class: serializer for one record
    - filter_params: finder specific query params passed through (e.g. 'sender_ids')
    - foldered: whether the `folder_id` query param applies
    """
    permission_classes = [IsAuthenticated]
    finder_class = None
    serializer_class = None
    filter_params = []
    foldered = False

    def get_finder(self):
        return self.finder_class(config=get_records_config())

    def get_find_kwargs(self, request):
        params = request.query_params
        kwargs = {
            'page': params.get('page'),
            'per_page': params.get('per_page'),
            'order_by': params.get('order_by'),
            'order_direction': params.get('order_direction'),
            'query': params.get('query', ''),
            'period': params.get('period', ''),
        }
        if self.foldered:
            kwargs['folder_id'] = parse_folder_param(params.get('folder_id'))
        for name in self.filter_params:
            if params.get(name):
                kwargs[name] = params.get(name)
        return kwargs

    def get(self, request, team_id=None):
        result = self.get_finder().find(request.user, team_id, **self.get_find_kwargs(request))
        return Response(
            serialize_find_result(result, self.serializer_class, {'request': request})
        )

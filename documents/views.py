from rest_framework import status
from rest_framework.response import Response

from api.errors import AppError, AppErrorCode
from api.views import RecordListView
from .finders import DocumentFinder, FileFinder
from .serializers import DocumentSerializer, FileCreateSerializer, FileSerializer
from .services import create_file


class FileListView(RecordListView):
    """
    GET: files at one folder level (root when folder_id is omitted)
    POST: create a file from an uploaded blob
    """
    finder_class = FileFinder
    serializer_class = FileSerializer
    filter_params = ['sender_ids']
    foldered = True

    def post(self, request, team_id=None):
        serializer = FileCreateSerializer(data=request.data)
        if not serializer.is_valid():
            raise AppError(AppErrorCode.INVALID_REQUEST, message=str(serializer.errors))

        file = create_file(request.user, team_id=team_id, **serializer.validated_data)
        return Response(
            FileSerializer(file, context={'request': request}).data,
            status=status.HTTP_201_CREATED
        )


class DocumentListView(RecordListView):
    """
    GET: documents filtered by status view (DRAFT, PENDING, COMPLETED,
    REJECTED, ERROR, INBOX or ALL)
    """
    finder_class = DocumentFinder
    serializer_class = DocumentSerializer
    filter_params = ['sender_ids', 'status']
    foldered = True

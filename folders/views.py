from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import FolderSerializer
from .services import delete_folder


class FolderDetailView(APIView):
    """
    DELETE: remove a folder, its subfolders and the files inside them.
    Responds with the deleted folder.
    """
    permission_classes = [IsAuthenticated]

    def delete(self, request, folder_id, team_id=None):
        folder = delete_folder(request.user, folder_id, team_id=team_id)
        return Response(FolderSerializer(folder).data)

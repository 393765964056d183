"""
Finders for document and file listings.

Both are foldered: leaving folder_id out lists the root level, the same as
passing None explicitly. Pass ANY_FOLDER to list across folders.
"""
from api.errors import AppError, AppErrorCode
from api.finders import RecordFinder
from api.scoping import PersonalOwner
from api.visibility import RecordFields
from .filters import DocumentFilter, FileFilter
from .models import Document, ExtendedDocumentStatus, File, Recipient
from .visibility import personal_documents_q, team_documents_q


class FileFinder(RecordFinder):
    """
    Files visible to the user.

    - Personal: the user's own files outside of teams
    - Team: team files and files sent by the team email, gated by role
    """
    model = File
    filterset_class = FileFilter
    ordering_fields = ['id', 'title', 'created_at', 'updated_at']
    default_ordering = ('created_at', 'desc')
    folder_field = 'folder'
    select_related_fields = ['user', 'team', 'document_data']


class DocumentFinder(RecordFinder):
    """
    Documents visible to the user, narrowed by an ExtendedDocumentStatus view.
    The status layer is described in documents.visibility.
    """
    model = Document
    filterset_class = DocumentFilter
    record_fields = RecordFields(recipient_model=Recipient, recipient_fk='document')
    ordering_fields = ['id', 'title', 'status', 'created_at', 'updated_at', 'completed_at']
    default_ordering = ('created_at', 'desc')
    folder_field = 'folder'
    select_related_fields = ['user', 'team', 'document_data']
    prefetch_related_fields = ['recipients']

    def get_visibility_q(self, owner, user, filters):
        status = filters.pop('status', None) or ExtendedDocumentStatus.ALL
        if status not in ExtendedDocumentStatus.values:
            raise AppError(AppErrorCode.INVALID_REQUEST, message=f"Unknown status '{status}'")

        if isinstance(owner, PersonalOwner):
            return personal_documents_q(status, user, self.record_fields)
        return team_documents_q(status, owner, user, self.record_fields)

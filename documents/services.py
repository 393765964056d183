"""
File creation.

Creates the File record for a blob that is already stored (DocumentData).
The upload itself happens elsewhere.
"""
import logging

from django.db import transaction

from api.errors import AppError, AppErrorCode
from api.models import TeamGlobalSettings, TeamMemberRole
from api.permissions import determine_visibility
from api.scoping import TeamOwner, resolve_owner
from folders.models import Folder
from .models import DocumentData, File

logger = logging.getLogger(__name__)


def _team_default_visibility(team):
    settings_row = TeamGlobalSettings.objects.filter(team=team).first()
    return settings_row.document_visibility if settings_row else None


def create_file(user, *, title, document_data_id, team_id=None, folder_id=None, use_to_chat=False):
    """
    Create a File owned by user (and team when team_id is given).

    Visibility: the folder's visibility when created inside a folder,
    otherwise the team default, otherwise derived from the creator's role.

    Raises:
        AppError(NOT_FOUND): team not found / not a member, folder not found,
            or document data not found
        AppError(ALREADY_EXISTS): document data already backs another file
    """
    owner = resolve_owner(user, team_id)
    team = owner.team if isinstance(owner, TeamOwner) else None

    folder = None
    if folder_id:
        folder = Folder.objects.filter(id=folder_id, user=user, team=team).first()
        if folder is None:
            raise AppError(AppErrorCode.NOT_FOUND, message='Folder not found')

    if folder is not None:
        visibility = folder.visibility
    else:
        visibility = determine_visibility(
            _team_default_visibility(team) if team else None,
            owner.role if team else TeamMemberRole.MEMBER,
        )

    with transaction.atomic():
        document_data = DocumentData.objects.select_for_update().filter(id=document_data_id).first()
        if document_data is None:
            raise AppError(AppErrorCode.NOT_FOUND, message='Document data not found')
        if File.objects.filter(document_data=document_data).exists():
            raise AppError(AppErrorCode.ALREADY_EXISTS, message='A file already uses this document data')

        file = File.objects.create(
            title=title,
            user=user,
            team=team,
            folder=folder,
            document_data=document_data,
            visibility=visibility,
            use_to_chat=use_to_chat,
        )

    logger.info(f"Created file {file.id} for user {user.pk} (team={team_id}, folder={folder_id})")
    return file

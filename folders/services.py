"""
Folder deletion with cascading cleanup of stored files.

Order of operations:
1. Resolve the ownership context (non-member -> NOT_FOUND)
2. Load the caller's own folder (missing or someone else's -> NOT_FOUND)
3. Check the role may delete a folder of this visibility (-> UNAUTHORIZED).
   Nothing has been touched yet when this fails.
4. In one transaction, for every file in the folder tree: delete the blob if
   it is still in storage, then the DocumentData row (cascading to the File).
   A missing blob only skips the storage call.
5. Delete the folder row (cascading to subfolders and remaining documents).

Any unexpected error in 4-5 rolls the transaction back, so the folder and
its rows stay in place, and is reported as a generic failure. Blobs removed
before the error are not restored; a later retry treats them as missing.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from api.errors import AppError, AppErrorCode
from api.scoping import TeamOwner, resolve_owner
from documents import blobs
from documents.models import File
from .models import Folder

logger = logging.getLogger(__name__)


def _get_folder(owner, user, folder_id):
    if isinstance(owner, TeamOwner):
        lookup = {'id': folder_id, 'user': user, 'team': owner.team}
    else:
        lookup = {'id': folder_id, 'user': user, 'team__isnull': True}
    try:
        return Folder.objects.filter(**lookup).first()
    except (ValidationError, ValueError):
        return None


def _delete_files(folder_ids):
    """Delete every file under folder_ids with its blob. Returns (files, blobs) deleted."""
    files = (
        File.objects
        .filter(folder_id__in=folder_ids)
        .select_related('document_data')
        .order_by('id')
    )
    deleted_files = 0
    deleted_blobs = 0
    for file in files:
        document_data = file.document_data
        if blobs.blob_exists(document_data):
            blobs.delete_blob(document_data)
            deleted_blobs += 1
        else:
            logger.warning(f"Blob for file {file.id} is already missing, deleting record only")
        document_data.delete()
        deleted_files += 1
    return deleted_files, deleted_blobs


def delete_folder(user, folder_id, team_id=None):
    """
    Delete a folder and the files it contains.

    Only the caller's own folders are found (personal or in the team).
    Permissions in a team context:
    - ADMIN: folders of any visibility
    - MANAGER: every visibility except ADMIN
    - MEMBER: EVERYONE folders only

    Returns:
        Folder: The deleted folder (id kept for the response)

    Raises:
        AppError(NOT_FOUND): Team or folder not found
        AppError(UNAUTHORIZED): Role may not delete this folder
        AppError(UNKNOWN_ERROR): Cleanup failed; nothing was deleted from the database
    """
    owner = resolve_owner(user, team_id)

    folder = _get_folder(owner, user, folder_id)
    if folder is None:
        raise AppError(AppErrorCode.NOT_FOUND, message='Folder not found')

    if isinstance(owner, TeamOwner) and not owner.capabilities.can_delete(folder.visibility):
        raise AppError(
            AppErrorCode.UNAUTHORIZED,
            message='You do not have permission to delete this folder'
        )

    deleted_id = folder.id
    try:
        with transaction.atomic():
            deleted_files, deleted_blobs = _delete_files(folder.get_descendant_ids())
            folder.delete()
    except Exception:
        logger.exception(f"Failed to delete folder {deleted_id}")
        raise AppError(
            AppErrorCode.UNKNOWN_ERROR,
            message='An error occurred while deleting the files.'
        )

    logger.info(
        f"Deleted folder {deleted_id} for user {user.pk} "
        f"({deleted_files} files, {deleted_blobs} blobs)"
    )
    # Model.delete() clears the pk; keep it for the response
    folder.id = deleted_id
    return folder

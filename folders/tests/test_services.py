"""
Tests for folder deletion.

Tests cover:
- Cascading delete of files, blobs and subfolders
- Role checks happen before anything is touched
- Missing blobs are skipped
- Storage failures roll everything back
- Blobs are removed from the local media storage
"""
import shutil
import tempfile
import uuid
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.core.files.base import ContentFile
from django.test import TestCase, override_settings

from api.errors import AppError, AppErrorCode
from api.models import DocumentVisibility, Team, TeamMember, TeamMemberRole
from documents.models import Document, DocumentData, DocumentStatus, File
from folders.models import Folder, FolderType
from folders.services import delete_folder

User = get_user_model()


def make_file(user, title, folder, team=None):
    document_data = DocumentData.objects.create(data=f'documents/{title}.pdf')
    return File.objects.create(
        title=title, user=user, team=team, folder=folder, document_data=document_data
    )


@patch('documents.blobs.delete_blob')
@patch('documents.blobs.blob_exists', return_value=True)
class DeleteTeamFolderTestCase(TestCase):

    def setUp(self):
        self.admin = User.objects.create_user(username='admin', email='admin@example.com', password='x')
        self.manager = User.objects.create_user(username='manager', email='manager@example.com', password='x')
        self.member = User.objects.create_user(username='member', email='member@example.com', password='x')
        self.team = Team.objects.create(name='Label Ops', url='label-ops', owner=self.admin)
        TeamMember.objects.create(team=self.team, user=self.admin, role=TeamMemberRole.ADMIN)
        TeamMember.objects.create(team=self.team, user=self.manager, role=TeamMemberRole.MANAGER)
        TeamMember.objects.create(team=self.team, user=self.member, role=TeamMemberRole.MEMBER)

        self.folder = Folder.objects.create(
            name='Masters', user=self.admin, team=self.team, type=FolderType.FILE,
            visibility=DocumentVisibility.ADMIN
        )
        self.subfolder = Folder.objects.create(
            name='2024', user=self.admin, team=self.team, type=FolderType.FILE,
            parent=self.folder, visibility=DocumentVisibility.ADMIN
        )
        for index in range(3):
            make_file(self.admin, f'master-{index}', self.folder, team=self.team)
        make_file(self.admin, 'nested', self.subfolder, team=self.team)
        make_file(self.admin, 'outside', None, team=self.team)

    def test_admin_deletes_folder_tree(self, blob_exists, delete_blob):
        folder_id = self.folder.id

        deleted = delete_folder(self.admin, folder_id, team_id=self.team.id)

        self.assertEqual(deleted.id, folder_id)
        self.assertEqual(deleted.name, 'Masters')
        self.assertFalse(Folder.objects.filter(id__in=[folder_id, self.subfolder.id]).exists())
        self.assertEqual(list(File.objects.values_list('title', flat=True)), ['outside'])
        self.assertEqual(DocumentData.objects.count(), 1)
        self.assertEqual(delete_blob.call_count, 4)

    def test_manager_cannot_delete_admin_folder(self, blob_exists, delete_blob):
        folder = Folder.objects.create(
            name='Board', user=self.manager, team=self.team, type=FolderType.FILE,
            visibility=DocumentVisibility.ADMIN
        )
        for index in range(3):
            make_file(self.manager, f'board-{index}', folder, team=self.team)

        with self.assertRaises(AppError) as cm:
            delete_folder(self.manager, folder.id, team_id=self.team.id)

        self.assertEqual(cm.exception.code, AppErrorCode.UNAUTHORIZED)
        self.assertTrue(Folder.objects.filter(id=folder.id).exists())
        self.assertEqual(File.objects.filter(folder=folder).count(), 3)
        blob_exists.assert_not_called()
        delete_blob.assert_not_called()

    def test_manager_deletes_manager_folder(self, blob_exists, delete_blob):
        folder = Folder.objects.create(
            name='Promo', user=self.manager, team=self.team, type=FolderType.FILE,
            visibility=DocumentVisibility.MANAGER_AND_ABOVE
        )
        make_file(self.manager, 'promo', folder, team=self.team)

        delete_folder(self.manager, folder.id, team_id=self.team.id)

        self.assertFalse(Folder.objects.filter(id=folder.id).exists())
        self.assertFalse(File.objects.filter(title='promo').exists())

    def test_member_limited_to_everyone_folders(self, blob_exists, delete_blob):
        folder = Folder.objects.create(
            name='Managers', user=self.member, team=self.team, type=FolderType.FILE,
            visibility=DocumentVisibility.MANAGER_AND_ABOVE
        )

        with self.assertRaises(AppError) as cm:
            delete_folder(self.member, folder.id, team_id=self.team.id)

        self.assertEqual(cm.exception.code, AppErrorCode.UNAUTHORIZED)

    def test_folder_of_another_member_not_found(self, blob_exists, delete_blob):
        folder = Folder.objects.create(
            name='Shared', user=self.admin, team=self.team, type=FolderType.FILE,
            visibility=DocumentVisibility.EVERYONE
        )
        make_file(self.admin, 'shared', folder, team=self.team)

        with self.assertRaises(AppError) as cm:
            delete_folder(self.member, folder.id, team_id=self.team.id)

        self.assertEqual(cm.exception.code, AppErrorCode.NOT_FOUND)
        self.assertTrue(Folder.objects.filter(id=folder.id).exists())
        self.assertTrue(File.objects.filter(title='shared').exists())
        delete_blob.assert_not_called()

    def test_missing_blob_skipped(self, blob_exists, delete_blob):
        blob_exists.return_value = False

        with self.assertLogs('folders.services', level='WARNING'):
            delete_folder(self.admin, self.folder.id, team_id=self.team.id)

        delete_blob.assert_not_called()
        self.assertFalse(File.objects.filter(folder__isnull=False).exists())

    def test_storage_failure_rolls_back(self, blob_exists, delete_blob):
        delete_blob.side_effect = [None, OSError('storage unavailable')]

        with self.assertLogs('folders.services', level='ERROR'):
            with self.assertRaises(AppError) as cm:
                delete_folder(self.admin, self.folder.id, team_id=self.team.id)

        self.assertEqual(cm.exception.code, AppErrorCode.UNKNOWN_ERROR)
        self.assertEqual(cm.exception.message, 'An error occurred while deleting the files.')
        self.assertTrue(Folder.objects.filter(id=self.folder.id).exists())
        self.assertEqual(File.objects.count(), 5)
        self.assertEqual(DocumentData.objects.count(), 5)

    def test_documents_in_folder_removed(self, blob_exists, delete_blob):
        document_data = DocumentData.objects.create(data='documents/contract.pdf')
        Document.objects.create(
            title='Contract', user=self.admin, team=self.team, folder=self.folder,
            status=DocumentStatus.DRAFT, document_data=document_data
        )

        delete_folder(self.admin, self.folder.id, team_id=self.team.id)

        self.assertFalse(Document.objects.exists())

    def test_folder_of_another_team_not_found(self, blob_exists, delete_blob):
        other_team = Team.objects.create(name='Other', url='other', owner=self.admin)
        folder = Folder.objects.create(name='Theirs', user=self.admin, team=other_team)

        with self.assertRaises(AppError) as cm:
            delete_folder(self.admin, folder.id, team_id=self.team.id)

        self.assertEqual(cm.exception.code, AppErrorCode.NOT_FOUND)

    def test_non_member_not_found(self, blob_exists, delete_blob):
        outsider = User.objects.create_user(username='out', email='out@example.com', password='x')

        with self.assertRaises(AppError) as cm:
            delete_folder(outsider, self.folder.id, team_id=self.team.id)

        self.assertEqual(cm.exception.code, AppErrorCode.NOT_FOUND)
        self.assertTrue(Folder.objects.filter(id=self.folder.id).exists())


@patch('documents.blobs.delete_blob')
@patch('documents.blobs.blob_exists', return_value=True)
class DeletePersonalFolderTestCase(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='ana', email='ana@example.com', password='x')
        self.other = User.objects.create_user(username='bob', email='bob@example.com', password='x')
        self.folder = Folder.objects.create(name='Receipts', user=self.user, type=FolderType.FILE)
        make_file(self.user, 'receipt', self.folder)

    def test_owner_deletes_personal_folder(self, blob_exists, delete_blob):
        delete_folder(self.user, self.folder.id)

        self.assertFalse(Folder.objects.exists())
        self.assertFalse(File.objects.exists())
        delete_blob.assert_called_once()

    def test_other_user_not_found(self, blob_exists, delete_blob):
        with self.assertRaises(AppError) as cm:
            delete_folder(self.other, self.folder.id)

        self.assertEqual(cm.exception.code, AppErrorCode.NOT_FOUND)
        self.assertTrue(Folder.objects.filter(id=self.folder.id).exists())

    def test_unknown_folder_not_found(self, blob_exists, delete_blob):
        with self.assertRaises(AppError) as cm:
            delete_folder(self.user, uuid.uuid4())

        self.assertEqual(cm.exception.code, AppErrorCode.NOT_FOUND)

    def test_malformed_folder_id_not_found(self, blob_exists, delete_blob):
        with self.assertRaises(AppError) as cm:
            delete_folder(self.user, 'not-a-uuid')

        self.assertEqual(cm.exception.code, AppErrorCode.NOT_FOUND)


class DeleteFolderStorageTestCase(TestCase):
    """Folder deletion against the local media storage, without patched blob helpers."""

    def setUp(self):
        media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, media_root, ignore_errors=True)
        media_override = override_settings(MEDIA_ROOT=media_root)
        media_override.enable()
        self.addCleanup(media_override.disable)

        self.user = User.objects.create_user(username='ana', email='ana@example.com', password='x')
        self.folder = Folder.objects.create(name='Scans', user=self.user, type=FolderType.FILE)

        self.document_data = DocumentData()
        self.document_data.data.save('scan.pdf', ContentFile(b'%PDF-1.4 scan'))
        File.objects.create(
            title='scan', user=self.user, folder=self.folder, document_data=self.document_data
        )
        self.blob_name = self.document_data.data.name
        self.storage = self.document_data.data.storage

    def test_blob_removed_from_storage(self):
        self.assertTrue(self.storage.exists(self.blob_name))

        delete_folder(self.user, self.folder.id)

        self.assertFalse(self.storage.exists(self.blob_name))
        self.assertFalse(File.objects.exists())
        self.assertFalse(DocumentData.objects.exists())

    def test_blob_already_gone(self):
        self.storage.delete(self.blob_name)

        with self.assertLogs('folders.services', level='WARNING'):
            delete_folder(self.user, self.folder.id)

        self.assertFalse(Folder.objects.exists())
        self.assertFalse(File.objects.exists())

"""
Tests for the file and document listing endpoints.
"""
from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from api.models import DocumentVisibility, Team, TeamMember, TeamMemberRole
from documents.models import Document, DocumentData, DocumentStatus, File
from folders.models import Folder, FolderType

User = get_user_model()


class FileListViewTestCase(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username='ana', email='ana@example.com', password='x')
        self.team = Team.objects.create(name='Label Ops', url='label-ops', owner=self.user)
        TeamMember.objects.create(team=self.team, user=self.user, role=TeamMemberRole.MEMBER)
        self.folder = Folder.objects.create(name='Scans', user=self.user, type=FolderType.FILE)

        for title in ('Root one', 'Root two'):
            File.objects.create(
                title=title, user=self.user,
                document_data=DocumentData.objects.create(data=f'documents/{title}.pdf')
            )
        File.objects.create(
            title='In folder', user=self.user, folder=self.folder,
            document_data=DocumentData.objects.create(data='documents/in-folder.pdf')
        )
        File.objects.create(
            title='Team file', user=self.user, team=self.team,
            document_data=DocumentData.objects.create(data='documents/team.pdf')
        )

    def test_requires_authentication(self):
        response = self.client.get(reverse('file-list'))

        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_personal_listing(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get(reverse('file-list'), {'order_by': 'title', 'order_direction': 'asc'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['title'] for item in response.data['data']], ['Root one', 'Root two'])
        self.assertEqual(response.data['count'], 2)
        self.assertEqual(response.data['current_page'], 1)
        self.assertEqual(response.data['per_page'], 10)
        self.assertEqual(response.data['total_pages'], 1)
        self.assertEqual(response.data['data'][0]['user']['email'], 'ana@example.com')

    def test_folder_listing(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get(reverse('file-list'), {'folder_id': str(self.folder.id)})

        self.assertEqual([item['title'] for item in response.data['data']], ['In folder'])

    def test_malformed_folder_id(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get(reverse('file-list'), {'folder_id': 'not-a-uuid'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'INVALID_REQUEST')

    def test_invalid_paging_coerced(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get(reverse('file-list'), {'page': '0', 'per_page': '-5'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['current_page'], 1)
        self.assertEqual(response.data['per_page'], 10)

    def test_team_listing(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get(reverse('team-file-list', kwargs={'team_id': self.team.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['title'] for item in response.data['data']], ['Team file'])
        self.assertEqual(response.data['data'][0]['team']['url'], 'label-ops')

    def test_team_listing_for_non_member(self):
        outsider = User.objects.create_user(username='out', email='out@example.com', password='x')
        self.client.force_authenticate(user=outsider)

        response = self.client.get(reverse('team-file-list', kwargs={'team_id': self.team.id}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'Team not found', 'code': 'NOT_FOUND'})

    def test_unknown_period(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get(reverse('file-list'), {'period': 'yesterday'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_create_file(self):
        self.client.force_authenticate(user=self.user)
        document_data = DocumentData.objects.create(data='documents/new.pdf')

        response = self.client.post(
            reverse('team-file-list', kwargs={'team_id': self.team.id}),
            {'title': 'New', 'document_data_id': document_data.id},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['title'], 'New')
        self.assertEqual(response.data['visibility'], DocumentVisibility.EVERYONE)
        self.assertTrue(File.objects.filter(title='New', team=self.team).exists())

    def test_create_file_twice_conflicts(self):
        self.client.force_authenticate(user=self.user)
        document_data = DocumentData.objects.create(data='documents/new.pdf')
        payload = {'title': 'New', 'document_data_id': document_data.id}

        self.client.post(reverse('file-list'), payload, format='json')
        response = self.client.post(reverse('file-list'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['code'], 'ALREADY_EXISTS')

    def test_create_file_validation(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post(reverse('file-list'), {'title': ''}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'INVALID_REQUEST')


class DocumentListViewTestCase(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username='ana', email='ana@example.com', password='x')
        document_data = DocumentData.objects.create(data='documents/contract.pdf')
        Document.objects.create(
            title='Draft contract', user=self.user, status=DocumentStatus.DRAFT, document_data=document_data
        )
        document = Document.objects.create(
            title='Signed contract', user=self.user, status=DocumentStatus.COMPLETED,
            document_data=document_data
        )
        document.recipients.create(email='artist@example.com', name='Artist')
        self.client.force_authenticate(user=self.user)

    def test_status_filter(self):
        response = self.client.get(reverse('document-list'), {'status': 'COMPLETED'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 1)
        item = response.data['data'][0]
        self.assertEqual(item['title'], 'Signed contract')
        self.assertEqual(item['recipients'][0]['email'], 'artist@example.com')

    def test_all_statuses_by_default(self):
        response = self.client.get(reverse('document-list'))

        self.assertEqual(response.data['count'], 2)

    def test_unknown_status(self):
        response = self.client.get(reverse('document-list'), {'status': 'ARCHIVED'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'INVALID_REQUEST')

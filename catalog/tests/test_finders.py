"""
Tests for ISRC and LPM finders.

Tests cover:
- Default ordering (ISRC by id, LPM by product type)
- Search columns, release date periods and artist filters
- Soft delete and team role gate
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone

from api.errors import AppError, AppErrorCode
from api.models import DocumentVisibility, Team, TeamEmail, TeamMember, TeamMemberRole
from catalog.finders import IsrcFinder, LpmFinder
from catalog.models import Artist, IsrcArtist, IsrcSong, Lpm, LpmArtist

User = get_user_model()


class IsrcFinderTestCase(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='ana', email='ana@example.com', password='x')
        self.finder = IsrcFinder()
        now = timezone.now()

        self.artist = Artist.objects.create(name='Delia')
        self.other_artist = Artist.objects.create(name='Smiley')

        self.first = IsrcSong.objects.create(
            user=self.user, isrc='ROA231234501', track_name='Summer Nights',
            title='Summer Nights (Radio Edit)', license='Sunrise Records', date=now - timedelta(days=3)
        )
        self.second = IsrcSong.objects.create(
            user=self.user, isrc='ROA231234502', track_name='Winter Song',
            title='Winter Song', license='Cat Music', date=now - timedelta(days=40)
        )
        self.third = IsrcSong.objects.create(
            user=self.user, isrc='ROA231234503', track_name='Autumn',
            title='Autumn', license='Sunrise Records', date=None
        )
        IsrcSong.objects.create(
            user=self.user, isrc='ROA231234504', track_name='Removed',
            deleted_at=now
        )
        IsrcArtist.objects.create(isrc_song=self.first, artist=self.artist)
        IsrcArtist.objects.create(isrc_song=self.second, artist=self.artist)
        IsrcArtist.objects.create(isrc_song=self.second, artist=self.other_artist)

    def _ids(self, result):
        return [song.id for song in result.data]

    def test_default_order_by_id(self):
        result = self.finder.find(self.user)

        self.assertEqual(self._ids(result), [self.first.id, self.second.id, self.third.id])

    def test_search_columns(self):
        cases = {
            'summer': [self.first.id],
            '1234502': [self.second.id],
            'radio edit': [self.first.id],
            'sunrise': [self.first.id, self.third.id],
        }
        for query, expected in cases.items():
            with self.subTest(query=query):
                self.assertEqual(self._ids(self.finder.find(self.user, query=query)), expected)

    def test_period_on_release_date(self):
        result = self.finder.find(self.user, period='30d')

        self.assertEqual(self._ids(result), [self.first.id])

    def test_artist_filter(self):
        result = self.finder.find(self.user, artist_ids=[self.artist.id])

        # Second song credits both artists and must appear once
        self.assertEqual(self._ids(result), [self.first.id, self.second.id])

    def test_artist_filter_any_of(self):
        result = self.finder.find(self.user, artist_ids=f'{self.other_artist.id}')

        self.assertEqual(self._ids(result), [self.second.id])

    def test_order_by_track_name_desc(self):
        result = self.finder.find(self.user, order_by='track_name', order_direction='desc')

        self.assertEqual(self._ids(result), [self.second.id, self.first.id, self.third.id])

    def test_artists_prefetched(self):
        result = self.finder.find(self.user, query='winter')

        with self.assertNumQueries(0):
            names = sorted(link.artist.name for link in result.data[0].isrc_artists.all())
        self.assertEqual(names, ['Delia', 'Smiley'])


class IsrcFinderPagingTestCase(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='ana', email='ana@example.com', password='x')
        self.finder = IsrcFinder()
        self.songs = [
            IsrcSong.objects.create(
                user=self.user, isrc=f'ROA2412345{index:02d}', track_name=f'Take {index}',
                license='Sunrise Records'
            )
            for index in range(5)
        ]

    def _ids(self, result):
        return [song.id for song in result.data]

    def test_repeated_find_returns_same_page(self):
        first = self.finder.find(self.user, order_by='license', page=2, per_page=2)
        second = self.finder.find(self.user, order_by='license', page=2, per_page=2)

        self.assertEqual(self._ids(first), self._ids(second))
        self.assertEqual(first.count, second.count)
        self.assertEqual(first.count, 5)

    def test_pages_cover_every_row_once_on_tied_sort_key(self):
        seen = []
        for page in (1, 2, 3):
            seen.extend(self._ids(self.finder.find(self.user, order_by='license', page=page, per_page=2)))

        self.assertEqual(len(seen), 5)
        self.assertEqual(sorted(seen), sorted(song.id for song in self.songs))


class IsrcFinderTeamTestCase(TestCase):

    def setUp(self):
        self.admin = User.objects.create_user(username='admin', email='admin@example.com', password='x')
        self.member = User.objects.create_user(username='member', email='member@example.com', password='x')
        self.team_account = User.objects.create_user(username='ops', email='ops@label.com', password='x')
        self.team = Team.objects.create(name='Label Ops', url='label-ops', owner=self.admin)
        TeamEmail.objects.create(team=self.team, email='ops@label.com')
        TeamMember.objects.create(team=self.team, user=self.admin, role=TeamMemberRole.ADMIN)
        TeamMember.objects.create(team=self.team, user=self.member, role=TeamMemberRole.MEMBER)
        self.finder = IsrcFinder()

        IsrcSong.objects.create(user=self.admin, team=self.team, isrc='A1', track_name='Shared')
        IsrcSong.objects.create(
            user=self.admin, team=self.team, isrc='A2', track_name='Admins',
            visibility=DocumentVisibility.ADMIN
        )
        IsrcSong.objects.create(user=self.team_account, isrc='A3', track_name='From team email')
        IsrcSong.objects.create(user=self.admin, isrc='A4', track_name='Personal')

    def _tracks(self, result):
        return [song.track_name for song in result.data]

    def test_admin_listing(self):
        result = self.finder.find(self.admin, self.team.id)

        self.assertEqual(self._tracks(result), ['Shared', 'Admins', 'From team email'])

    def test_member_listing(self):
        result = self.finder.find(self.member, self.team.id)

        self.assertEqual(self._tracks(result), ['Shared', 'From team email'])

    def test_non_member(self):
        outsider = User.objects.create_user(username='out', email='out@example.com', password='x')

        with self.assertRaises(AppError) as cm:
            self.finder.find(outsider, self.team.id)

        self.assertEqual(cm.exception.code, AppErrorCode.NOT_FOUND)


class LpmFinderTestCase(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='ana', email='ana@example.com', password='x')
        self.finder = LpmFinder()
        now = timezone.now()
        self.artist = Artist.objects.create(name='Delia')

        self.single_b = Lpm.objects.create(
            user=self.user, product_id='P-2', product_title='Second Single',
            product_type='Single', original_release_date=now - timedelta(days=2)
        )
        self.album = Lpm.objects.create(
            user=self.user, product_id='P-1', product_title='Debut Album',
            product_type='Album', original_release_date=now - timedelta(days=60)
        )
        self.single_a = Lpm.objects.create(
            user=self.user, product_id='P-3', product_title='Third Single',
            product_type='Single', original_release_date=now - timedelta(days=10)
        )
        LpmArtist.objects.create(lpm=self.album, artist=self.artist)

    def _ids(self, result):
        return [lpm.id for lpm in result.data]

    def test_default_order_by_product_type_then_id(self):
        result = self.finder.find(self.user)

        self.assertEqual(self._ids(result), [self.album.id, self.single_b.id, self.single_a.id])

    def test_search_product_title(self):
        result = self.finder.find(self.user, query='single')

        self.assertEqual(self._ids(result), [self.single_b.id, self.single_a.id])

    def test_period_on_original_release_date(self):
        result = self.finder.find(self.user, period='14d')

        self.assertEqual(self._ids(result), [self.single_b.id, self.single_a.id])

    def test_artist_filter(self):
        result = self.finder.find(self.user, artist_ids=[self.artist.id])

        self.assertEqual(self._ids(result), [self.album.id])

    def test_malformed_artist_ids(self):
        with self.assertRaises(AppError) as cm:
            self.finder.find(self.user, artist_ids='delia')

        self.assertEqual(cm.exception.code, AppErrorCode.INVALID_REQUEST)

    def test_paging(self):
        result = self.finder.find(self.user, page=2, per_page=2)

        self.assertEqual(self._ids(result), [self.single_a.id])
        self.assertEqual(result.count, 3)
        self.assertEqual(result.total_pages, 2)

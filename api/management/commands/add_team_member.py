"""
Django management command to add a user to a team or change their role.

Usage:
    python manage.py add_team_member <team_url> <email> [--role ADMIN|MANAGER|MEMBER]
    python manage.py add_team_member label-ops ana@example.com --role MANAGER
"""

from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model
from api.models import Team, TeamMember, TeamMemberRole

User = get_user_model()


class Command(BaseCommand):
    help = 'Add a user to a team with the given role (updates the role if already a member)'

    def add_arguments(self, parser):
        parser.add_argument('team_url', type=str, help='URL slug of the team')
        parser.add_argument('email', type=str, help='Email address of the user')
        parser.add_argument(
            '--role',
            type=str,
            default=TeamMemberRole.MEMBER,
            choices=TeamMemberRole.values,
            help='Role inside the team (default: MEMBER)'
        )

    def handle(self, *args, **options):
        team_url = options['team_url']
        email = options['email']
        role = options['role']

        try:
            team = Team.objects.get(url=team_url)
        except Team.DoesNotExist:
            raise CommandError(f'Team "{team_url}" does not exist.')

        try:
            user = User.objects.get(email__iexact=email)
        except User.DoesNotExist:
            raise CommandError(f'User with email "{email}" does not exist.')

        member, created = TeamMember.objects.update_or_create(
            team=team,
            user=user,
            defaults={'role': role}
        )

        action = 'Added' if created else 'Updated'
        self.stdout.write(
            self.style.SUCCESS(f'{action} {email} in team "{team.url}" as {member.role}')
        )

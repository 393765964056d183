# Initial migration for teams, team emails, team settings and memberships

from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


VISIBILITY_CHOICES = [
    ('EVERYONE', 'Everyone'),
    ('MANAGER_AND_ABOVE', 'Managers and above'),
    ('ADMIN', 'Admins only'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Team',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Display name of the team', max_length=255)),
                ('url', models.SlugField(help_text="Unique URL slug used in team routes (e.g., 'label-ops')", max_length=100, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('owner', models.ForeignKey(help_text='User who created the team', on_delete=django.db.models.deletion.PROTECT, related_name='owned_teams', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Team',
                'verbose_name_plural': 'Teams',
                'ordering': ['url'],
            },
        ),
        migrations.CreateModel(
            name='TeamEmail',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, max_length=255)),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('team', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='team_email', to='api.team')),
            ],
            options={
                'verbose_name': 'Team Email',
                'verbose_name_plural': 'Team Emails',
            },
        ),
        migrations.CreateModel(
            name='TeamGlobalSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('document_visibility', models.CharField(blank=True, choices=VISIBILITY_CHOICES, help_text="Default visibility for new records. Empty = derived from the creator's role", max_length=20, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('team', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='global_settings', to='api.team')),
            ],
            options={
                'verbose_name': 'Team Global Settings',
                'verbose_name_plural': 'Team Global Settings',
            },
        ),
        migrations.CreateModel(
            name='TeamMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=[('ADMIN', 'Admin'), ('MANAGER', 'Manager'), ('MEMBER', 'Member')], db_index=True, default='MEMBER', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='api.team')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='team_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Team Member',
                'verbose_name_plural': 'Team Members',
                'ordering': ['team', '-created_at'],
                'unique_together': {('team', 'user')},
            },
        ),
    ]

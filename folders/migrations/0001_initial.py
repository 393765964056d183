# Initial migration for folders

import uuid

from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('api', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Folder',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('type', models.CharField(choices=[('DOCUMENT', 'Documents'), ('FILE', 'Files')], db_index=True, default='DOCUMENT', max_length=20)),
                ('visibility', models.CharField(choices=[('EVERYONE', 'Everyone'), ('MANAGER_AND_ABOVE', 'Managers and above'), ('ADMIN', 'Admins only')], db_index=True, default='EVERYONE', max_length=20)),
                ('pinned', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='subfolders', to='folders.folder')),
                ('team', models.ForeignKey(blank=True, help_text='Owning team (empty for personal folders)', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='folders', to='api.team')),
                ('user', models.ForeignKey(help_text='User who created the folder', on_delete=django.db.models.deletion.CASCADE, related_name='folders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Folder',
                'verbose_name_plural': 'Folders',
                'ordering': ['-pinned', 'name'],
                'indexes': [models.Index(fields=['user', 'team'], name='folders_user_team_idx')],
            },
        ),
    ]

# Initial migration for document blobs, documents, recipients and files

from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings

import config.storage_backends
import documents.models


VISIBILITY_CHOICES = [
    ('EVERYONE', 'Everyone'),
    ('MANAGER_AND_ABOVE', 'Managers and above'),
    ('ADMIN', 'Admins only'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('api', '0001_initial'),
        ('folders', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='DocumentData',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('data', models.FileField(help_text='Blob in private storage (S3 when USE_S3)', max_length=500, storage=config.storage_backends.select_private_storage, upload_to='documents/%Y/%m/')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Document Data',
                'verbose_name_plural': 'Document Data',
            },
        ),
        migrations.CreateModel(
            name='Document',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(db_index=True, max_length=255)),
                ('external_id', models.CharField(blank=True, max_length=255, null=True)),
                ('status', models.CharField(choices=[('DRAFT', 'Draft'), ('PENDING', 'Pending'), ('COMPLETED', 'Completed'), ('REJECTED', 'Rejected'), ('ERROR', 'Error')], db_index=True, default='DRAFT', max_length=20)),
                ('visibility', models.CharField(choices=VISIBILITY_CHOICES, db_index=True, default='EVERYONE', max_length=20)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('document_data', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='documents.documentdata')),
                ('folder', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='folders.folder')),
                ('team', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='api.team')),
                ('user', models.ForeignKey(help_text='Sender/owner of the document', on_delete=django.db.models.deletion.CASCADE, related_name='documents', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Document',
                'verbose_name_plural': 'Documents',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['team', 'status'], name='documents_team_status_idx'),
                    models.Index(fields=['user', 'status'], name='documents_user_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Recipient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('email', models.EmailField(db_index=True, max_length=254)),
                ('name', models.CharField(blank=True, max_length=255)),
                ('role', models.CharField(choices=[('SIGNER', 'Signer'), ('APPROVER', 'Approver'), ('VIEWER', 'Viewer'), ('ASSISTANT', 'Assistant'), ('CC', 'CC')], default='SIGNER', max_length=20)),
                ('signing_status', models.CharField(choices=[('NOT_SIGNED', 'Not signed'), ('SIGNED', 'Signed'), ('REJECTED', 'Rejected')], db_index=True, default='NOT_SIGNED', max_length=20)),
                ('signed_at', models.DateTimeField(blank=True, null=True)),
                ('document', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='recipients', to='documents.document')),
            ],
            options={
                'verbose_name': 'Recipient',
                'verbose_name_plural': 'Recipients',
                'ordering': ['document', 'id'],
            },
        ),
        migrations.CreateModel(
            name='File',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(db_index=True, max_length=255)),
                ('qr_token', models.CharField(default=documents.models.generate_qr_token, max_length=64, unique=True)),
                ('visibility', models.CharField(choices=VISIBILITY_CHOICES, db_index=True, default='EVERYONE', max_length=20)),
                ('use_to_chat', models.BooleanField(default=False, help_text='File is made available to the chat assistant')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('document_data', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='file', to='documents.documentdata')),
                ('folder', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='files', to='folders.folder')),
                ('team', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='files', to='api.team')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='files', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'File',
                'verbose_name_plural': 'Files',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['team', 'folder'], name='files_team_folder_idx'),
                    models.Index(fields=['user', 'folder'], name='files_user_folder_idx'),
                ],
            },
        ),
    ]

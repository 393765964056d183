import uuid

from django.db import models
from django.contrib.auth import get_user_model

from api.models import DocumentVisibility
from config.storage_backends import select_private_storage

User = get_user_model()


def generate_qr_token():
    return f"qr_{uuid.uuid4().hex}"


class DocumentStatus(models.TextChoices):
    DRAFT = 'DRAFT', 'Draft'
    PENDING = 'PENDING', 'Pending'
    COMPLETED = 'COMPLETED', 'Completed'
    REJECTED = 'REJECTED', 'Rejected'
    ERROR = 'ERROR', 'Error'


class ExtendedDocumentStatus(models.TextChoices):
    """Listing filter: document statuses plus the INBOX and ALL views."""
    DRAFT = 'DRAFT', 'Draft'
    PENDING = 'PENDING', 'Pending'
    COMPLETED = 'COMPLETED', 'Completed'
    REJECTED = 'REJECTED', 'Rejected'
    ERROR = 'ERROR', 'Error'
    INBOX = 'INBOX', 'Inbox'
    ALL = 'ALL', 'All'


class RecipientRole(models.TextChoices):
    SIGNER = 'SIGNER', 'Signer'
    APPROVER = 'APPROVER', 'Approver'
    VIEWER = 'VIEWER', 'Viewer'
    ASSISTANT = 'ASSISTANT', 'Assistant'
    CC = 'CC', 'CC'


class SigningStatus(models.TextChoices):
    NOT_SIGNED = 'NOT_SIGNED', 'Not signed'
    SIGNED = 'SIGNED', 'Signed'
    REJECTED = 'REJECTED', 'Rejected'


class DocumentData(models.Model):
    """
    Stored blob backing a document or file.
    Deleting the row cascades to the records pointing at it; the blob itself
    is removed explicitly (see folders.services).
    """
    data = models.FileField(
        upload_to='documents/%Y/%m/',
        storage=select_private_storage,
        max_length=500,
        help_text="Blob in private storage (S3 when USE_S3)"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Document Data"
        verbose_name_plural = "Document Data"

    def __str__(self):
        return self.data.name or f"DocumentData {self.pk}"


class Document(models.Model):
    """
    E-signature document, personal or owned by a team.
    Soft-deleted through `deleted_at`.
    """
    title = models.CharField(max_length=255, db_index=True)
    external_id = models.CharField(max_length=255, blank=True, null=True)
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='documents',
        help_text="Sender/owner of the document"
    )
    team = models.ForeignKey(
        'api.Team',
        on_delete=models.CASCADE,
        related_name='documents',
        null=True,
        blank=True
    )
    folder = models.ForeignKey(
        'folders.Folder',
        on_delete=models.CASCADE,
        related_name='documents',
        null=True,
        blank=True
    )
    document_data = models.ForeignKey(
        DocumentData,
        on_delete=models.CASCADE,
        related_name='documents'
    )
    status = models.CharField(
        max_length=20,
        choices=DocumentStatus.choices,
        default=DocumentStatus.DRAFT,
        db_index=True
    )
    visibility = models.CharField(
        max_length=20,
        choices=DocumentVisibility.choices,
        default=DocumentVisibility.EVERYONE,
        db_index=True
    )
    completed_at = models.DateTimeField(null=True, blank=True)
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Document"
        verbose_name_plural = "Documents"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['team', 'status'], name='documents_team_status_idx'),
            models.Index(fields=['user', 'status'], name='documents_user_status_idx'),
        ]

    def __str__(self):
        return self.title


class Recipient(models.Model):
    """Addressee of a document (signer, approver, viewer or CC)."""
    document = models.ForeignKey(
        Document,
        on_delete=models.CASCADE,
        related_name='recipients'
    )
    email = models.EmailField(db_index=True)
    name = models.CharField(max_length=255, blank=True)
    role = models.CharField(
        max_length=20,
        choices=RecipientRole.choices,
        default=RecipientRole.SIGNER
    )
    signing_status = models.CharField(
        max_length=20,
        choices=SigningStatus.choices,
        default=SigningStatus.NOT_SIGNED,
        db_index=True
    )
    signed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = "Recipient"
        verbose_name_plural = "Recipients"
        ordering = ['document', 'id']

    def __str__(self):
        return f"{self.email} ({self.role})"


class File(models.Model):
    """
    Uploaded file record, personal or owned by a team.
    Soft-deleted through `deleted_at`.
    """
    title = models.CharField(max_length=255, db_index=True)
    qr_token = models.CharField(max_length=64, unique=True, default=generate_qr_token)
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='files'
    )
    team = models.ForeignKey(
        'api.Team',
        on_delete=models.CASCADE,
        related_name='files',
        null=True,
        blank=True
    )
    folder = models.ForeignKey(
        'folders.Folder',
        on_delete=models.CASCADE,
        related_name='files',
        null=True,
        blank=True
    )
    document_data = models.OneToOneField(
        DocumentData,
        on_delete=models.CASCADE,
        related_name='file'
    )
    visibility = models.CharField(
        max_length=20,
        choices=DocumentVisibility.choices,
        default=DocumentVisibility.EVERYONE,
        db_index=True
    )
    use_to_chat = models.BooleanField(
        default=False,
        help_text="File is made available to the chat assistant"
    )
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "File"
        verbose_name_plural = "Files"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['team', 'folder'], name='files_team_folder_idx'),
            models.Index(fields=['user', 'folder'], name='files_user_folder_idx'),
        ]

    def __str__(self):
        return self.title

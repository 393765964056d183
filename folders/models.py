import uuid

from django.db import models
from django.contrib.auth import get_user_model

from api.models import DocumentVisibility

User = get_user_model()


class FolderType(models.TextChoices):
    DOCUMENT = 'DOCUMENT', 'Documents'
    FILE = 'FILE', 'Files'


class Folder(models.Model):
    """
    Folder grouping documents or files, personal or owned by a team.
    Folders form a tree through `parent`; records created inside a folder
    take the folder's visibility.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='folders',
        help_text="User who created the folder"
    )
    team = models.ForeignKey(
        'api.Team',
        on_delete=models.CASCADE,
        related_name='folders',
        null=True,
        blank=True,
        help_text="Owning team (empty for personal folders)"
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        related_name='subfolders',
        null=True,
        blank=True
    )
    type = models.CharField(
        max_length=20,
        choices=FolderType.choices,
        default=FolderType.DOCUMENT,
        db_index=True
    )
    visibility = models.CharField(
        max_length=20,
        choices=DocumentVisibility.choices,
        default=DocumentVisibility.EVERYONE,
        db_index=True
    )
    pinned = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Folder"
        verbose_name_plural = "Folders"
        ordering = ['-pinned', 'name']
        indexes = [
            models.Index(fields=['user', 'team'], name='folders_user_team_idx'),
        ]

    def __str__(self):
        return self.name

    def get_descendant_ids(self):
        """Ids of this folder and every folder below it."""
        ids = [self.pk]
        frontier = [self.pk]
        while frontier:
            frontier = list(
                Folder.objects.filter(parent_id__in=frontier).values_list('id', flat=True)
            )
            ids.extend(frontier)
        return ids

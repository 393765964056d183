from django.db import models
from django.contrib.auth import get_user_model

from api.models import DocumentVisibility

User = get_user_model()


class Artist(models.Model):
    """Performing artist credited on ISRC and LPM entries."""
    name = models.CharField(
        max_length=255,
        db_index=True,
        help_text="Artist name as credited"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Artist"
        verbose_name_plural = "Artists"
        ordering = ['name']

    def __str__(self):
        return self.name


class IsrcSong(models.Model):
    """
    ISRC registry entry for a recorded track.
    Identified by ISRC (International Standard Recording Code).
    """
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='isrc_songs'
    )
    team = models.ForeignKey(
        'api.Team',
        on_delete=models.CASCADE,
        related_name='isrc_songs',
        null=True,
        blank=True
    )
    isrc = models.CharField(
        max_length=15,
        blank=True,
        db_index=True,
        help_text="ISRC code (e.g., ROA231234567)"
    )
    track_name = models.CharField(max_length=255, blank=True)
    title = models.CharField(max_length=255, blank=True)
    license = models.CharField(
        max_length=255,
        blank=True,
        help_text="License holder or license type"
    )
    duration = models.CharField(
        max_length=20,
        blank=True,
        help_text="Track duration as delivered (e.g., 03:25)"
    )
    date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Release date of the recording"
    )
    artists = models.ManyToManyField(
        Artist,
        through='IsrcArtist',
        related_name='isrc_songs',
        blank=True
    )
    visibility = models.CharField(
        max_length=20,
        choices=DocumentVisibility.choices,
        default=DocumentVisibility.EVERYONE,
        db_index=True
    )
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "ISRC Song"
        verbose_name_plural = "ISRC Songs"
        ordering = ['id']

    def __str__(self):
        return f"{self.isrc} - {self.track_name or self.title}"


class IsrcArtist(models.Model):
    isrc_song = models.ForeignKey(
        IsrcSong,
        on_delete=models.CASCADE,
        related_name='isrc_artists'
    )
    artist = models.ForeignKey(
        Artist,
        on_delete=models.CASCADE,
        related_name='isrc_credits'
    )

    class Meta:
        unique_together = [('isrc_song', 'artist')]

    def __str__(self):
        return f"{self.artist} on {self.isrc_song}"


class Lpm(models.Model):
    """
    Label product master entry (LPM): a release product as delivered to stores.
    """
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='lpm_entries'
    )
    team = models.ForeignKey(
        'api.Team',
        on_delete=models.CASCADE,
        related_name='lpm_entries',
        null=True,
        blank=True
    )
    product_id = models.CharField(
        max_length=100,
        blank=True,
        db_index=True,
        help_text="Label product id / catalogue number"
    )
    product_title = models.CharField(max_length=255, blank=True)
    product_type = models.CharField(
        max_length=50,
        blank=True,
        help_text="Product type (Single, EP, Album...)"
    )
    product_version = models.CharField(max_length=100, blank=True)
    label_name = models.CharField(max_length=255, blank=True)
    original_release_date = models.DateTimeField(null=True, blank=True)
    artists = models.ManyToManyField(
        Artist,
        through='LpmArtist',
        related_name='lpm_entries',
        blank=True
    )
    visibility = models.CharField(
        max_length=20,
        choices=DocumentVisibility.choices,
        default=DocumentVisibility.EVERYONE,
        db_index=True
    )
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "LPM Entry"
        verbose_name_plural = "LPM Entries"
        ordering = ['product_type', 'id']

    def __str__(self):
        return self.product_title or self.product_id


class LpmArtist(models.Model):
    lpm = models.ForeignKey(
        Lpm,
        on_delete=models.CASCADE,
        related_name='lpm_artists'
    )
    artist = models.ForeignKey(
        Artist,
        on_delete=models.CASCADE,
        related_name='lpm_credits'
    )

    class Meta:
        unique_together = [('lpm', 'artist')]

    def __str__(self):
        return f"{self.artist} on {self.lpm}"

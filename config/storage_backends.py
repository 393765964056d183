"""
Custom storage backends for AWS S3.

This module defines custom storage classes for handling uploaded document
blobs using AWS S3 when USE_S3 is enabled in settings, and the callable
used by FileFields to pick the active backend.
"""

from django.conf import settings
from django.core.files.storage import default_storage
from storages.backends.s3boto3 import S3Boto3Storage


class PrivateMediaStorage(S3Boto3Storage):
    """
    Custom storage backend for private document blobs (contracts, signed PDFs).

    Files stored with this backend are NOT publicly accessible.
    """
    location = getattr(settings, 'AWS_PRIVATE_MEDIA_LOCATION', 'private')
    default_acl = 'private'
    file_overwrite = False
    custom_domain = False


def select_private_storage():
    """Storage for document blobs: S3 when USE_S3, local media otherwise."""
    if getattr(settings, 'USE_S3', False):
        return PrivateMediaStorage()
    return default_storage

"""
Blob store helpers for DocumentData.

The blob lives in the storage configured on DocumentData.data (S3 or local
media); the row only keeps its name.
"""


def blob_exists(document_data):
    name = document_data.data.name
    if not name:
        return False
    return document_data.data.storage.exists(name)


def delete_blob(document_data):
    """Delete the blob from storage. The DocumentData row is left untouched."""
    document_data.data.storage.delete(document_data.data.name)

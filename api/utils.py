"""
Utility functions for field introspection.

These utilities use Django's _meta API for reliable field checking,
avoiding the pitfalls of hasattr() with descriptors and reverse relations.
"""
from django.core.exceptions import FieldDoesNotExist


def has_model_field(model, field_name):
    """
    Check if model has field using _meta (works for FK, M2M, reverse relations).

    This is more reliable than hasattr() because:
    - hasattr() returns True for descriptors that aren't actual fields
    - hasattr() doesn't work consistently with reverse relations
    - _meta.get_field() is the official Django API for field introspection

    Args:
        model: Django model class
        field_name: Name of field to check

    Returns:
        bool: True if field exists on model, False otherwise

    Example:
        >>> has_model_field(File, 'folder')
        True
        >>> has_model_field(IsrcSong, 'folder')
        False
    """
    if not field_name:
        return False
    try:
        model._meta.get_field(field_name)
        return True
    except FieldDoesNotExist:
        return False


def to_csv(value):
    """
    Render a list filter value the way query strings carry it ('1,2,3').
    Strings pass through unchanged; None becomes ''.
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return ','.join(str(item) for item in value)

"""
Base record finder with visibility scoping and pagination.

A finder answers "which page of records may this user see":
- Ownership context: personal or team (api.scoping)
- Visibility predicate: role gate, team email, owner/recipient (api.visibility)
- Filters: soft delete, folder scope, free text, period, id lists (api.filters)
- Ordering: allow-listed column plus an id tie-break for stable pages
- Pagination: coerced page/per_page (api.pagination)

Configuration attributes (override in subclass):
- model: Django model class
- filterset_class: RecordFilterSet subclass for the model
- record_fields: RecordFields describing owner/team/visibility/recipients
- ordering_fields: allow-listed sortable columns
- default_ordering: (column, direction) used when none or an unknown one is requested
- soft_delete_field: timestamp marking deleted rows (None = no soft delete)
- folder_field: FK to Folder (None = model is not foldered)
- default_folder_scope: scope used when folder_id is not passed at all
- select_related_fields / prefetch_related_fields: query optimizations

Example usage:
    class FileFinder(RecordFinder):
        model = File
        filterset_class = FileFilter
        ordering_fields = ['id', 'title', 'created_at', 'updated_at']
        default_ordering = ('created_at', 'desc')
        folder_field = 'folder'
"""
import logging

from .config import RecordsConfig
from .errors import AppError, AppErrorCode
from .pagination import FindResult, coerce_positive_int, paginate
from .scoping import resolve_owner
from .utils import has_model_field, to_csv
from .visibility import RecordFields, build_visibility_q

logger = logging.getLogger(__name__)


class _Sentinel:
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return self.name


# folder_id not passed at all: the finder's default_folder_scope applies
UNSET = _Sentinel('UNSET')
# No folder restriction at all
ANY_FOLDER = _Sentinel('ANY_FOLDER')

ORDER_DIRECTIONS = ('asc', 'desc')


class RecordFinder:
    model = None
    filterset_class = None
    record_fields = RecordFields()
    ordering_fields = []
    default_ordering = ('created_at', 'desc')
    soft_delete_field = 'deleted_at'
    folder_field = None
    default_folder_scope = None
    select_related_fields = []
    prefetch_related_fields = []

    def __init__(self, config=None):
        self.config = config or RecordsConfig()

    def get_queryset(self):
        queryset = self.model.objects.all()
        if self.select_related_fields:
            queryset = queryset.select_related(*self.select_related_fields)
        if self.prefetch_related_fields:
            queryset = queryset.prefetch_related(*self.prefetch_related_fields)
        return queryset

    def find(
        self,
        user,
        team_id=None,
        *,
        page=None,
        per_page=None,
        order_by=None,
        order_direction=None,
        query='',
        period='',
        folder_id=UNSET,
        **filters,
    ):
        """
        Return one page of records visible to user.

        Args:
            user: Acting user
            team_id: Team context, or None for personal records
            page, per_page: Paging inputs, coerced to defaults when invalid
            order_by, order_direction: Sort column and 'asc'/'desc'
            query: Free-text search
            period: '' or one of the configured periods ('7d', '14d', '30d')
            folder_id: UNSET, None (root), ANY_FOLDER, or a folder id
            **filters: Finder specific filters (sender_ids, artist_ids, status)

        Returns:
            FindResult

        Raises:
            AppError(NOT_FOUND): team_id given and user is not a member
            AppError(INVALID_REQUEST): malformed period or id list
        """
        page = coerce_positive_int(page, self.config.default_page)
        per_page = coerce_positive_int(per_page, self.config.default_per_page)

        owner = resolve_owner(user, team_id)

        predicate = self.get_visibility_q(owner, user, filters)
        if predicate is None:
            return FindResult.empty(page, per_page)

        queryset = self.get_queryset().filter(predicate)
        queryset = self.exclude_deleted(queryset)
        queryset = self.filter_folder(queryset, folder_id)
        queryset = self.filter_queryset(queryset, query=query, period=period, filters=filters)
        queryset = queryset.order_by(*self.get_ordering(order_by, order_direction))

        result = paginate(queryset, page, per_page)
        logger.debug(
            f"{self.__class__.__name__}: user={user.pk} team={team_id} "
            f"page={page}/{result.total_pages} count={result.count}"
        )
        return result

    def get_visibility_q(self, owner, user, filters):
        """
        Predicate for records visible in this ownership context.
        Return None to short-circuit to an empty page.
        """
        return build_visibility_q(owner, user, self.record_fields)

    def exclude_deleted(self, queryset):
        if self.soft_delete_field and has_model_field(self.model, self.soft_delete_field):
            return queryset.filter(**{f'{self.soft_delete_field}__isnull': True})
        return queryset

    def filter_folder(self, queryset, folder_id):
        """
        Restrict to a folder.

        - None: root only (no folder)
        - ANY_FOLDER: no restriction
        - UNSET: default_folder_scope
        - anything else: that folder
        """
        if not self.folder_field or not has_model_field(self.model, self.folder_field):
            return queryset

        if folder_id is UNSET:
            folder_id = self.default_folder_scope

        if folder_id is ANY_FOLDER:
            return queryset
        if folder_id is None:
            return queryset.filter(**{f'{self.folder_field}__isnull': True})
        return queryset.filter(**{f'{self.folder_field}_id': folder_id})

    def get_filter_data(self, query, period, filters):
        data = {
            'query': query or '',
            'period': period or '',
        }
        for name, value in filters.items():
            if isinstance(value, (list, tuple, set)):
                data[name] = to_csv(value)
            elif value is not None:
                data[name] = str(value)
        return data

    def filter_queryset(self, queryset, *, query, period, filters):
        if self.filterset_class is None:
            return queryset

        filterset = self.filterset_class(
            data=self.get_filter_data(query, period, filters),
            queryset=queryset,
            config=self.config,
        )
        if not filterset.is_valid():
            errors = '; '.join(
                f"{name}: {' '.join(messages)}" for name, messages in filterset.errors.items()
            )
            raise AppError(AppErrorCode.INVALID_REQUEST, message=f"Invalid filters ({errors})")
        return filterset.qs

    def get_ordering(self, order_by, order_direction):
        """
        Allow-listed column plus 'id' ascending as tie-break.
        Unknown columns fall back to the default ordering.
        """
        default_column, default_direction = self.default_ordering

        if order_by in self.ordering_fields and has_model_field(self.model, order_by):
            column = order_by
            direction = order_direction if order_direction in ORDER_DIRECTIONS else default_direction
        else:
            column, direction = default_column, default_direction

        ordering = [column if direction == 'asc' else f'-{column}']
        if column != 'id':
            ordering.append('id')
        return ordering

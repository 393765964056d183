"""
Visibility predicate builder.

Turns an ownership context (api.scoping) into a Django Q object describing
"records the acting user may see". The predicate has no side effects and can
be combined with any other filter on the same model.

Field configuration mirrors how finders describe their model:
- owner_field: FK to the owning user (default: 'user')
- team_field: FK to the owning team (default: 'team')
- visibility_field: visibility column (default: 'visibility')
- recipient_model / recipient_fk: optional model listing addressed emails
  (e.g. Recipient with FK 'document'); None when the model has no recipients
"""
from dataclasses import dataclass
from typing import Optional

from django.db.models import Exists, OuterRef, Q

from .scoping import PersonalOwner, TeamOwner


def match_nothing():
    """Predicate that never matches. Django short-circuits it to an empty result."""
    return Q(pk__in=[])


@dataclass(frozen=True)
class RecordFields:
    owner_field: str = 'user'
    team_field: str = 'team'
    visibility_field: str = 'visibility'
    recipient_model: Optional[type] = None
    recipient_fk: Optional[str] = None

    def addressed_to(self, email, **recipient_filters):
        """
        Exists() subquery: record has a recipient with this email.

        Extra keyword filters apply to the same recipient row
        (e.g. signing_status=..., role__in=...).
        """
        recipients = self.recipient_model.objects.filter(
            **{self.recipient_fk: OuterRef('pk')},
            email__iexact=email,
            **recipient_filters,
        )
        return Exists(recipients)

    @property
    def has_recipients(self):
        return self.recipient_model is not None


def personal_q(owner, fields):
    """Records the user owns outside of any team."""
    return Q(**{fields.owner_field: owner.user, f'{fields.team_field}__isnull': True})


def team_scope_q(owner, fields):
    """
    Records that belong to the team.

    A record belongs to the team when its team is the team, or when it was
    sent from the team email (owner's email equals the team email).
    """
    q = Q(**{fields.team_field: owner.team})
    if owner.team_email:
        q |= Q(**{f'{fields.owner_field}__email__iexact': owner.team_email})
    return q


def visibility_gate_q(owner, user, fields):
    """
    Role gate for team records.

    Allowed when the record's visibility is within the role's visible levels,
    or the user owns the record, or the user is an addressed recipient.
    A team context without a role matches nothing.
    """
    if owner.role is None:
        return match_nothing()

    capabilities = owner.capabilities
    q = Q(**{f'{fields.visibility_field}__in': sorted(capabilities.visible_levels)})
    q |= Q(**{fields.owner_field: user})
    if fields.has_recipients and user.email:
        q |= fields.addressed_to(user.email)
    return q


def build_visibility_q(owner, user, fields=None):
    """
    Build the full visibility predicate for an ownership context.

    Args:
        owner: PersonalOwner or TeamOwner
        user: Acting user
        fields: RecordFields describing the model (defaults when None)

    Returns:
        Q: Predicate over the model

    Example:
        >>> owner = resolve_owner(user, team_id=3)
        >>> File.objects.filter(build_visibility_q(owner, user))
    """
    fields = fields or RecordFields()

    if isinstance(owner, PersonalOwner):
        return personal_q(owner, fields)

    if isinstance(owner, TeamOwner):
        if owner.role is None:
            return match_nothing()
        return team_scope_q(owner, fields) & visibility_gate_q(owner, user, fields)

    raise TypeError(f"Unsupported owner: {owner!r}")

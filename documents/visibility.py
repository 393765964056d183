"""
Status layer for document listings.

Sits on top of the visibility predicate (api.visibility): a document's status
decides who may list it in addition to the role gate.

Personal context, by status:
- ALL: own personal documents, plus COMPLETED/PENDING documents addressed to the user
- INBOX: non-draft documents where the user is a non-CC recipient who has not signed
- DRAFT / ERROR: own personal documents with that status
- PENDING: own pending documents, plus pending documents the user has signed (non-CC)
- COMPLETED: own completed documents, plus completed documents addressed to the user
- REJECTED: own rejected documents, plus documents the user rejected

Team context, by status (every branch also passes the role gate):
- ALL: team documents, non-draft documents addressed to the team email,
  documents sent by the team email
- INBOX: non-draft documents addressed to the team email and not signed yet
  (non-CC); nothing when the team has no team email
- DRAFT / ERROR: team documents, or documents sent by the team email, with that status
- PENDING: team pending documents, plus pending documents the team email
  signed (non-CC) or sent
- COMPLETED: team, addressed or sent completed documents
- REJECTED: team or sent rejected documents, plus documents the team email rejected

Filters return None when nothing can match; the finder then skips the query.
"""
from django.db.models import Q

from api.visibility import visibility_gate_q
from .models import DocumentStatus, ExtendedDocumentStatus, RecipientRole, SigningStatus


def _not_cc():
    return {'role__in': [role for role in RecipientRole.values if role != RecipientRole.CC]}


def personal_documents_q(status, user, fields):
    """Status filter for a user's personal document listing."""
    owned = Q(user=user, team__isnull=True)

    def addressed(**extra):
        return fields.addressed_to(user.email, **extra)

    if status == ExtendedDocumentStatus.ALL:
        return (
            owned
            | (Q(status=DocumentStatus.COMPLETED) & addressed())
            | (Q(status=DocumentStatus.PENDING) & addressed())
        )

    if status == ExtendedDocumentStatus.INBOX:
        return ~Q(status=DocumentStatus.DRAFT) & addressed(
            signing_status=SigningStatus.NOT_SIGNED, **_not_cc()
        )

    if status in (ExtendedDocumentStatus.DRAFT, ExtendedDocumentStatus.ERROR):
        return owned & Q(status=status)

    if status == ExtendedDocumentStatus.PENDING:
        return Q(status=DocumentStatus.PENDING) & (
            owned | addressed(signing_status=SigningStatus.SIGNED, **_not_cc())
        )

    if status == ExtendedDocumentStatus.COMPLETED:
        return Q(status=DocumentStatus.COMPLETED) & (owned | addressed())

    if status == ExtendedDocumentStatus.REJECTED:
        return Q(status=DocumentStatus.REJECTED) & (
            owned | addressed(signing_status=SigningStatus.REJECTED)
        )

    raise ValueError(f"Unknown document status filter: {status!r}")


def team_documents_q(status, owner, user, fields):
    """Status filter for a team's document listing."""
    gate = visibility_gate_q(owner, user, fields)
    team_email = owner.team_email

    belongs = Q(team=owner.team)
    sent_by_team_email = Q(user__email__iexact=team_email) if team_email else None

    def addressed(**extra):
        return fields.addressed_to(team_email, **extra)

    if status == ExtendedDocumentStatus.ALL:
        q = belongs
        if team_email:
            q |= ~Q(status=DocumentStatus.DRAFT) & addressed()
            q |= sent_by_team_email
        return q & gate

    if status == ExtendedDocumentStatus.INBOX:
        if not team_email:
            return None
        return (
            ~Q(status=DocumentStatus.DRAFT)
            & addressed(signing_status=SigningStatus.NOT_SIGNED, **_not_cc())
            & gate
        )

    if status in (ExtendedDocumentStatus.DRAFT, ExtendedDocumentStatus.ERROR):
        q = belongs
        if team_email:
            q |= sent_by_team_email
        return Q(status=status) & q & gate

    if status == ExtendedDocumentStatus.PENDING:
        q = belongs
        if team_email:
            q |= addressed(signing_status=SigningStatus.SIGNED, **_not_cc())
            q |= sent_by_team_email
        return Q(status=DocumentStatus.PENDING) & q & gate

    if status == ExtendedDocumentStatus.COMPLETED:
        q = belongs
        if team_email:
            q |= addressed()
            q |= sent_by_team_email
        return Q(status=DocumentStatus.COMPLETED) & q & gate

    if status == ExtendedDocumentStatus.REJECTED:
        q = belongs
        if team_email:
            q |= addressed(signing_status=SigningStatus.REJECTED)
            q |= sent_by_team_email
        return Q(status=DocumentStatus.REJECTED) & q & gate

    raise ValueError(f"Unknown document status filter: {status!r}")

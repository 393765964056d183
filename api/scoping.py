"""
Record ownership context.

Every listing or mutation runs either in a personal context or in a team
context. The context is an explicit tagged union so "exactly one owner kind"
is structural:

PersonalOwner: the acting user's own records (team is NULL)
TeamOwner: records of a team the acting user belongs to, together with the
    user's role in that team and the team's email address (if any)
"""
from dataclasses import dataclass
from typing import Optional, Union

from .errors import AppError, AppErrorCode
from .models import Team, TeamMember
from .permissions import permissions_for


@dataclass(frozen=True)
class PersonalOwner:
    user: object

    @property
    def team(self):
        return None


@dataclass(frozen=True)
class TeamOwner:
    team: Team
    role: Optional[str]
    team_email: Optional[str] = None

    @property
    def capabilities(self):
        return permissions_for(self.role)


Owner = Union[PersonalOwner, TeamOwner]


def resolve_owner(user, team_id=None) -> Owner:
    """
    Resolve the ownership context for a request.

    Args:
        user: Acting user
        team_id: Team id, or None for the personal context

    Returns:
        PersonalOwner or TeamOwner

    Raises:
        AppError(NOT_FOUND): If the team does not exist or the user is not a member.
            "No access" is reported as missing rather than as an empty result.
    """
    if team_id is None:
        return PersonalOwner(user=user)

    membership = (
        TeamMember.objects
        .select_related('team', 'team__team_email')
        .filter(team_id=team_id, user=user)
        .first()
    )
    if membership is None:
        raise AppError(AppErrorCode.NOT_FOUND, message='Team not found')

    team = membership.team
    team_email = getattr(team, 'team_email', None)
    return TeamOwner(
        team=team,
        role=membership.role,
        team_email=team_email.email if team_email else None,
    )

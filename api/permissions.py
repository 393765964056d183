"""
Team role capabilities.

A single lookup table maps each TeamMemberRole to the visibility levels
it may see and the folder visibility levels it may delete. Every place that
needs a role decision (record listings, folder deletion, creation defaults)
goes through permissions_for() instead of branching on roles itself.
"""
from dataclasses import dataclass

from .models import DocumentVisibility, TeamMemberRole


@dataclass(frozen=True)
class TeamCapabilities:
    visible_levels: frozenset
    deletable_levels: frozenset

    def can_view(self, visibility):
        return visibility in self.visible_levels

    def can_delete(self, visibility):
        return visibility in self.deletable_levels


NO_CAPABILITIES = TeamCapabilities(visible_levels=frozenset(), deletable_levels=frozenset())

ROLE_CAPABILITIES = {
    TeamMemberRole.ADMIN: TeamCapabilities(
        visible_levels=frozenset({
            DocumentVisibility.EVERYONE,
            DocumentVisibility.MANAGER_AND_ABOVE,
            DocumentVisibility.ADMIN,
        }),
        deletable_levels=frozenset({
            DocumentVisibility.EVERYONE,
            DocumentVisibility.MANAGER_AND_ABOVE,
            DocumentVisibility.ADMIN,
        }),
    ),
    TeamMemberRole.MANAGER: TeamCapabilities(
        visible_levels=frozenset({
            DocumentVisibility.EVERYONE,
            DocumentVisibility.MANAGER_AND_ABOVE,
        }),
        deletable_levels=frozenset({
            DocumentVisibility.EVERYONE,
            DocumentVisibility.MANAGER_AND_ABOVE,
        }),
    ),
    TeamMemberRole.MEMBER: TeamCapabilities(
        visible_levels=frozenset({DocumentVisibility.EVERYONE}),
        deletable_levels=frozenset({DocumentVisibility.EVERYONE}),
    ),
}

# Visibility given to new records when the team has no global default
ROLE_DEFAULT_VISIBILITY = {
    TeamMemberRole.ADMIN: DocumentVisibility.ADMIN,
    TeamMemberRole.MANAGER: DocumentVisibility.MANAGER_AND_ABOVE,
    TeamMemberRole.MEMBER: DocumentVisibility.EVERYONE,
}


def permissions_for(role):
    """
    Return the capability set of a team role.

    Args:
        role: TeamMemberRole value, or None when the user is not a member

    Returns:
        TeamCapabilities: Empty capabilities for None

    Raises:
        ValueError: If role is not a known TeamMemberRole
    """
    if role is None:
        return NO_CAPABILITIES
    if role not in TeamMemberRole.values:
        raise ValueError(f"Unknown team role: {role!r}")
    return ROLE_CAPABILITIES[TeamMemberRole(role)]


def determine_visibility(team_default, role):
    """Team default wins; otherwise the creator's role decides."""
    if team_default:
        return team_default
    return ROLE_DEFAULT_VISIBILITY.get(role, DocumentVisibility.EVERYONE)

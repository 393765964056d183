from django.db import models
from django.contrib.auth import get_user_model

User = get_user_model()


class DocumentVisibility(models.TextChoices):
    """
    Visibility level of a record or folder inside a team.
    Gates which team roles may see it.
    """
    EVERYONE = 'EVERYONE', 'Everyone'
    MANAGER_AND_ABOVE = 'MANAGER_AND_ABOVE', 'Managers and above'
    ADMIN = 'ADMIN', 'Admins only'


class TeamMemberRole(models.TextChoices):
    """Role of a user inside a team, by ascending privilege: MEMBER < MANAGER < ADMIN."""
    ADMIN = 'ADMIN', 'Admin'
    MANAGER = 'MANAGER', 'Manager'
    MEMBER = 'MEMBER', 'Member'


class Team(models.Model):
    """
    Team owning shared records (documents, files, ISRC and LPM entries).
    Lets label departments share records instead of owning them per user.
    """
    name = models.CharField(
        max_length=255,
        help_text="Display name of the team"
    )
    url = models.SlugField(
        max_length=100,
        unique=True,
        db_index=True,
        help_text="Unique URL slug used in team routes (e.g., 'label-ops')"
    )
    owner = models.ForeignKey(
        User,
        on_delete=models.PROTECT,
        related_name='owned_teams',
        help_text="User who created the team"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Team"
        verbose_name_plural = "Teams"
        ordering = ['url']

    def __str__(self):
        return self.name


class TeamEmail(models.Model):
    """
    Address that sends or receives records on behalf of a team.

    Records sent from this address (owner email) or addressed to it
    (recipient email) are attributed to the team.
    """
    team = models.OneToOneField(
        Team,
        on_delete=models.CASCADE,
        related_name='team_email'
    )
    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Team Email"
        verbose_name_plural = "Team Emails"

    def __str__(self):
        return self.email


class TeamGlobalSettings(models.Model):
    """Team-wide defaults applied to newly created records."""
    team = models.OneToOneField(
        Team,
        on_delete=models.CASCADE,
        related_name='global_settings'
    )
    document_visibility = models.CharField(
        max_length=20,
        choices=DocumentVisibility.choices,
        null=True,
        blank=True,
        help_text="Default visibility for new records. Empty = derived from the creator's role"
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Team Global Settings"
        verbose_name_plural = "Team Global Settings"

    def __str__(self):
        return f"{self.team} settings"


class TeamMember(models.Model):
    """
    Membership of a user in a team.
    A user holds exactly one role per team.
    """
    team = models.ForeignKey(
        Team,
        on_delete=models.CASCADE,
        related_name='members'
    )
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='team_memberships'
    )
    role = models.CharField(
        max_length=20,
        choices=TeamMemberRole.choices,
        default=TeamMemberRole.MEMBER,
        db_index=True
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Team Member"
        verbose_name_plural = "Team Members"
        ordering = ['team', '-created_at']
        unique_together = [('team', 'user')]

    def __str__(self):
        return f"{self.user.email} - {self.team} ({self.role})"

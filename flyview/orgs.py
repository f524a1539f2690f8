"""Organization and invitation listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from flyview.models import Organization

_ROW = "{:<20} {:<20} {:<10}\n"
_RULE = "----"


class OrgArgumentError(ValueError):
    """The arguments given to an organization command are incomplete."""


@dataclass
class Invitation:
    """An invitation of a user to an organization."""

    id: str = ""
    email: str = ""
    redeemed: bool = False
    organization: Organization = field(default_factory=Organization)


def format_org(org: Organization, headers: bool) -> str:
    """One organization as a fixed-width row, optionally under a header."""
    text = ""
    if headers:
        text += _ROW.format("Name", "Slug", "Type")
        text += _ROW.format(_RULE, _RULE, _RULE)
    return text + _ROW.format(org.name, org.slug, org.type)


def format_invite(invite: Invitation, headers: bool) -> str:
    """One invitation as a fixed-width row, optionally under a header."""
    text = ""
    if headers:
        text += _ROW.format("Org", "Email", "Redeemed")
        text += _ROW.format(_RULE, _RULE, _RULE)
    redeemed = "true" if invite.redeemed else "false"
    return text + _ROW.format(invite.organization.slug, invite.email, redeemed)


def org_listing(personal: Organization, organizations: Iterable[Organization]) -> str:
    """The personal organization under a header, then every other organization."""
    parts = [format_org(personal, True)]
    parts.extend(format_org(o, False) for o in organizations if o.id != personal.id)
    return "".join(parts)


def invite_target(args: Sequence[str]) -> tuple[str, str] | None:
    """Organization slug and e-mail from arguments; None when both should be prompted for."""
    if len(args) == 0:
        return None
    if len(args) == 2:
        return args[0], args[1]
    raise OrgArgumentError("specify all arguments (or no arguments to be prompted)")
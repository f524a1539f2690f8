"""Choosing organizations, regions, VM sizes and apps from platform listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Sequence

from flyview.models import App, Organization, Region, VMSize

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class SelectionError(LookupError):
    """Nothing in a listing matches what was asked for."""


@dataclass
class AppCondensed:
    """The fields of an app shown by the app listing."""

    id: str = ""
    name: str = ""
    status: str = ""
    deployed: bool = False
    hostname: str = ""
    organization: str = ""
    created_at: datetime = field(default_factory=lambda: _ZERO_TIME)

    @property
    def has_created_at(self) -> bool:
        """Whether a creation time is known for the app."""
        return self.created_at != _ZERO_TIME


def is_interrupt(err) -> bool:
    """True when ``err`` signals that the user interrupted a prompt."""
    if err is None:
        return False
    if isinstance(err, KeyboardInterrupt):
        return True
    return str(err) == "interrupt"


def find_organization(orgs: Iterable[Organization], slug: str) -> Organization:
    """The organization with ``slug``; raises SelectionError if there is none."""
    for org in orgs:
        if org.slug == slug:
            return org
    raise SelectionError(f'organization "{slug}" not found')


def sort_organizations(orgs: Iterable[Organization]) -> list[Organization]:
    """Organizations ordered by their type."""
    return sorted(orgs, key=lambda org: org.type)


def organization_options(orgs: Iterable[Organization]) -> list[str]:
    """Prompt labels of the form ``name (slug)``."""
    return [f"{org.name} ({org.slug})" for org in orgs]


def find_region(regions: Iterable[Region], code: str) -> Region:
    """The region with ``code``; raises SelectionError if there is none."""
    for region in regions:
        if region.code == code:
            return region
    raise SelectionError(f'region "{code}" not found')


def region_options(regions: Iterable[Region]) -> list[str]:
    """Prompt labels of the form ``code (name)``."""
    return [f"{region.code} ({region.name})" for region in regions]


def find_vm_size(sizes: Iterable[VMSize], name: str) -> VMSize:
    """The VM size called ``name``; raises SelectionError if there is none."""
    for size in sizes:
        if size.name == name:
            return size
    raise SelectionError(f'vm size "{name}" not found')


def vm_size_options(sizes: Iterable[VMSize]) -> list[str]:
    """Prompt labels of the form ``name - memoryMB``."""
    return [f"{size.name} - {size.memory_mb}" for size in sizes]


def filter_apps(
    apps: Iterable[App], name_part: str, org_slug: str, status: str
) -> list[AppCondensed]:
    """Apps whose name contains ``name_part`` and that match the org and status given.

    An empty filter value matches every app.
    """
    out = []
    for app in apps:
        if name_part and name_part not in app.name:
            continue
        if org_slug and org_slug != app.organization.slug:
            continue
        if status and status != app.status:
            continue
        created_at = _ZERO_TIME
        if app.deployed and app.current_release is not None:
            created_at = app.current_release.created_at
        out.append(AppCondensed(
            id=app.id,
            name=app.name,
            status=app.status,
            deployed=app.deployed,
            hostname=app.hostname,
            organization=app.organization.slug,
            created_at=created_at,
        ))
    return out


def sort_apps(apps: Sequence[AppCondensed], sort_type: str) -> list[AppCondensed]:
    """Newest first for ``created``; by name for ``name`` or anything else."""
    if sort_type == "created":
        return sorted(apps, key=lambda a: a.created_at, reverse=True)
    return sorted(apps, key=lambda a: a.name)
"""IP address validation and private address listings."""

from __future__ import annotations

import ipaddress
from typing import Iterable

from flyview.models import AllocationStatus, Region

_BACKUP_MARK = "(B)"


class InvalidIPAddressError(ValueError):
    """The text given is not an IP address."""


def validate_ip(address: str):
    """Parse an IPv4 or IPv6 address, raising InvalidIPAddressError if it is not one."""
    if "%" in address:
        raise InvalidIPAddressError(f"Invalid IP address: '{address}'")
    try:
        return ipaddress.ip_address(address)
    except ValueError as exc:
        raise InvalidIPAddressError(f"Invalid IP address: '{address}'") from exc


def region_label(region: str, backup_regions: Iterable[Region]) -> str:
    """Region code, marked when it is one of the backup regions."""
    if any(r.code == region for r in backup_regions):
        return region + _BACKUP_MARK
    return region


def private_ip_rows(
    allocations: Iterable[AllocationStatus], backup_regions: Iterable[Region]
) -> list[list[str]]:
    """Rows of ID, region and private IP for each allocation."""
    backups = list(backup_regions)
    return [
        [alloc.id_short, region_label(alloc.region, backups), alloc.private_ip]
        for alloc in allocations
    ]
"""Machine log lines, listings and the log bus address of an organization."""

from __future__ import annotations

import ipaddress
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

import yaml

from flyview.ansi import Color, colorize, faint, green
from flyview.logs import level_color

_NATS_PORT = 4223


class FlyConfigError(ValueError):
    """The local configuration file cannot provide what is asked of it."""


def machine_level_color(level: str) -> Color:
    """Colour for a machine log level; "warn" falls through to red."""
    return level_color(level)


@dataclass
class NatsLog:
    """One log line published for a machine."""

    provider: str = ""
    instance: str = ""
    app_name: str = ""
    region: str = ""
    host: str = ""
    level: str = ""
    message: str = ""
    timestamp: str = ""

    @classmethod
    def from_json(cls, data) -> "NatsLog":
        """Decode a published log message; malformed JSON raises ValueError."""
        payload = json.loads(data)
        if not isinstance(payload, dict):
            raise ValueError("log message is not a JSON object")

        def section(obj: Any, key: str) -> dict:
            value = obj.get(key) if isinstance(obj, dict) else None
            return value if isinstance(value, dict) else {}

        fly = section(payload, "fly")
        app = section(fly, "app")
        return cls(
            provider=section(payload, "event").get("provider", ""),
            instance=app.get("instance", ""),
            app_name=app.get("name", ""),
            region=fly.get("region", ""),
            host=payload.get("host", ""),
            level=section(payload, "log").get("level", ""),
            message=payload.get("message", ""),
            timestamp=payload.get("timestamp", ""),
        )

    def format(self) -> str:
        """Render the line as it is shown on the terminal, newline included."""
        level = colorize(self.level, machine_level_color(self.level))
        return (
            f"{faint(self.timestamp)} "
            f"{self.provider}[{self.instance}] "
            f"{green(self.region)} "
            f"[{level}] "
            f"{self.message}\n"
        )


def nats_address(peer_ip) -> str:
    """Address of the log bus: the peer's /48 prefix with host part ``::3``."""
    ip = ipaddress.ip_address(peer_ip)
    if isinstance(ip, ipaddress.IPv4Address):
        ip = ipaddress.IPv6Address(b"\x00" * 10 + b"\xff\xff" + ip.packed)
    raw = bytearray(16)
    raw[:6] = ip.packed[:6]
    raw[15] = 3
    return f"nats://[{ipaddress.IPv6Address(bytes(raw))}]:{_NATS_PORT}"


def load_peer_ip(config_text: str, org_slug: str):
    """Read the WireGuard peer address of an organization from YAML config text."""
    try:
        config = yaml.safe_load(config_text)
    except yaml.YAMLError as exc:
        raise FlyConfigError("could not decode fly config yml") from exc
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise FlyConfigError("could not decode fly config yml")

    states = config.get("wire_guard_state") or {}
    if not isinstance(states, dict):
        raise FlyConfigError("could not decode fly config yml")
    if org_slug not in states:
        raise FlyConfigError("could not find org in fly config")

    state = states[org_slug] or {}
    peer = state.get("peer") if isinstance(state, dict) else None
    peer_ip = peer.get("peerip") if isinstance(peer, dict) else None
    if not isinstance(peer_ip, str):
        raise FlyConfigError("could not decode fly config yml")
    try:
        return ipaddress.ip_address(peer_ip)
    except ValueError as exc:
        raise FlyConfigError("could not decode fly config yml") from exc


def _format_created(value) -> str:
    if not isinstance(value, datetime):
        return str(value)
    t = value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    text = t.strftime("%Y-%m-%d %H:%M:%S")
    if t.microsecond:
        text += f".{t.microsecond:06d}".rstrip("0")
    offset_secs = int(t.utcoffset().total_seconds())
    sign = "+" if offset_secs >= 0 else "-"
    offset_secs = abs(offset_secs)
    offset = f"{sign}{offset_secs // 3600:02d}{offset_secs % 3600 // 60:02d}"
    zone = t.tzname() or ""
    if not zone or (zone.startswith("UTC") and zone != "UTC"):
        zone = offset
    return f"{text} {offset} {zone}"


def machine_rows(machines: Iterable[Mapping[str, Any]], include_app: bool) -> list[list[str]]:
    """Table rows for machines: ID, image, created, state, region, name[, app]."""
    rows = []
    for machine in machines:
        row = [
            machine.get("id", ""),
            (machine.get("config") or {}).get("image", ""),
            _format_created(machine.get("created_at", "")),
            machine.get("state", ""),
            machine.get("region", ""),
            machine.get("name", ""),
        ]
        if include_app:
            row.append((machine.get("app") or {}).get("name", ""))
        rows.append(row)
    return rows
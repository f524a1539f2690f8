"""Parsing of machine run and proxy command-line arguments."""

from __future__ import annotations

import re
import shlex
from typing import Any, Iterable, Sequence

_DEFAULT_PROTOCOL = "tcp"
_INTEGER = re.compile(r"[+-]?[0-9]+")


class MachineArgumentError(ValueError):
    """An argument describing a machine could not be understood."""


def _atoi(text: str, what: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise MachineArgumentError(f'{what}: parsing "{text}": invalid syntax')
    return int(text)


def parse_port(spec: str) -> dict[str, Any]:
    """Parse ``edgePort[:machinePort][/protocol[:handler...]]`` into a service."""
    ports_part, *rest = spec.split("/")
    protocol = _DEFAULT_PROTOCOL
    handlers: list[str] = []
    if rest:
        protocol, *handlers = rest[0].split(":")

    port_fields = ports_part.split(":")
    edge_port = _atoi(port_fields[0], "invalid edge port")
    machine_port = edge_port
    if len(port_fields) > 1:
        machine_port = _atoi(port_fields[1], "invalid machine (internal) port")

    return {
        "protocol": protocol,
        "internal_port": machine_port,
        "ports": [{"port": edge_port, "handlers": handlers}],
    }


def parse_volume(spec: str) -> dict[str, Any]:
    """Parse ``<volume>:/path/inside/machine[:<options>]`` into a mount."""
    parts = spec.split(":")
    if len(parts) < 2:
        raise MachineArgumentError(
            f"invalid volume '{spec}', must be in the form <volume>:/path[:<options>]"
        )
    volume_id, path = parts[0], parts[1]
    mount: dict[str, Any] = {"volume": volume_id, "path": path}

    if len(parts) > 2:
        for option in parts[2].split(","):
            key, *values = option.split("=")
            if key == "size":
                value = values[0] if values else ""
                if not _INTEGER.fullmatch(value):
                    raise MachineArgumentError(
                        f"could not parse volume '{volume_id}' size option value "
                        f"'{value}', must be an integer"
                    )
                mount["size_gb"] = int(value)
            elif key == "encrypt":
                mount["encrypted"] = True
    return mount


def build_init(entrypoint: str, cmd: Sequence[str]) -> dict[str, Any]:
    """Build the init section from an entrypoint string and command arguments."""
    init: dict[str, Any] = {}
    if entrypoint:
        try:
            init["entrypoint"] = shlex.split(entrypoint)
        except ValueError as exc:
            raise MachineArgumentError(f"invalid entrypoint: {exc}") from exc
    if cmd:
        init["cmd"] = list(cmd)
    return init


def build_machine_config(
    image: str,
    size: str,
    entrypoint: str,
    cmd: Sequence[str],
    ports: Iterable[str],
    volumes: Iterable[str],
) -> dict[str, Any]:
    """Assemble a machine configuration from its command-line pieces."""
    config: dict[str, Any] = {"image": image}
    if size:
        config["size"] = size
    config["init"] = build_init(entrypoint, cmd)
    config["services"] = [parse_port(p) for p in ports]
    config["mounts"] = [parse_volume(v) for v in volumes]
    return config


def split_proxy_ports(arg: str) -> tuple[str, str]:
    """Split ``local[:remote]`` into local and remote ports."""
    ports = arg.split(":")
    if len(ports) < 2:
        return ports[0], ports[0]
    return ports[0], ports[1]
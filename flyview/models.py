"""Platform records shown by the presenters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _zero_time() -> datetime:
    return _ZERO_TIME


@dataclass
class CheckState:
    name: str = ""
    status: str = ""
    output: str = ""
    service_name: str = ""


@dataclass
class AllocationEvent:
    timestamp: datetime = field(default_factory=_zero_time)
    type: str = ""
    message: str = ""


@dataclass
class LogEntry:
    timestamp: str = ""
    message: str = ""
    level: str = ""
    instance: str = ""
    region: str = ""
    provider: str = ""
    error_code: int = 0
    error_message: str = ""
    request_method: str = ""
    request_id: str = ""
    url: str = ""
    response_status: int = 0


@dataclass
class AllocationStatus:
    id: str = ""
    id_short: str = ""
    version: int = 0
    latest_version: bool = False
    region: str = ""
    status: str = ""
    desired_status: str = ""
    task_name: str = ""
    healthy: bool = False
    failed: bool = False
    canary: bool = False
    transitioning: bool = False
    restarts: int = 0
    private_ip: str = ""
    created_at: datetime = field(default_factory=_zero_time)
    checks: list[CheckState] = field(default_factory=list)
    events: list[AllocationEvent] = field(default_factory=list)
    recent_logs: list[LogEntry] = field(default_factory=list)


@dataclass
class DeploymentStatus:
    id: str = ""
    version: int = 0
    status: str = ""
    description: str = ""
    in_progress: bool = False
    successful: bool = False
    desired_count: int = 0
    placed_count: int = 0
    healthy_count: int = 0
    unhealthy_count: int = 0
    allocations: list[AllocationStatus] = field(default_factory=list)


@dataclass
class Region:
    code: str = ""
    name: str = ""
    gateway_available: bool = False


@dataclass
class Organization:
    id: str = ""
    slug: str = ""
    name: str = ""
    type: str = ""


@dataclass
class User:
    id: str = ""
    name: str = ""
    email: str = ""


@dataclass
class Release:
    id: str = ""
    version: int = 0
    stable: bool = False
    status: str = ""
    reason: str = ""
    description: str = ""
    user: User = field(default_factory=User)
    created_at: datetime = field(default_factory=_zero_time)


@dataclass
class App:
    id: str = ""
    name: str = ""
    status: str = ""
    deployed: bool = False
    hostname: str = ""
    version: int = 0
    organization: Organization = field(default_factory=Organization)
    current_release: Release | None = None


@dataclass
class ServicePort:
    port: int = 0
    handlers: list[str] = field(default_factory=list)


@dataclass
class Service:
    protocol: str = ""
    internal_port: int = 0
    ports: list[ServicePort] = field(default_factory=list)


@dataclass
class IPAddress:
    id: str = ""
    address: str = ""
    type: str = ""
    region: str = ""
    created_at: datetime = field(default_factory=_zero_time)


@dataclass
class AppCompact:
    id: str = ""
    name: str = ""
    status: str = ""
    deployed: bool = False
    hostname: str = ""
    version: int = 0
    organization: Organization = field(default_factory=Organization)
    services: list[Service] = field(default_factory=list)
    ip_addresses: list[IPAddress] = field(default_factory=list)


@dataclass
class AppStatus:
    id: str = ""
    name: str = ""
    status: str = ""
    deployed: bool = False
    hostname: str = ""
    version: int = 0
    organization: Organization = field(default_factory=Organization)
    allocations: list[AllocationStatus] = field(default_factory=list)


@dataclass
class Build:
    id: str = ""
    status: str = ""
    user: User = field(default_factory=User)
    created_at: datetime = field(default_factory=_zero_time)
    updated_at: datetime = field(default_factory=_zero_time)


@dataclass
class AppChange:
    actor_type: str = ""
    status: str = ""
    description: str = ""
    user: User = field(default_factory=User)
    created_at: datetime = field(default_factory=_zero_time)


@dataclass
class AutoscalingRegionConfig:
    code: str = ""
    min_count: int = 0
    weight: int = 0


@dataclass
class Secret:
    name: str = ""
    digest: str = ""
    created_at: datetime = field(default_factory=_zero_time)


@dataclass
class VMSize:
    name: str = ""
    cpu_cores: float = 0.0
    memory_gb: float = 0.0
    memory_mb: int = 0
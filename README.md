# flyview

`flyview` holds the pieces a command line for an application hosting
platform needs to show platform data to people and to read what they
type: record dataclasses, coloured log lines, organization and address
listings, lookups in platform listings, and parsing of the arguments
used to launch machines and open proxies.

It needs Python 3.10 or later and depends only on PyYAML.

## Modules

- `flyview.ansi`: ANSI escape styling. `Color` is an enum of foreground
  colours (`RED`, `GREEN`, `YELLOW`, `BLUE`, `CYAN`); `colorize(text, color)`,
  `bold`, `faint`, `italic`, `green` and `red` wrap text in escape
  sequences followed by a reset.
- `flyview.models`: dataclasses for platform records, among them `App`,
  `AppCompact`, `AppStatus`, `Release`, `Build`, `AppChange`, `User`,
  `Organization`, `AllocationStatus`, `CheckState`, `AllocationEvent`,
  `DeploymentStatus`, `Region`, `VMSize`, `IPAddress`, `Service`,
  `ServicePort`, `Secret`, `AutoscalingRegionConfig` and `LogEntry`.
  Every field has a default; unset timestamps are 0001-01-01 UTC.
- `flyview.logs`: `LogPresenter(remove_newlines, hide_region, hide_alloc_id)`
  with `fprint(out, as_json, entries)`, which writes each `LogEntry` to a
  text stream either as a coloured line (timestamp, provider and
  instance, region, level, then any error, request and response fields
  and the message) or as indented JSON. When an error message is present
  it is shown in place of the message. `level_color(level)` maps
  `debug`, `info` and `warning` to cyan, blue and yellow; everything
  else, `warn` included, is red.
- `flyview.machine_args`: `parse_port("edge[:machine][/protocol[:handler...]]")`
  returns a service mapping (protocol defaults to `tcp`);
  `parse_volume("<volume>:/path[:size=N,encrypt]")` returns a mount
  mapping; `build_init(entrypoint, cmd)` splits the entrypoint the way a
  shell would; `build_machine_config(image, size, entrypoint, cmd, ports, volumes)`
  assembles all of it; `split_proxy_ports("local[:remote]")` returns the
  local and remote ports. Bad input raises `MachineArgumentError`.
- `flyview.machine_logs`: `NatsLog.from_json(data)` decodes a streamed
  machine log message and `NatsLog.format()` renders it as a terminal
  line. `load_peer_ip(config_text, org_slug)` reads an organization's
  WireGuard peer address from YAML configuration text, raising
  `FlyConfigError` when it cannot; `nats_address(peer_ip)` gives the log
  bus URL (the peer's /48 prefix with host part `::3`, port 4223).
  `machine_rows(machines, include_app)` builds table rows from machine
  mappings.
- `flyview.ips`: `validate_ip(address)` parses an IPv4 or IPv6 address
  or raises `InvalidIPAddressError`; `region_label` marks backup regions
  with `(B)`; `private_ip_rows(allocations, backup_regions)` gives rows
  of ID, region and private IP.
- `flyview.selection`: `find_organization`, `find_region` and
  `find_vm_size` raise `SelectionError` when nothing matches;
  `sort_organizations`, `organization_options`, `region_options` and
  `vm_size_options` prepare prompt choices; `filter_apps(apps, name_part,
  org_slug, status)` yields `AppCondensed` records and `sort_apps` orders
  them newest first (`created`) or by name; `is_interrupt(err)` tells a
  user interrupt from other errors.
- `flyview.orgs`: `format_org`, `format_invite` and `org_listing` render
  fixed-width organization and invitation rows; `Invitation` holds an
  invitation; `invite_target(args)` returns the organization slug and
  e-mail, `None` when both are to be prompted for, or raises
  `OrgArgumentError`.

## Example

```python
from flyview.machine_args import parse_port
from flyview.ansi import bold

service = parse_port("80:8080/tcp:http")
print(service["internal_port"])   # 8080
print(bold("Services"))
```

## What it does not do

`flyview` is a library only: it installs no command, talks to no API,
opens no network connection and asks no questions at a prompt. It has
no general table or JSON renderer for records, no relative-time
formatting, no deployment or allocation summaries and no HTTP timing
report; callers build those from the models and helpers above.
import pytest

from flyview.machine_args import (
    MachineArgumentError,
    build_init,
    build_machine_config,
    parse_port,
    parse_volume,
    split_proxy_ports,
)


def test_parse_port_edge_only_defaults_to_tcp():
    service = parse_port("8080")
    assert service == {
        "protocol": "tcp",
        "internal_port": 8080,
        "ports": [{"port": 8080, "handlers": []}],
    }


def test_parse_port_with_machine_port_protocol_and_handlers():
    service = parse_port("443:8080/tcp:tls:http")
    assert service["protocol"] == "tcp"
    assert service["internal_port"] == 8080
    assert service["ports"] == [{"port": 443, "handlers": ["tls", "http"]}]


def test_parse_port_protocol_without_handlers():
    service = parse_port("53/udp")
    assert service["protocol"] == "udp"
    assert service["ports"][0]["handlers"] == []
    assert service["internal_port"] == 53


@pytest.mark.parametrize("spec", ["abc", "", "80x", ":80"])
def test_parse_port_invalid_edge(spec):
    with pytest.raises(MachineArgumentError, match="invalid edge port"):
        parse_port(spec)


def test_parse_port_invalid_machine_port():
    with pytest.raises(MachineArgumentError, match="invalid machine"):
        parse_port("80:abc")


def test_parse_volume_basic():
    assert parse_volume("vol_data:/data") == {"volume": "vol_data", "path": "/data"}


def test_parse_volume_with_options():
    mount = parse_volume("vol_data:/data:size=10,encrypt")
    assert mount["size_gb"] == 10
    assert mount["encrypted"] is True
    assert mount["volume"] == "vol_data"
    assert mount["path"] == "/data"


def test_parse_volume_ignores_unknown_options():
    mount = parse_volume("v:/mnt:color=blue")
    assert set(mount) == {"volume", "path"}


def test_parse_volume_bad_size():
    with pytest.raises(MachineArgumentError, match="could not parse volume 'v' size option value 'big'"):
        parse_volume("v:/mnt:size=big")


def test_parse_volume_missing_path():
    with pytest.raises(MachineArgumentError):
        parse_volume("just-a-volume")


def test_build_init_splits_entrypoint_shell_style():
    init = build_init('/bin/sh -c "echo hi"', ["run", "now"])
    assert init["entrypoint"] == ["/bin/sh", "-c", "echo hi"]
    assert init["cmd"] == ["run", "now"]


def test_build_init_empty():
    assert build_init("", []) == {}


def test_build_init_unbalanced_quote():
    with pytest.raises(MachineArgumentError, match="invalid entrypoint"):
        build_init('sh -c "oops', [])


def test_build_machine_config_assembles_sections():
    config = build_machine_config(
        "registry/app:v1", "shared-cpu-1x", "", ["serve"], ["80:8080"], ["vol:/data"]
    )
    assert config["image"] == "registry/app:v1"
    assert config["size"] == "shared-cpu-1x"
    assert config["init"] == {"cmd": ["serve"]}
    assert config["services"] == [parse_port("80:8080")]
    assert config["mounts"] == [parse_volume("vol:/data")]


def test_build_machine_config_omits_empty_size():
    config = build_machine_config("img", "", "", [], [], [])
    assert "size" not in config
    assert config["services"] == []
    assert config["mounts"] == []
    assert config["init"] == {}


def test_build_machine_config_propagates_errors():
    with pytest.raises(MachineArgumentError):
        build_machine_config("img", "", "", [], ["nope"], [])


def test_split_proxy_ports_single():
    assert split_proxy_ports("5432") == ("5432", "5432")


def test_split_proxy_ports_pair():
    assert split_proxy_ports("15432:5432") == ("15432", "5432")
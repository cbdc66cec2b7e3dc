"""Per-connection interface link mode (access / trunk / routed)."""
from typing import Callable, Optional

from ...config.schema import DeviceType, InterfaceMode, LinkConfig, Vendor
from ..formatting import (
    cisco_vlan_list,
    closer,
    parse_port_range,
    parse_vlan_string,
    port_base,
    to_vlan_list,
)

DEFAULT_ACCESS_VLAN = "1"
DEFAULT_ALLOWED_VLANS = "1-4094"


def link_mode_body(vendor: Vendor, config: LinkConfig) -> list[str]:
    """Mode lines for one port, in configuration order."""
    if config.mode == InterfaceMode.L3:
        return [" no switchport"]

    if config.mode == InterfaceMode.ACCESS:
        vlan = config.access_vlan or DEFAULT_ACCESS_VLAN
        if vendor == Vendor.CISCO:
            return [" switchport mode access", f" switchport access vlan {vlan}"]
        if vendor == Vendor.HUAWEI:
            return [" port link-type access", f" port default vlan {vlan}"]
        if vendor == Vendor.H3C:
            return [f" port access vlan {vlan}"]
        return []

    if config.mode == InterfaceMode.TRUNK:
        native = config.trunk_native_vlan
        allowed = (
            parse_vlan_string(config.trunk_allowed_vlans)
            or parse_vlan_string(DEFAULT_ALLOWED_VLANS)
        )
        if vendor == Vendor.CISCO:
            lines = [" switchport mode trunk"]
            if native:
                lines.append(f" switchport trunk native vlan {native}")
            lines.append(f" switchport trunk allowed vlan {cisco_vlan_list(allowed)}")
            return lines
        if vendor in (Vendor.HUAWEI, Vendor.H3C):
            keyword = "allow-pass" if vendor == Vendor.HUAWEI else "permit"
            lines = [" port link-type trunk"]
            if native:
                lines.append(f" port trunk pvid vlan {native}")
            lines.append(f" port trunk {keyword} vlan {to_vlan_list(allowed)}")
            return lines
        return []

    return []


def generate_link_mode(
    port_name: str,
    vendor: Vendor,
    config: LinkConfig,
    device_type: DeviceType = DeviceType.L3_SWITCH,
    skip: Optional[Callable[[str], bool]] = None,
) -> str:
    """
    Interface block(s) for the local end of a connection.

    Args:
        port_name: Local port name
        vendor: Node vendor
        config: The connection's link config
        device_type: Node device type
        skip: Predicate for port names that must not get a block of their
            own, such as aggregation members

    Returns:
        CLI text, or '' when the port is unconfigured or the vendor has
        no rendering for the mode
    """
    if not port_name or config.mode == InterfaceMode.UNCONFIGURED:
        return ""

    body = link_mode_body(vendor, config)
    if not body:
        return ""

    names = [port_name]
    extra_ports = parse_port_range(config.apply_to_port_range)
    if extra_ports:
        base = port_base(port_name)
        names = [f"{base}{num}" for num in extra_ports]
    if skip is not None:
        names = [name for name in names if not skip(name)]

    lines: list[str] = []
    for name in names:
        lines.append(f"interface {name}")
        lines.extend(body)
        lines.append(closer(vendor))
    return "\n".join(lines)

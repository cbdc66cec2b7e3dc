"""Device script assembly.

generate_all_cli_commands() renders a node's full script: preamble, VLAN
database, then every enabled feature section in dependency order.
generate_config() renders a single feature for preview panels.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from ..config.schema import Connection, Node, Vendor
from ..utils.logging_config import timed, timed_section_sync
from .aggregation import is_aggregated_port, vlan_database_section
from .fragment import Fragment, join_blocks
from .generators import (
    generate_acl,
    generate_dhcp,
    generate_dhcp_relay,
    generate_dhcp_snooping,
    generate_gre,
    generate_ha,
    generate_interface_ip,
    generate_ipsec,
    generate_link_aggregation,
    generate_link_mode,
    generate_mlag,
    generate_nat,
    generate_object_groups,
    generate_port_isolation,
    generate_routing,
    generate_security,
    generate_ssh,
    generate_stacking,
    generate_stp,
    generate_time_ranges,
    generate_vlan_interfaces,
    generate_vrrp,
    generate_wireless,
)

logger = logging.getLogger(__name__)

STACKING_VENDORS = (Vendor.H3C, Vendor.HUAWEI, Vendor.CISCO)
MLAG_VENDORS = (Vendor.H3C, Vendor.HUAWEI)


# --- Single-feature rendering ---

def _acl_with_time_ranges(node: Node) -> Fragment:
    acl = generate_acl(node.vendor, node.device_type, node.config.acl)
    time_ranges = generate_time_ranges(node.vendor, node.device_type, node.config.time_ranges)
    cli = join_blocks(time_ranges.cli, acl.cli).strip()
    return Fragment(cli, acl.explanation or "ACL and Time-Range configuration generated locally.")


def _feature_table() -> dict[str, Callable[[Node], Fragment]]:
    return {
        "Link Aggregation": lambda n: generate_link_aggregation(n.vendor, n.device_type, n.config.link_aggregation),
        "Port Isolation": lambda n: generate_port_isolation(n.vendor, n.device_type, n.config.port_isolation),
        "Stacking (IRF)": lambda n: generate_stacking(n.vendor, n.device_type, n.config.stacking),
        "M-LAG": lambda n: generate_mlag(n.vendor, n.device_type, n.config.mlag),
        "DHCP": lambda n: generate_dhcp(n.vendor, n.device_type, n.config.dhcp),
        "DHCP Relay": lambda n: generate_dhcp_relay(n.vendor, n.device_type, n.config.dhcp_relay),
        "DHCP Snooping": lambda n: generate_dhcp_snooping(n.vendor, n.device_type, n.config.dhcp_snooping),
        "VLAN": lambda n: generate_vlan_interfaces(
            n.vendor, n.device_type, n.config.vlan, n.config.acl, n.config.ipsec
        ),
        "Interface": lambda n: generate_interface_ip(
            n.vendor, n.device_type, n.config.interface_ip, n.config.acl, n.config.ipsec
        ),
        "STP": lambda n: generate_stp(n.vendor, n.device_type, n.config.stp),
        "Routing": lambda n: generate_routing(n.vendor, n.device_type, n.config.routing),
        "VRRP": lambda n: generate_vrrp(n.vendor, n.device_type, n.config.vrrp),
        "HA": lambda n: generate_ha(n.vendor, n.device_type, n.config.ha),
        "ACL": _acl_with_time_ranges,
        "NAT": lambda n: generate_nat(n.vendor, n.device_type, n.config.nat, n.config.acl),
        "Wireless": lambda n: generate_wireless(n.vendor, n.device_type, n.config.wireless),
        "SSH": lambda n: generate_ssh(n.vendor, n.device_type, n.config.ssh),
        "Security": lambda n: generate_security(n.vendor, n.device_type, n.config.security),
        "Object Groups": lambda n: generate_object_groups(n.vendor, n.device_type, n.config.object_groups),
        "IPsec": lambda n: generate_ipsec(n.vendor, n.device_type, n.config.ipsec, n.config.acl),
        "GRE VPN": lambda n: generate_gre(n.vendor, n.device_type, n.config.gre),
    }


FEATURE_GENERATORS = _feature_table()
FEATURES = list(FEATURE_GENERATORS)


def generate_config(node: Node, feature: str) -> Fragment:
    """
    Render one feature of a node.

    Args:
        node: Node to render
        feature: Feature name as listed in FEATURES

    Returns:
        The feature's Fragment; an unknown feature gives a comment line
    """
    producer = FEATURE_GENERATORS.get(feature)
    if producer is None:
        logger.warning(f"generate_config: Unknown feature '{feature}'")
        return Fragment(f"# Feature '{feature}' not implemented for local generation.", "")
    return producer(node)


# --- Full device script ---

@dataclass(frozen=True)
class Section:
    """One headed block of the device script."""
    title: str
    enabled: Callable[[Node], bool]
    render: Callable[[Node, list[Connection]], Fragment]


def _link_modes(node: Node, connections: list[Connection]) -> Fragment:
    """Interface mode blocks for each connected port that is not bundled."""
    blocks: list[str] = []
    for conn in connections:
        port_name = node.port_name(conn.local_port_id(node.id))
        if not port_name:
            continue
        if is_aggregated_port(node, port_name):
            logger.debug(f"{node.id}: {port_name} is an aggregation member, skipping link mode")
            continue
        cli = generate_link_mode(
            port_name, node.vendor, conn.config, node.device_type,
            skip=lambda name: is_aggregated_port(node, name),
        )
        if cli:
            blocks.append(cli)
    return Fragment("\n".join(blocks), "")


def _feature(name: str) -> Callable[[Node, list[Connection]], Fragment]:
    producer = FEATURE_GENERATORS[name]
    return lambda node, _connections: producer(node)


def _time_ranges(node: Node, _connections: list[Connection]) -> Fragment:
    return generate_time_ranges(node.vendor, node.device_type, node.config.time_ranges)


def _acl_only(node: Node, _connections: list[Connection]) -> Fragment:
    return generate_acl(node.vendor, node.device_type, node.config.acl)


def _routing_configured(node: Node) -> bool:
    routing = node.config.routing
    return bool(routing.static_routes) or routing.ospf.enabled


SECTIONS: list[Section] = [
    Section("Stacking (IRF)", lambda n: n.config.stacking.enabled and n.vendor in STACKING_VENDORS,
            _feature("Stacking (IRF)")),
    Section("M-LAG", lambda n: n.config.mlag.enabled and n.vendor in MLAG_VENDORS, _feature("M-LAG")),
    Section("SSH Server", lambda n: n.config.ssh.enabled, _feature("SSH")),
    Section("Time Ranges", lambda n: bool(n.config.time_ranges), _time_ranges),
    Section("Object Groups", lambda n: n.config.object_groups.any_enabled, _feature("Object Groups")),
    Section("ACL", lambda n: n.config.acl.enabled, _acl_only),
    Section("Security", lambda n: n.config.security.zones_enabled or n.config.security.policies_enabled,
            _feature("Security")),
    Section("IPsec", lambda n: n.config.ipsec.enabled, _feature("IPsec")),
    Section("DHCP Server", lambda n: n.config.dhcp.enabled, _feature("DHCP")),
    Section("DHCP Relay", lambda n: n.config.dhcp_relay.enabled, _feature("DHCP Relay")),
    Section("DHCP Snooping", lambda n: n.config.dhcp_snooping.enabled, _feature("DHCP Snooping")),
    Section("VLAN Interfaces", lambda n: n.config.vlan.enabled, _feature("VLAN")),
    Section("Physical Interfaces", lambda n: n.config.interface_ip.enabled, _feature("Interface")),
    Section("Link Aggregation", lambda n: n.config.link_aggregation.enabled, _feature("Link Aggregation")),
    Section("Port Isolation", lambda n: n.config.port_isolation.enabled, _feature("Port Isolation")),
    Section("Interface Link Modes", lambda n: True, _link_modes),
    Section("Spanning Tree Protocol", lambda n: n.config.stp.enabled, _feature("STP")),
    Section("Routing", _routing_configured, _feature("Routing")),
    Section("VRRP", lambda n: n.config.vrrp.enabled, _feature("VRRP")),
    Section("High Availability (HA)", lambda n: n.config.ha.enabled, _feature("HA")),
    Section("NAT", lambda n: n.config.nat.enabled, _feature("NAT")),
    Section("Wireless", lambda n: n.config.wireless.enabled, _feature("Wireless")),
    Section("GRE VPN", lambda n: n.config.gre.enabled, _feature("GRE VPN")),
]


def _preamble(node: Node) -> str:
    if node.vendor in (Vendor.HUAWEI, Vendor.H3C):
        lines = ["system-view"]
        if node.name:
            lines.append(f"sysname {node.name}")
        return "\n".join(lines)
    if node.vendor == Vendor.CISCO:
        lines = ["configure terminal"]
        if node.name:
            lines.append(f"hostname {node.name}")
        return "\n".join(lines)
    return ""


def section_block(title: str, cli: str) -> str:
    """Wrap section text in the uniform header ('' for blank text)."""
    if not cli or not cli.strip():
        return ""
    return f"!\n! {title} Configuration\n!\n{cli.strip()}"


def _render_section(section: Section, node: Node, connections: list[Connection]) -> str:
    with timed_section_sync("section", device_id=node.id, title=section.title):
        try:
            fragment = section.render(node, connections)
        except Exception as e:
            # A broken section must not take the whole script down
            logger.exception(f"{node.id}: {section.title} generation failed")
            return f"# {section.title} generation failed: {e}"
    return fragment.cli


@timed("compile_device")
def generate_all_cli_commands(node: Optional[Node], connections: Optional[Iterable[Connection]] = None) -> str:
    """
    Render the complete configuration script for a node.

    Args:
        node: Node to compile
        connections: Topology connections; those not touching the node are ignored

    Returns:
        The script text ('' for no node). The same input always gives
        the same output.
    """
    if node is None:
        return ""
    connections = list(connections or [])
    logger.debug(f"Compiling {node.id} ({node.vendor.value}, {len(connections)} connections)")

    blocks = [vlan_database_section(node, connections)]
    for section in SECTIONS:
        if not section.enabled(node):
            continue
        blocks.append(section_block(section.title, _render_section(section, node, connections)))

    # The preamble runs straight into the first block; blocks are blank-line separated
    return join_blocks(_preamble(node), join_blocks(*blocks), sep="\n").strip()

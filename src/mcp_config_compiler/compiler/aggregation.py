"""Cross-feature VLAN aggregation and the aggregated-port conflict check.

VLAN ids can be referenced by VLAN interfaces, aggregation groups and any
topology link touching the node. They are all declared once, up front, in
the VLAN database section.
"""
import logging
from typing import Iterable, Optional

from ..config.schema import Connection, InterfaceMode, Node, Vendor
from .formatting import MAX_VLAN, MIN_VLAN, closer, contiguous_runs, parse_vlan_string

logger = logging.getLogger(__name__)

VLAN_DATABASE_HEADER = "!\n! VLAN Database\n!"


def _add_id(acc: set[int], raw: str) -> None:
    try:
        vid = int(str(raw).strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric VLAN id {raw!r}")
        return
    if MIN_VLAN <= vid <= MAX_VLAN:
        acc.add(vid)


def _add_mode_vlans(acc: set[int], mode: str, access: str, native: str, allowed: str) -> None:
    if mode == InterfaceMode.ACCESS.value and access:
        _add_id(acc, access)
    elif mode == InterfaceMode.TRUNK.value:
        if native:
            _add_id(acc, native)
        acc.update(parse_vlan_string(allowed))


def collect_vlan_ids(node: Node, connections: Iterable[Connection], acc: Optional[set[int]] = None) -> list[int]:
    """
    Gather every VLAN id the node needs declared.

    Scans VLAN interfaces, then enabled aggregation groups, then each
    connection touching the node.

    Args:
        node: Node being compiled
        connections: All topology connections; others' links are ignored
        acc: Accumulator to fill; a fresh set when omitted

    Returns:
        Sorted unique VLAN ids
    """
    acc = set() if acc is None else acc
    config = node.config

    for svi in config.vlan.vlan_interfaces:
        if svi.vlan_id:
            _add_id(acc, svi.vlan_id)

    if config.link_aggregation.enabled:
        for group in config.link_aggregation.groups:
            _add_mode_vlans(acc, group.interface_mode, group.access_vlan,
                            group.trunk_native_vlan, group.trunk_allowed_vlans)

    for conn in connections:
        if not conn.touches(node.id):
            continue
        link = conn.config
        mode = link.mode.value if isinstance(link.mode, InterfaceMode) else str(link.mode)
        _add_mode_vlans(acc, mode, link.access_vlan, link.trunk_native_vlan, link.trunk_allowed_vlans)

    return sorted(acc)


def _descriptions(node: Node) -> dict[int, str]:
    result: dict[int, str] = {}
    for svi in node.config.vlan.vlan_interfaces:
        if svi.vlan_id and svi.vlan_description:
            try:
                result[int(svi.vlan_id)] = svi.vlan_description
            except ValueError:
                continue
    return result


def render_vlan_database(vendor: Vendor, vlan_ids: list[int], descriptions: Optional[dict[int, str]] = None) -> str:
    """
    Render VLAN declarations for a vendor.

    Cisco declares each VLAN with its name inline. Huawei uses one
    `vlan batch`; H3C declares maximal contiguous runs as `vlan a to b`.
    Both then emit a second pass of description blocks.

    Returns:
        Declaration text without the section header ('' for no ids or an
        unsupported vendor)
    """
    if not vlan_ids:
        return ""
    descriptions = descriptions or {}
    lines: list[str] = []

    if vendor == Vendor.CISCO:
        for vid in vlan_ids:
            lines.append(f"vlan {vid}")
            if vid in descriptions:
                lines.append(f" name {descriptions[vid]}")
            lines.append("exit")
        return "\n".join(lines)

    if vendor == Vendor.HUAWEI:
        lines.append("vlan batch " + " ".join(str(vid) for vid in vlan_ids))
    elif vendor == Vendor.H3C:
        for start, end in contiguous_runs(vlan_ids):
            lines.append(f"vlan {start}" if start == end else f"vlan {start} to {end}")
    else:
        return ""

    described = [vid for vid in vlan_ids if vid in descriptions]
    if described:
        lines.append("")
    for vid in described:
        lines.append(f"vlan {vid}")
        lines.append(f" description {descriptions[vid]}")
        lines.append(closer(vendor))
    return "\n".join(lines)


def vlan_database_section(node: Node, connections: Iterable[Connection]) -> str:
    """Headed VLAN database block for the node, or '' when no VLAN is referenced."""
    vlan_ids = collect_vlan_ids(node, connections, set())
    body = render_vlan_database(node.vendor, vlan_ids, _descriptions(node))
    if not body:
        return ""
    logger.debug(f"{node.id}: declaring {len(vlan_ids)} VLANs")
    return f"{VLAN_DATABASE_HEADER}\n{body}"


def is_aggregated_port(node: Node, port_name: str) -> bool:
    """True when the port is a member of an enabled aggregation group."""
    if not port_name or not node.config.link_aggregation.enabled:
        return False
    return node.config.link_aggregation.is_member(port_name)

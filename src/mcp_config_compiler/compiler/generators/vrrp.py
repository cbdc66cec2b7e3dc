"""VRRP groups per interface."""
from ...config.schema import DeviceType, Vendor
from ...config.services import VRRPConfig, VRRPGroup
from ..fragment import CliBuilder, Fragment, unsupported


def _cisco_group(group: VRRPGroup, out: CliBuilder) -> None:
    gid = group.group_id
    out.add(f" vrrp {gid} ip {group.virtual_ip}", f"Virtual gateway {group.virtual_ip} for group {gid}.")
    if group.priority:
        out.add(f" vrrp {gid} priority {group.priority}")
    if group.preempt:
        delay = group.preempt_delay or "0"
        if delay != "0":
            out.add(f" vrrp {gid} preempt delay minimum {delay}", f"Takes over as master after {delay}s.")
        else:
            out.add(f" vrrp {gid} preempt", "Takes over as master when it has the higher priority.")
    else:
        out.add(f" no vrrp {gid} preempt", "Never preempts the current master.")
    if group.advertisement_interval:
        out.add(f" vrrp {gid} timers advertise {group.advertisement_interval}")
    if group.auth_key and group.auth_type == "simple":
        out.add(f" vrrp {gid} authentication text {group.auth_key}")
    elif group.auth_key and group.auth_type == "md5":
        out.add(f" vrrp {gid} authentication md5 key-string {group.auth_key}")
    if group.description:
        out.add(f" vrrp {gid} description {group.description}")


def _vrp_group(vendor: Vendor, group: VRRPGroup, out: CliBuilder) -> None:
    prefix = f" vrrp vrid {group.group_id}"
    out.add(
        f"{prefix} virtual-ip {group.virtual_ip}",
        f"Virtual gateway {group.virtual_ip} for group {group.group_id}.",
    )
    if group.priority:
        out.add(f"{prefix} priority {group.priority}")
    if group.preempt:
        delay = group.preempt_delay or "0"
        timer = "timer " if vendor == Vendor.HUAWEI else ""
        out.add(f"{prefix} preempt-mode {timer}delay {delay}", f"Preempts after a {delay}s delay.")
    else:
        out.add(f" undo vrrp vrid {group.group_id} preempt-mode", "Never preempts the current master.")
    if group.advertisement_interval:
        out.add(f"{prefix} timer advertise {group.advertisement_interval}")
    if group.auth_key and group.auth_type == "simple":
        out.add(f"{prefix} authentication-mode simple plain {group.auth_key}")
    elif group.auth_key and group.auth_type == "md5":
        out.add(f"{prefix} authentication-mode md5 {group.auth_key}")
    if group.description:
        out.add(f"{prefix} description {group.description}")


def generate_vrrp(vendor: Vendor, device_type: DeviceType, config: VRRPConfig) -> Fragment:
    """
    Generate VRRP groups grouped by interface.

    Groups without an id or virtual IP are skipped, as are interfaces
    left with no groups.
    """
    if not config.enabled:
        return Fragment.empty("VRRP is disabled.")
    if vendor not in (Vendor.CISCO, Vendor.HUAWEI, Vendor.H3C):
        return unsupported("VRRP", vendor)

    out = CliBuilder()
    for iface in config.interfaces:
        groups = [g for g in iface.groups if g.group_id and g.virtual_ip]
        if not iface.interface_name or not groups:
            continue
        out.blank()
        out.add(f"interface {iface.interface_name}")
        for group in groups:
            if vendor == Vendor.CISCO:
                _cisco_group(group, out)
            else:
                _vrp_group(vendor, group, out)
        if vendor == Vendor.CISCO:
            out.add(" no shutdown")
            out.add("exit")
        else:
            out.add("quit")

    if not len(out):
        return Fragment.empty("No VRRP groups configured.")
    return out.build("VRRP configuration generated locally.")

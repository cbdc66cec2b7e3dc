"""Link aggregation: Port-channel, Eth-Trunk and Bridge/Route-Aggregation."""
from ...config.schema import DeviceType, Vendor
from ...config.switching import AggregationGroup, LinkAggregationConfig
from ..fragment import CliBuilder, Fragment, unsupported
from ..formatting import cisco_vlan_list, is_default, parse_vlan_string, to_vlan_list

DEFAULT_LACP_PRIORITY = "32768"
DEFAULT_PREEMPT_DELAY = "30"


def aggregate_interface_name(vendor: Vendor, group: AggregationGroup) -> str:
    """Logical interface name for a group on the given vendor."""
    if vendor == Vendor.CISCO:
        return f"Port-channel{group.group_id}"
    if vendor == Vendor.HUAWEI:
        return f"Eth-Trunk{group.group_id}"
    if group.interface_mode == "l3":
        return f"Route-Aggregation{group.group_id}"
    return f"Bridge-Aggregation{group.group_id}"


def _cisco(group: AggregationGroup, glob: CliBuilder, agg: CliBuilder, members: CliBuilder) -> None:
    if group.load_balance_algorithm:
        glob.add(
            f"port-channel load-balance {group.load_balance_algorithm}",
            "Selects the hash used to spread traffic over members.",
        )

    agg.add(f"interface {aggregate_interface_name(Vendor.CISCO, group)}")
    if group.description:
        agg.add(f" description {group.description}")
    if group.interface_mode == "l3":
        agg.add(" no switchport", "Makes the port-channel a routed interface.")
    elif group.interface_mode == "access" and group.access_vlan:
        agg.add(" switchport mode access")
        agg.add(f" switchport access vlan {group.access_vlan}")
    elif group.interface_mode == "trunk":
        agg.add(" switchport mode trunk")
        if group.trunk_native_vlan:
            agg.add(f" switchport trunk native vlan {group.trunk_native_vlan}")
        allowed = parse_vlan_string(group.trunk_allowed_vlans)
        if allowed:
            agg.add(f" switchport trunk allowed vlan {cisco_vlan_list(allowed)}")
    agg.add("exit")

    for name in group.member_names:
        members.add(f"interface {name}")
        members.add(
            f" channel-group {group.group_id} mode {group.mode}",
            f"Bundles {name} into Port-channel{group.group_id}.",
        )
        members.add(" no shutdown")
        members.add("exit")


def _huawei(group: AggregationGroup, glob: CliBuilder, agg: CliBuilder, members: CliBuilder) -> None:
    lacp = group.mode == "lacp-static"
    system_mode = group.huawei_lacp_priority_mode == "system-priority"
    if lacp:
        if system_mode:
            glob.add("lacp priority-command-mode system-priority")
        if not is_default(group.system_priority, DEFAULT_LACP_PRIORITY):
            keyword = "lacp system-priority" if system_mode else "lacp priority"
            glob.add(f"{keyword} {group.system_priority}", "Sets the LACP system priority.")

    agg.add(f"interface {aggregate_interface_name(Vendor.HUAWEI, group)}")
    if group.mode == "manual":
        agg.add(" mode manual load-balance", "Static aggregation without LACP.")
    elif lacp:
        agg.add(" mode lacp-static", "Negotiates membership with LACP.")
    if group.load_balance_algorithm:
        agg.add(f" load-balance {group.load_balance_algorithm}")
    if group.description:
        agg.add(f' description "{group.description}"')
    if lacp:
        if group.preempt_enabled:
            agg.add(" lacp preempt enable")
            if not is_default(group.preempt_delay, DEFAULT_PREEMPT_DELAY):
                agg.add(f" lacp preempt delay {group.preempt_delay}")
        else:
            agg.add(" undo lacp preempt enable")
        if not is_default(group.timeout, "slow"):
            agg.add(f" lacp timeout {group.timeout}")
    if group.interface_mode == "l3":
        agg.add(" undo portswitch")
    elif group.interface_mode == "access" and group.access_vlan:
        agg.add(" port link-type access")
        agg.add(f" port default vlan {group.access_vlan}")
    elif group.interface_mode == "trunk":
        agg.add(" port link-type trunk")
        if group.trunk_native_vlan:
            agg.add(f" port trunk pvid vlan {group.trunk_native_vlan}")
        allowed = parse_vlan_string(group.trunk_allowed_vlans)
        if allowed:
            agg.add(f" port trunk allow-pass vlan {to_vlan_list(allowed)}")
    agg.add("quit")

    for member in group.members:
        if not member.name:
            continue
        members.add(f"interface {member.name}")
        if lacp and not is_default(member.port_priority, DEFAULT_LACP_PRIORITY):
            members.add(f" lacp priority {member.port_priority}")
        members.add(f" eth-trunk {group.group_id}", f"Adds {member.name} to Eth-Trunk{group.group_id}.")
        members.add("quit")


def _h3c(group: AggregationGroup, glob: CliBuilder, agg: CliBuilder, members: CliBuilder) -> None:
    dynamic = group.mode == "dynamic"
    if dynamic and not is_default(group.system_priority, DEFAULT_LACP_PRIORITY):
        glob.add(f"lacp system-priority {group.system_priority}", "Sets the LACP system priority.")
    if group.load_balance_algorithm:
        glob.add(f"link-aggregation global load-sharing mode {group.load_balance_algorithm}")

    agg.add(f"interface {aggregate_interface_name(Vendor.H3C, group)}")
    if group.description:
        agg.add(f' description "{group.description}"')
    if group.interface_mode == "access" and group.access_vlan:
        agg.add(f" port access vlan {group.access_vlan}")
    elif group.interface_mode == "trunk":
        agg.add(" port link-type trunk")
        if group.trunk_native_vlan:
            agg.add(f" port trunk pvid vlan {group.trunk_native_vlan}")
        allowed = parse_vlan_string(group.trunk_allowed_vlans)
        if allowed:
            agg.add(f" port trunk permit vlan {to_vlan_list(allowed)}")
    if group.mode in ("dynamic", "static"):
        agg.add(f" link-aggregation mode {group.mode}")
    agg.add("quit")

    for member in group.members:
        if not member.name:
            continue
        members.add(f"interface {member.name}")
        members.add(
            f" port link-aggregation group {group.group_id}",
            f"Adds {member.name} to aggregation group {group.group_id}.",
        )
        if dynamic:
            if not is_default(member.port_priority, DEFAULT_LACP_PRIORITY):
                members.add(f" link-aggregation port-priority {member.port_priority}")
            if member.lacp_mode == "passive":
                members.add(" lacp mode passive")
            else:
                members.add(" undo lacp mode")
            if member.lacp_period == "short":
                members.add(" lacp period short")
        members.add("quit")


_RENDERERS = {
    Vendor.CISCO: _cisco,
    Vendor.HUAWEI: _huawei,
    Vendor.H3C: _h3c,
}


def generate_link_aggregation(
    vendor: Vendor,
    device_type: DeviceType,
    config: LinkAggregationConfig,
) -> Fragment:
    """
    Generate aggregation groups.

    Each group renders as global settings, the aggregate interface and
    then its member ports; groups without an id or members are skipped.
    """
    if not config.enabled:
        return Fragment.empty("Link aggregation is disabled.")
    render = _RENDERERS.get(vendor)
    if render is None:
        return unsupported("Link Aggregation", vendor)

    out = CliBuilder()
    for group in config.groups:
        if not group.group_id or not group.member_names:
            continue
        glob, agg, members = CliBuilder(), CliBuilder(), CliBuilder()
        render(group, glob, agg, members)
        for part in (glob, agg, members):
            if len(part):
                out.blank()
                out.extend(part)

    if not len(out):
        return Fragment.empty("No link aggregation groups configured.")
    return out.build("Link Aggregation configuration generated.")

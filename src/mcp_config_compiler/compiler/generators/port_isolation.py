"""Port isolation groups (Huawei/H3C port-isolate)."""
from ...config.schema import DeviceType, Vendor
from ...config.switching import PortIsolationConfig
from ..fragment import CliBuilder, Fragment, unsupported
from ..formatting import vrp_vlan_list

CISCO_PVLAN_GUIDANCE = [
    "Port isolation maps to Private VLANs (PVLANs) on Cisco devices.",
    "There is no direct equivalent of port-isolate; a typical PVLAN layout is:",
    "vlan 100",
    " private-vlan isolated",
    "vlan 300",
    " private-vlan primary",
    " private-vlan association 100",
    "interface GigabitEthernet0/1",
    " switchport mode private-vlan host",
    " switchport private-vlan host-association 300 100",
]


def generate_port_isolation(
    vendor: Vendor,
    device_type: DeviceType,
    config: PortIsolationConfig,
) -> Fragment:
    """Generate isolation groups and their member interfaces."""
    if not config.enabled or not config.groups:
        return Fragment.empty("Port Isolation is disabled or no groups are configured.")

    out = CliBuilder()
    if vendor == Vendor.HUAWEI:
        if config.mode == "all":
            out.add("port-isolate mode all", "Isolates ports at both layer 2 and layer 3.")
        excluded = vrp_vlan_list(config.excluded_vlans)
        if excluded:
            out.add(
                f"port-isolate exclude vlan {excluded}",
                "These VLANs are not subject to isolation.",
            )
        # Huawei has no group object; interfaces are enabled per group id
        by_group: dict[str, list[str]] = {}
        for group in config.groups:
            by_group.setdefault(group.group_id, []).extend(group.interfaces)
        for group_id, interfaces in by_group.items():
            for name in interfaces:
                if not name:
                    continue
                out.add(f"interface {name}")
                out.add(f" port-isolate enable group {group_id}", f"Isolates {name} in group {group_id}.")
                out.add("quit")

    elif vendor == Vendor.H3C:
        members = CliBuilder()
        for group in config.groups:
            out.add(f"port-isolate group {group.group_id}", f"Creates isolation group {group.group_id}.")
            community = vrp_vlan_list(group.community_vlans)
            if community:
                out.add(f" community-vlan vlan {community}")
            out.add("quit")
            out.blank()
            for name in group.interfaces:
                if not name:
                    continue
                members.add(f"interface {name}")
                members.add(f" port-isolate enable group {group.group_id}")
                members.add("quit")
        out.extend(members)

    elif vendor == Vendor.CISCO:
        for line in CISCO_PVLAN_GUIDANCE:
            out.comment(line)
        out.note("Cisco output is guidance only; no commands are applied.")

    else:
        return unsupported("Port Isolation", vendor)

    if not len(out):
        return Fragment.empty("No isolated interfaces configured.")
    return out.build("Port Isolation configuration generated.")

"""Spanning tree: mode, bridge priority, MSTP region and per-port settings."""
from ...config.schema import DeviceType, Vendor
from ...config.switching import STPConfig, STPPortConfig
from ..fragment import CliBuilder, Fragment, unsupported
from ..formatting import cisco_vlan_list, parse_vlan_string, to_range_syntax, vrp_vlan_list

DEFAULT_BRIDGE_PRIORITY = "32768"

CISCO_MODES = {"stp": "pvst", "pvst": "pvst", "rstp": "rapid-pvst", "mstp": "mst"}
CISCO_PATHCOST = {"dot1t": "long", "dot1d-1998": "short", "legacy": "short"}


def _root_or_priority(prefix: str, root_bridge: str, priority: str, default: str = "") -> list[str]:
    if root_bridge in ("primary", "secondary"):
        return [f"{prefix} root {root_bridge}"]
    if priority and priority != default:
        return [f"{prefix} priority {priority}"]
    return []


def _cisco_vlans(raw: str) -> str:
    return cisco_vlan_list(parse_vlan_string(raw))


def _cisco(config: STPConfig, out: CliBuilder) -> None:
    mode = CISCO_MODES.get(config.mode, "rapid-pvst")
    mst = mode == "mst"
    out.add(f"spanning-tree mode {mode}", f"Runs spanning tree in {mode} mode.")
    if config.path_cost_standard in CISCO_PATHCOST:
        out.add(f"spanning-tree pathcost method {CISCO_PATHCOST[config.path_cost_standard]}")

    if mst:
        region = config.mstp_region
        out.add("spanning-tree mst configuration", "Enters MST region configuration.")
        if region.region_name:
            out.add(f" name {region.region_name}")
        if region.revision_level:
            out.add(f" revision {region.revision_level}")
        for inst in config.mstp_instances:
            vlans = _cisco_vlans(inst.vlan_list)
            if inst.instance_id and vlans:
                out.add(f" instance {inst.instance_id} vlan {vlans}")
        out.add("exit")
        for inst in config.mstp_instances:
            if inst.instance_id:
                for line in _root_or_priority(f"spanning-tree mst {inst.instance_id}", inst.root_bridge, inst.priority):
                    out.add(line)
    else:
        if config.pvst_vlans:
            for entry in config.pvst_vlans:
                vlans = _cisco_vlans(entry.vlan_list)
                if vlans:
                    prefix = f"spanning-tree vlan {vlans}"
                    for line in _root_or_priority(prefix, entry.root_bridge, entry.priority):
                        out.add(line)
        else:
            for line in _root_or_priority(
                "spanning-tree vlan 1-4094", config.root_bridge, config.priority, DEFAULT_BRIDGE_PRIORITY
            ):
                out.add(line, "Sets the bridge priority for all VLANs.")

    timer_prefix = "spanning-tree mst" if mst else "spanning-tree vlan 1-4094"
    for value, name in (
        (config.hello_time, "hello-time"),
        (config.forward_delay, "forward-time"),
        (config.max_age, "max-age"),
    ):
        if value:
            out.add(f"{timer_prefix} {name} {value}")

    for port in config.port_configs:
        _cisco_port(port, mst, out)


def _cisco_port(port: STPPortConfig, mst: bool, out: CliBuilder) -> None:
    if not port.interface_name:
        return
    body = CliBuilder()
    if port.edge_port:
        body.add(" spanning-tree portfast", "Edge port: forwards immediately, for host-facing ports.")
    if port.bpdu_guard:
        body.add(" spanning-tree bpduguard enable", "Shuts the port if a BPDU arrives.")
    cost = port.path_cost or port.stp_cost
    if cost:
        body.add(f" spanning-tree cost {cost}")
    if port.port_priority:
        body.add(f" spanning-tree port-priority {port.port_priority}")
    if mst:
        for item in port.mstp_instance_costs:
            if item.instance_list and item.cost:
                body.add(f" spanning-tree mst {item.instance_list} cost {item.cost}")
        for item in port.mstp_instance_priorities:
            if item.instance_list and item.priority:
                body.add(f" spanning-tree mst {item.instance_list} port-priority {item.priority}")
    else:
        for item in port.pvst_vlan_costs:
            vlans = _cisco_vlans(item.vlan_list)
            if vlans and item.cost:
                body.add(f" spanning-tree vlan {vlans} cost {item.cost}")
    if not len(body):
        return
    out.add(f"interface {port.interface_name}")
    out.extend(body)
    out.add("exit")


def _vrp(vendor: Vendor, config: STPConfig, out: CliBuilder) -> None:
    """Huawei and H3C share the stp command family."""
    mode = config.mode
    if mode == "pvst" and vendor == Vendor.HUAWEI:
        mode = "vbst"
    mstp = mode == "mstp"
    out.add(f"stp mode {mode}", f"Runs spanning tree in {mode} mode.")
    if config.path_cost_standard:
        out.add(f"stp pathcost-standard {config.path_cost_standard}")

    if mstp:
        region = config.mstp_region
        out.add("stp region-configuration", "Enters MST region configuration.")
        if region.region_name:
            out.add(f" region-name {region.region_name}")
        if region.revision_level:
            out.add(f" revision-level {region.revision_level}")
        if region.vlan_mapping_mode == "modulo" and region.modulo_value:
            out.add(f" vlan-mapping modulo {region.modulo_value}", "Maps VLANs to instances by modulo.")
        else:
            for inst in config.mstp_instances:
                vlans = vrp_vlan_list(inst.vlan_list)
                if inst.instance_id and vlans:
                    out.add(f" instance {inst.instance_id} vlan {vlans}")
        out.add(" active region-configuration", "Activates the region settings.")
        out.add("quit")
        for inst in config.mstp_instances:
            if inst.instance_id:
                for line in _root_or_priority(f"stp instance {inst.instance_id}", inst.root_bridge, inst.priority):
                    out.add(line)
    elif mode in ("pvst", "vbst") and config.pvst_vlans:
        for entry in config.pvst_vlans:
            vlans = vrp_vlan_list(entry.vlan_list)
            if vlans:
                prefix = f"stp vlan {vlans}"
                for line in _root_or_priority(prefix, entry.root_bridge, entry.priority):
                    out.add(line)
    else:
        for line in _root_or_priority("stp", config.root_bridge, config.priority, DEFAULT_BRIDGE_PRIORITY):
            out.add(line, "Sets the bridge priority.")

    for value, name in (
        (config.hello_time, "hello"),
        (config.forward_delay, "forward-delay"),
        (config.max_age, "max-age"),
    ):
        if value:
            out.add(f"stp timer {name} {value}")

    edged = " stp edged-port enable" if vendor == Vendor.HUAWEI else " stp edged-port"
    for port in config.port_configs:
        if not port.interface_name:
            continue
        body = CliBuilder()
        if port.edge_port:
            body.add(edged, "Edge port: forwards immediately, for host-facing ports.")
        if port.bpdu_guard:
            body.add(" stp bpdu-protection", "Shuts the port if a BPDU arrives.")
        cost = port.path_cost or port.stp_cost
        if cost:
            body.add(f" stp cost {cost}")
        if port.port_priority:
            body.add(f" stp port priority {port.port_priority}")
        for item in port.mstp_instance_costs:
            if item.instance_list and item.cost:
                body.add(f" stp instance {to_range_syntax(item.instance_list)} cost {item.cost}")
        for item in port.mstp_instance_priorities:
            if item.instance_list and item.priority:
                body.add(f" stp instance {to_range_syntax(item.instance_list)} port priority {item.priority}")
        for item in port.pvst_vlan_costs:
            vlans = vrp_vlan_list(item.vlan_list)
            if vlans and item.cost:
                body.add(f" stp vlan {vlans} cost {item.cost}")
        if not len(body):
            continue
        out.add(f"interface {port.interface_name}")
        out.extend(body)
        out.add("quit")


def generate_stp(vendor: Vendor, device_type: DeviceType, config: STPConfig) -> Fragment:
    """
    Generate spanning tree configuration.

    Bridge priority is only emitted when it differs from 32768 or when a
    root role is requested; ports without settings produce no block.
    """
    if not config.enabled:
        return Fragment.empty("STP is disabled.")

    out = CliBuilder()
    if vendor == Vendor.CISCO:
        _cisco(config, out)
    elif vendor in (Vendor.HUAWEI, Vendor.H3C):
        _vrp(vendor, config, out)
    else:
        return unsupported("STP", vendor)
    return out.build("STP configuration generated locally.")

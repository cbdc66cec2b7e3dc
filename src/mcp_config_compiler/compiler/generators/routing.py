"""Static routes and OSPF."""
from ...config.schema import DeviceType, Vendor
from ...config.services import OSPFArea, OSPFConfig, RoutingConfig, StaticRoute
from ..fragment import CliBuilder, Fragment, unsupported

SUPPORTED = (Vendor.CISCO, Vendor.HUAWEI, Vendor.H3C)


def _static_route(vendor: Vendor, route: StaticRoute) -> str:
    if vendor == Vendor.CISCO:
        line = f"ip route {route.network} {route.subnet_mask} {route.next_hop}"
        return f"{line} {route.distance}" if route.distance else line
    line = f"ip route-static {route.network} {route.subnet_mask} {route.next_hop}"
    return f"{line} preference {route.distance}" if route.distance else line


def _stub_keyword(area: OSPFArea) -> str:
    """'stub' / 'nssa' (with no-summary) for a non-backbone special area, else ''."""
    if area.is_backbone or area.area_type not in ("stub", "nssa"):
        return ""
    return f"{area.area_type} no-summary" if area.no_summary else area.area_type


def _cisco_ospf(ospf: OSPFConfig, out: CliBuilder) -> None:
    out.add(f"router ospf {ospf.process_id}", f"Starts OSPF process {ospf.process_id}.")
    if ospf.router_id:
        out.add(f" router-id {ospf.router_id}")
    for area in ospf.areas:
        for net in area.networks:
            if net.network:
                out.add(
                    f" network {net.network} {net.wildcard_mask} area {area.area_id}",
                    f"Runs OSPF on {net.network} in area {area.area_id}.",
                )
        stub = _stub_keyword(area)
        if stub:
            out.add(f" area {area.area_id} {stub}")
        if area.area_type in ("stub", "nssa") and area.default_cost:
            out.add(f" area {area.area_id} default-cost {area.default_cost}")
    if ospf.redistribute_static:
        out.add(" redistribute static subnets")
    if ospf.redistribute_connected:
        out.add(" redistribute connected subnets")
    if ospf.default_route:
        out.add(" default-information originate", "Advertises a default route into OSPF.")
    out.add("exit")


def _vrp_ospf(ospf: OSPFConfig, out: CliBuilder) -> None:
    line = f"ospf {ospf.process_id}"
    if ospf.router_id:
        line += f" router-id {ospf.router_id}"
    out.add(line, f"Starts OSPF process {ospf.process_id}.")
    if ospf.redistribute_static:
        out.add(" import-route static")
    if ospf.redistribute_connected:
        out.add(" import-route direct")
    if ospf.default_route:
        out.add(" default-route-advertise", "Advertises a default route into OSPF.")
    for area in ospf.areas:
        out.add(f" area {area.area_id}")
        stub = _stub_keyword(area)
        if stub:
            out.add(f"  {stub}")
        if area.area_type in ("stub", "nssa") and area.default_cost:
            out.add(f"  default-cost {area.default_cost}")
        for net in area.networks:
            if net.network:
                out.add(
                    f"  network {net.network} {net.wildcard_mask}",
                    f"Runs OSPF on {net.network} in area {area.area_id}.",
                )
        out.add(" quit")
    out.add("quit")


def generate_routing(vendor: Vendor, device_type: DeviceType, config: RoutingConfig) -> Fragment:
    """Generate static routes, then the OSPF process and per-interface DR priorities."""
    if not config.static_routes and not config.ospf.enabled:
        return Fragment.empty("No static routes and OSPF is disabled.")
    if vendor not in SUPPORTED:
        return unsupported("Routing", vendor)

    out = CliBuilder()
    for route in config.static_routes:
        if route.network and route.subnet_mask and route.next_hop:
            out.add(
                _static_route(vendor, route),
                f"Routes {route.network}/{route.subnet_mask} via {route.next_hop}.",
            )

    ospf = config.ospf
    if ospf.enabled:
        out.blank()
        if vendor == Vendor.CISCO:
            _cisco_ospf(ospf, out)
        else:
            _vrp_ospf(ospf, out)
        for iface in ospf.interface_configs:
            if not (iface.interface_name and iface.priority):
                continue
            out.add(f"interface {iface.interface_name}")
            if vendor == Vendor.CISCO:
                out.add(f" ip ospf priority {iface.priority}", "DR election priority.")
                out.add("exit")
            else:
                out.add(f" ospf dr-priority {iface.priority}", "DR election priority.")
                out.add("quit")

    if not len(out):
        return Fragment.empty("No static routes and OSPF is disabled.")
    return out.build("Routing configuration generated locally.")

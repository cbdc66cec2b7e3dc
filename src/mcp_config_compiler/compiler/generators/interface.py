"""Routed interface generators: VLAN interfaces (SVIs) and physical IP ports.

Both share the same body: description, address, DHCP server linkage,
packet-filter ACLs resolved by id, IPsec policy binding and NAT flags.
A reference to a missing ACL or IPsec policy drops that line.
"""
import logging
from typing import Optional, Union

from ...config.schema import DeviceType, Vendor
from ...config.security import ACL, ACLsConfig, IPsecConfig
from ...config.switching import (
    InterfaceIPConfig,
    InterfacePoolConfig,
    PhysicalInterfaceIPConfig,
    VLANConfig,
    VLANInterface,
)
from ..fragment import CliBuilder, Fragment, unsupported

logger = logging.getLogger(__name__)

SVI_PREFIX = {
    Vendor.CISCO: "Vlan",
    Vendor.HUAWEI: "Vlanif",
    Vendor.H3C: "Vlan-interface",
}

RoutedInterface = Union[VLANInterface, PhysicalInterfaceIPConfig]


def _acl_ref(vendor: Vendor, acl: ACL) -> str:
    if vendor == Vendor.CISCO:
        return acl.name or acl.number
    return f"name {acl.name}" if acl.name else acl.number


def _filter_line(vendor: Vendor, acl: ACL, direction: str) -> str:
    ref = _acl_ref(vendor, acl)
    if vendor == Vendor.CISCO:
        return f" ip access-group {ref} {'in' if direction == 'inbound' else 'out'}"
    if vendor == Vendor.HUAWEI:
        return f" traffic-filter {direction} acl {ref}"
    return f" packet-filter {ref} {direction}"


def _lease_nonzero(pool: InterfacePoolConfig) -> bool:
    return any((v or "0") != "0" for v in (pool.lease_days, pool.lease_hours, pool.lease_minutes))


def interface_body(
    vendor: Vendor,
    item: RoutedInterface,
    acls: ACLsConfig,
    ipsec: IPsecConfig,
    description: str = "",
) -> CliBuilder:
    """Body lines of a routed interface, without the enter/leave lines."""
    body = CliBuilder()

    if description:
        body.add(f" description {description}", "Sets the interface description.")
    if item.ip_address and item.subnet_mask:
        body.add(
            f" ip address {item.ip_address} {item.subnet_mask}",
            f"Assigns {item.ip_address}/{item.subnet_mask} to the interface.",
        )

    if item.enable_dhcp:
        if vendor == Vendor.HUAWEI:
            if item.dhcp_mode == "global" and item.selected_pool:
                body.add(" dhcp select global", f"Serves DHCP from global pool {item.selected_pool}.")
            elif item.dhcp_mode == "interface":
                body.add(" dhcp select interface", "Serves DHCP from an interface address pool.")
                pool = item.interface_pool_config
                if pool and pool.dns_server:
                    body.add(f" dhcp server dns-list {pool.dns_server}")
                if pool and _lease_nonzero(pool):
                    body.add(
                        f" dhcp server lease day {pool.lease_days or 0} "
                        f"hour {pool.lease_hours or 0} minute {pool.lease_minutes or 0}"
                    )
        elif vendor == Vendor.H3C:
            if item.dhcp_mode == "global" and item.selected_pool:
                body.add(" dhcp select server", "Puts the interface in DHCP server mode.")
                body.add(
                    f" dhcp server apply ip-pool {item.selected_pool}",
                    f"Binds pool {item.selected_pool} to the interface.",
                )
        else:
            body.note("Cisco pools are matched by subnet; no interface binding is needed.")

    for acl_id, direction in (
        (item.packet_filter_inbound_acl_id, "inbound"),
        (item.packet_filter_outbound_acl_id, "outbound"),
    ):
        acl = acls.find(acl_id)
        if acl is None:
            if acl_id:
                logger.debug(f"ACL {acl_id} not found; {direction} filter omitted")
            continue
        body.add(_filter_line(vendor, acl, direction), f"Filters {direction} traffic with ACL {acl.name or acl.number}.")

    if ipsec.enabled and item.ipsec_policy_id:
        policy = ipsec.find_policy(item.ipsec_policy_id)
        if policy:
            line = {
                Vendor.CISCO: f" crypto map {policy.name}",
                Vendor.HUAWEI: f" ipsec policy {policy.name}",
                Vendor.H3C: f" ipsec apply policy {policy.name}",
            }[vendor]
            body.add(line, f"Applies IPsec policy {policy.name}.")

    if vendor == Vendor.H3C:
        if item.nat_static_enable:
            body.add(" nat static enable", "Activates static NAT rules on this interface.")
        if item.nat_hairpin_enable:
            body.add(" nat hairpin enable", "Lets internal hosts reach mapped servers by public address.")
    if vendor == Vendor.HUAWEI and item.huawei_nat_enable:
        body.add(" nat enable", "Enables NAT on the interface.")

    return body


def _wrap(vendor: Vendor, name: str, body: CliBuilder, out: CliBuilder) -> None:
    out.add(f"interface {name}", f"Enters interface {name}.")
    out.extend(body)
    if vendor == Vendor.CISCO:
        out.add(" no shutdown")
        out.add("exit")
    else:
        out.add("quit")


def generate_vlan_interfaces(
    vendor: Vendor,
    device_type: DeviceType,
    config: VLANConfig,
    acls: Optional[ACLsConfig] = None,
    ipsec: Optional[IPsecConfig] = None,
) -> Fragment:
    """
    Generate SVI blocks.

    VLAN declarations live in the VLAN database section; this only
    configures interfaces that have an address.
    """
    if not config.enabled:
        return Fragment.empty("VLAN interfaces are disabled.")
    if vendor not in SVI_PREFIX:
        return unsupported("VLAN interfaces", vendor)
    acls = acls or ACLsConfig()
    ipsec = ipsec or IPsecConfig()

    out = CliBuilder()
    for svi in config.vlan_interfaces:
        if not (svi.vlan_id and svi.ip_address and svi.subnet_mask):
            continue
        name = f"{SVI_PREFIX[vendor]}{svi.vlan_id}"
        body = interface_body(vendor, svi, acls, ipsec, svi.interface_description)
        _wrap(vendor, name, body, out)

    if not len(out):
        return Fragment.empty("No VLAN interface has an IP address.")
    return out.build("VLAN interface configuration generated.")


def generate_interface_ip(
    vendor: Vendor,
    device_type: DeviceType,
    config: InterfaceIPConfig,
    acls: Optional[ACLsConfig] = None,
    ipsec: Optional[IPsecConfig] = None,
) -> Fragment:
    """Generate routed physical interface blocks; empty bodies are skipped."""
    if not config.enabled:
        return Fragment.empty("Physical interface IP is disabled.")
    if vendor not in SVI_PREFIX:
        return unsupported("Physical interface IP", vendor)
    acls = acls or ACLsConfig()
    ipsec = ipsec or IPsecConfig()

    out = CliBuilder()
    for iface in config.interfaces:
        if not iface.interface_name:
            continue
        body = interface_body(vendor, iface, acls, ipsec, iface.description)
        if not len(body):
            continue
        _wrap(vendor, iface.interface_name, body, out)

    if not len(out):
        return Fragment.empty("No physical interface carries IP settings.")
    return out.build("Physical interface IP configuration generated.")

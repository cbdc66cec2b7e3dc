"""NAT: H3C address/server groups, static NAT, global policy and nat server; Huawei nat-policy."""
from typing import Optional

from ...config.schema import DeviceType, Vendor
from ...config.security import (
    ACLsConfig,
    H3CGlobalNatRule,
    H3CNat,
    HuaweiNat,
    HuaweiNATServer,
    NATConfig,
    NATPortMappingRule,
    NATStaticRule,
)
from ..fragment import CliBuilder, Fragment, unsupported

LOAD_BALANCING = "load-balancing"
ACL_BASED = "acl-based"
PORTED_PROTOCOLS = ("tcp", "udp", "sctp")


# --- Huawei ---

def _huawei_server(server: HuaweiNATServer, device_type: DeviceType) -> str:
    line = f"nat server name {server.name}"
    if server.zone and device_type == DeviceType.FIREWALL:
        line += f" zone {server.zone}"
    if server.protocol and server.protocol != "any":
        line += f" protocol {server.protocol}"

    needs_port = server.protocol in PORTED_PROTOCOLS
    line += " global"
    if server.global_address_type == "interface":
        if server.global_interface:
            line += f" interface {server.global_interface}"
    else:
        for part in (server.global_address, server.global_address_end):
            if part:
                line += f" {part}"
    if needs_port:
        for part in (server.global_port, server.global_port_end):
            if part:
                line += f" {part}"

    line += " inside"
    for part in (server.inside_host_address, server.inside_host_address_end):
        if part:
            line += f" {part}"
    if needs_port:
        for part in (server.inside_host_port, server.inside_host_port_end):
            if part:
                line += f" {part}"

    if server.no_reverse:
        line += " no-reverse"
    if server.route:
        line += " route"
    if server.disabled:
        line += " nat-disable"
    if server.description:
        line += f' description "{server.description}"'
    return line


def _huawei(nat: HuaweiNat, device_type: DeviceType, out: CliBuilder) -> None:
    pools = [p for p in nat.address_pools if p.group_name]
    if pools:
        out.comment("Source NAT Address Pools")
    for pool in pools:
        header = f"nat address-group {pool.group_name}"
        if pool.group_number:
            header += f" {pool.group_number}"
        out.add(header, f"Creates NAT address pool {pool.group_name}.")
        for section in pool.sections:
            if not section.start_address:
                continue
            line = " section"
            if section.section_id:
                line += f" {section.section_id}"
            line += f" {section.start_address}"
            if section.end_address:
                line += f" {section.end_address}"
            out.add(line, f"Pool range {section.start_address} to {section.end_address or section.start_address}.")
        if pool.mode:
            out.add(f" mode {pool.mode}")
        if pool.route_enable:
            out.add(" route enable", "Advertises a blackhole route for the pool.")
        out.add("quit")
        out.blank()

    if nat.rules:
        out.blank()
        out.comment("Source NAT Policy")
        out.add("nat-policy", "Enters the NAT policy view.")
        for rule in nat.rules:
            if not rule.rule_name:
                continue
            out.add(f" rule name {rule.rule_name}", f"NAT policy rule {rule.rule_name}.")
            if rule.source_address and rule.source_mask:
                out.add(f"  source-address {rule.source_address} {rule.source_mask}")
            if rule.destination_address and rule.destination_mask:
                out.add(f"  destination-address {rule.destination_address} {rule.destination_mask}")
            action = f"  action {rule.action}"
            if rule.action == "source-nat":
                if rule.easy_ip:
                    action += " easy-ip"
                elif rule.nat_address_group:
                    action += f" address-group {rule.nat_address_group}"
            out.add(action)
        out.add("quit")

    servers = [s for s in nat.servers if s.name]
    if servers:
        out.blank()
        out.comment("Destination NAT (NAT Server)")
    for server in servers:
        out.add(_huawei_server(server, device_type), f"Destination NAT for internal server {server.name}.")


# --- H3C ---

def _static_rule(rule: NATStaticRule, acls: ACLsConfig) -> str:
    """Render one static NAT rule, or '' when its type's fields are incomplete."""
    line = f"nat static {rule.direction}"
    outbound = rule.direction == "outbound"
    if rule.type == "one-to-one":
        if not (rule.local_ip and rule.global_ip):
            return ""
        line += f" {rule.local_ip} {rule.global_ip}" if outbound else f" {rule.global_ip} {rule.local_ip}"
    elif rule.type == "net-to-net":
        if outbound and rule.local_start_ip and rule.local_end_ip and rule.global_network and rule.global_mask:
            line += f" net-to-net {rule.local_start_ip} {rule.local_end_ip} global {rule.global_network} {rule.global_mask}"
        elif not outbound and rule.global_start_ip and rule.global_end_ip and rule.local_network and rule.local_mask:
            line += f" net-to-net {rule.global_start_ip} {rule.global_end_ip} local {rule.local_network} {rule.local_mask}"
        else:
            return ""
    elif rule.type == "address-group":
        if not (rule.local_address_group and rule.global_address_group):
            return ""
        first, second = rule.local_address_group, rule.global_address_group
        if not outbound:
            first, second = second, first
        line += f" object-group {first} object-group {second}"
    else:
        return ""

    acl = acls.find(rule.acl_id)
    if acl is not None:
        line += f" acl {acl.number}"
    if rule.reversible:
        line += " reversible"
    return line


def _ip_match(keyword: str, kind: str, value: str, out: CliBuilder) -> None:
    if kind == "any" or not value:
        return
    if kind == "object-group":
        out.add(f"  {keyword} object-group-name {value}")
    elif kind in ("host", "subnet"):
        out.add(f"  {keyword} {kind} {value}")


def _snat_action(rule: H3CGlobalNatRule) -> str:
    action = rule.snat_action
    if action == "easy-ip":
        return "  action snat easy-ip" + (" port-preserved" if rule.snat_port_preserved else "")
    if action == "static" and rule.snat_static_global_value:
        return f"  action snat static {rule.snat_static_global_value}"
    if action in ("pat", "no-pat") and rule.snat_address_group:
        line = f"  action snat address-group {rule.snat_address_group}"
        if action == "no-pat":
            line += " no-pat"
            if rule.snat_reversible:
                line += " reversible"
        elif rule.snat_port_preserved:
            line += " port-preserved"
        return line
    if action == "no-nat":
        return "  action snat no-nat"
    return ""


def _global_policy(nat: H3CNat, device_type: DeviceType, out: CliBuilder) -> None:
    rules = [r for r in nat.global_policy.rules if r.name]
    if not (nat.global_policy.enabled and rules):
        return
    # routers have no security zones
    zoned = device_type != DeviceType.ROUTER

    out.add("nat global-policy", "Enters the NAT global policy view.")
    for rule in rules:
        out.add(f" rule name {rule.name}", f"Global NAT rule {rule.name}.")
        if rule.description:
            out.add(f'  description "{rule.description}"')
        if zoned and rule.source_zone:
            out.add(f"  source-zone {rule.source_zone}")
        if zoned and rule.destination_zone:
            out.add(f"  destination-zone {rule.destination_zone}")
        _ip_match("source-ip", rule.source_ip_type, rule.source_ip_value, out)
        _ip_match("destination-ip", rule.destination_ip_type, rule.destination_ip_value, out)
        if rule.service_type == "object-group" and rule.service_value:
            out.add(f"  service object-group-name {rule.service_value}")

        snat = _snat_action(rule)
        if snat:
            out.add(snat)
        if rule.dnat_action == "static" and rule.dnat_local_address:
            dnat = f"  action dnat ip-address {rule.dnat_local_address}"
            if rule.dnat_local_port:
                dnat += f" port {rule.dnat_local_port}"
            out.add(dnat)
        elif rule.dnat_action == "no-nat":
            out.add("  action dnat no-nat")

        if rule.counting_enabled:
            out.add("  counting enable")
        if not rule.enabled:
            out.add("  disable")
    out.add("quit")


def _nat_server(rule: NATPortMappingRule, acls: ACLsConfig) -> str:
    line = " nat server"
    if rule.protocol and rule.protocol != "all":
        line += f" protocol {rule.protocol}"

    line += " global"
    if rule.mapping_type == ACL_BASED:
        acl = acls.find(rule.acl_id)
        if acl is not None:
            line += f" {acl.number}"
    else:
        line += " current-interface" if rule.global_address_type == "interface" else f" {rule.global_address}"
        if rule.global_end_address:
            line += f" {rule.global_end_address}"
        if rule.global_port:
            line += f" {rule.global_port}"
        if rule.global_start_port and rule.global_end_port:
            line += f" {rule.global_start_port} {rule.global_end_port}"

    line += " inside"
    if rule.mapping_type == LOAD_BALANCING:
        if rule.server_group_id:
            line += f" server-group {rule.server_group_id}"
    else:
        for part in (rule.local_address, rule.local_end_address, rule.local_port):
            if part:
                line += f" {part}"
        if rule.local_start_port and rule.local_end_port:
            line += f" {rule.local_start_port} {rule.local_end_port}"

    if rule.acl_id and rule.mapping_type != ACL_BASED:
        acl = acls.find(rule.acl_id)
        if acl is not None:
            line += f" acl {acl.number}"
    if rule.reversible:
        line += " reversible"
    if rule.policy_name:
        line += f" rule {rule.policy_name}"
    return line


def _h3c(nat: H3CNat, device_type: DeviceType, acls: ACLsConfig, out: CliBuilder) -> None:
    if nat.address_pool.enabled:
        pools = [p for p in nat.address_pool.pools if p.group_id and p.start_address and p.end_address]
        if pools:
            out.comment("NAT Address Pools")
        for pool in pools:
            header = f"nat address-group {pool.group_id}"
            if pool.name:
                header += f" name {pool.name}"
            out.add(header, f"Address group {pool.group_id}.")
            out.add(f" address {pool.start_address} {pool.end_address}")
            out.add("quit")
            out.blank()

    if nat.server_groups:
        out.blank()
        out.comment("NAT Server Groups")
    for group in nat.server_groups:
        out.add(f"nat server-group {group.group_id}", f"Load-balanced server group {group.group_id}.")
        for member in group.members:
            out.add(f" inside ip {member.ip} port {member.port} weight {member.weight}")
        out.add("quit")
        out.blank()

    if nat.static_outbound.enabled:
        lines = [line for line in (_static_rule(r, acls) for r in nat.static_outbound.rules) if line]
        if lines:
            out.blank()
            out.comment("Static NAT")
            for line in lines:
                out.add(line, "One-to-one or net-to-net static mapping.")
            out.blank()
            out.comment('NOTE: Apply "nat static enable" on the relevant interface(s) for these rules to take effect.')

    policy = CliBuilder()
    _global_policy(nat, device_type, policy)
    if len(policy):
        out.blank()
        out.comment("Global NAT Policy")
        out.extend(policy)

    if nat.port_mapping.enabled:
        by_interface: dict[str, list[NATPortMappingRule]] = {}
        for rule in nat.port_mapping.rules:
            if rule.interface_name:
                by_interface.setdefault(rule.interface_name, []).append(rule)
        for interface_name, rules in by_interface.items():
            out.blank()
            out.add(f"interface {interface_name}")
            for rule in rules:
                out.add(_nat_server(rule, acls), f"Port mapping on {interface_name}.")
            out.add("quit")


def generate_nat(
    vendor: Vendor,
    device_type: DeviceType,
    config: NATConfig,
    acls: Optional[ACLsConfig] = None,
) -> Fragment:
    """
    Generate NAT configuration from the vendor's NAT variant.

    Args:
        vendor: Target vendor.
        device_type: Firewalls take zoned nat server; routers skip zones in the H3C global policy.
        config: NAT config whose variant matches the vendor.
        acls: ACLs resolved by id for static NAT and port mapping.

    Returns:
        Fragment, or the unsupported comment when the vendor has no NAT variant.
    """
    if not config.enabled:
        return Fragment.empty("NAT feature is disabled.")
    acls = acls or ACLsConfig()

    out = CliBuilder()
    if vendor == Vendor.HUAWEI and isinstance(config.variant, HuaweiNat):
        _huawei(config.variant, device_type, out)
    elif vendor == Vendor.H3C and isinstance(config.variant, H3CNat):
        _h3c(config.variant, device_type, acls, out)
    else:
        return unsupported("NAT", vendor)

    if not any(line.strip() and not line.startswith("#") for line in out.lines):
        return Fragment.empty("No NAT rules configured.")
    return out.build("NAT configuration generated locally.")

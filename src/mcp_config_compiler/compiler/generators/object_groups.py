"""Address, service and domain object groups."""
from ...config.schema import DeviceType, Vendor
from ...config.security import AddressGroup, AddressMember, ObjectGroupConfig, ServiceGroup, ServiceMember
from ..fragment import CliBuilder, Fragment, unsupported

HOST_MASKS = ("255.255.255.255", "32")


def _port_clause(keyword: str, operator: str, port1: str, port2: str) -> str:
    if not (operator and port1):
        return ""
    clause = f" {keyword}" if keyword else ""
    clause += f" {operator} {port1}"
    if operator == "range":
        clause += f" {port2}"
    return clause


def _service_body(member: ServiceMember, src_kw: str, dst_kw: str) -> str:
    if member.protocol == "custom":
        body = f" {member.custom_protocol_number}" if member.custom_protocol_number else ""
    else:
        body = f" {member.protocol}"
    if member.protocol in ("tcp", "udp"):
        body += _port_clause(src_kw, member.source_port_operator, member.source_port1, member.source_port2)
        body += _port_clause(dst_kw, member.destination_port_operator, member.destination_port1, member.destination_port2)
    elif member.protocol == "icmp" and member.icmp_type:
        body += f" icmp-type {member.icmp_type}"
        if member.icmp_code:
            body += f" {member.icmp_code}"
    return body


# --- Huawei ---

def _huawei_address(group: AddressGroup, out: CliBuilder) -> None:
    out.add(f"ip address-set {group.name} type object", f"Address set {group.name}.")
    if group.description:
        out.add(f' description "{group.description}"')
    for index, member in enumerate(group.members):
        if member.type == "ip-mask" and member.address:
            out.add(f" address {index} {member.address} mask {member.mask or '32'}")
        elif member.type == "range" and member.start_address and member.end_address:
            out.add(f" address {index} range {member.start_address} {member.end_address}")
    out.add("quit")


def _huawei_service(group: ServiceGroup, out: CliBuilder) -> None:
    out.add(f"ip service-set {group.name} type object", f"Service set {group.name}.")
    if group.description:
        out.add(f' description "{group.description}"')
    for index, member in enumerate(group.members):
        out.add(f" service {index} protocol{_service_body(member, 'source-port', 'destination-port')}")
    out.add("quit")


# --- H3C ---

def _h3c_member(object_id: int, member: AddressMember) -> str:
    if member.type == "ip-mask" and member.address:
        mask = member.mask or "255.255.255.255"
        if mask in HOST_MASKS:
            return f" {object_id} network host address {member.address}"
        return f" {object_id} network subnet {member.address} {mask}"
    if member.type == "range" and member.start_address and member.end_address:
        return f" {object_id} network range {member.start_address} {member.end_address}"
    if member.type == "host-name" and member.host_name:
        return f" {object_id} network host name {member.host_name}"
    return ""


def _h3c_address(group: AddressGroup, out: CliBuilder) -> None:
    out.add(f"object-group ip address {group.name}", f"Address object group {group.name}.")
    if group.description:
        out.add(f' description "{group.description}"')
    for index, member in enumerate(group.members, start=1):
        line = _h3c_member(index, member)
        if line:
            out.add(line)
    out.add("quit")


def _h3c_service(group: ServiceGroup, out: CliBuilder) -> None:
    out.add(f"object-group service {group.name}", f"Service object group {group.name}.")
    if group.description:
        out.add(f' description "{group.description}"')
    for index, member in enumerate(group.members, start=1):
        out.add(f" {index} service{_service_body(member, 'source', 'destination')}")
    out.add("quit")


# --- Cisco ---

def _cisco_address(group: AddressGroup, out: CliBuilder) -> None:
    out.add(f"object-group network {group.name}", f"Network object group {group.name}.")
    if group.description:
        out.add(f" description {group.description}")
    for member in group.members:
        if member.type == "ip-mask" and member.address:
            mask = member.mask or "255.255.255.255"
            if mask in HOST_MASKS:
                out.add(f" host {member.address}")
            else:
                out.add(f" {member.address} {mask}")
        elif member.type == "range" and member.start_address and member.end_address:
            out.add(f" range {member.start_address} {member.end_address}")
    out.add("exit")


def _cisco_service(group: ServiceGroup, out: CliBuilder) -> None:
    out.add(f"object-group service {group.name}", f"Service object group {group.name}.")
    if group.description:
        out.add(f" description {group.description}")
    for member in group.members:
        if member.protocol == "custom":
            if member.custom_protocol_number:
                out.add(f" {member.custom_protocol_number}")
            continue
        line = f" {member.protocol}"
        if member.protocol in ("tcp", "udp"):
            line += _port_clause("source", member.source_port_operator, member.source_port1, member.source_port2)
            line += _port_clause("", member.destination_port_operator, member.destination_port1, member.destination_port2)
        elif member.protocol == "icmp" and member.icmp_type:
            line += f" {member.icmp_type}"
        out.add(line)
    out.add("exit")


_ADDRESS = {Vendor.HUAWEI: _huawei_address, Vendor.H3C: _h3c_address, Vendor.CISCO: _cisco_address}
_SERVICE = {Vendor.HUAWEI: _huawei_service, Vendor.H3C: _h3c_service, Vendor.CISCO: _cisco_service}


def _domain_groups(vendor: Vendor, config: ObjectGroupConfig, out: CliBuilder) -> None:
    for group in config.domain_groups:
        if not group.name or not group.members:
            continue
        if vendor == Vendor.HUAWEI:
            out.add(f"domain-set name {group.name}", f"Domain set {group.name}.")
            if group.description:
                out.add(f' description "{group.description}"')
            for member in group.members:
                if member.name:
                    out.add(f" add domain {member.name}")
            out.add("quit")
        elif vendor == Vendor.H3C:
            # H3C carries domains as host-name members of an address group
            as_address = AddressGroup(
                name=group.name,
                description=group.description,
                members=[AddressMember(type="host-name", host_name=m.name, id=m.id) for m in group.members],
                id=group.id,
            )
            _h3c_address(as_address, out)


def generate_object_groups(vendor: Vendor, device_type: DeviceType, config: ObjectGroupConfig) -> Fragment:
    """Generate object groups, one commented section per group kind."""
    if not config.any_enabled:
        return Fragment.empty("Object Groups are disabled.")
    if vendor not in _ADDRESS:
        return unsupported("Object Groups", vendor)

    marker = "!" if vendor == Vendor.CISCO else "#"
    sections: list[tuple[str, CliBuilder]] = []

    if config.address_groups_enabled:
        body = CliBuilder()
        for group in config.address_groups:
            if group.name and group.members:
                _ADDRESS[vendor](group, body)
        sections.append(("Address Groups", body))

    if config.service_groups_enabled:
        body = CliBuilder()
        for group in config.service_groups:
            if group.name and group.members:
                _SERVICE[vendor](group, body)
        sections.append(("Service Groups", body))

    if config.domain_groups_enabled:
        body = CliBuilder()
        _domain_groups(vendor, config, body)
        if not len(body) and vendor == Vendor.CISCO:
            body.note("Domain groups have no Cisco IOS object-group form; skipped.")
        sections.append(("Domain Groups", body))

    out = CliBuilder()
    for title, body in sections:
        if not len(body):
            out.note(body.build().explanation)
            continue
        out.blank()
        out.comment(title, marker)
        out.extend(body)

    if not len(out):
        return Fragment.empty("Object Groups are disabled or no groups are configured.")
    return out.build("Object Group configuration generated.")

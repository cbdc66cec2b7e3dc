"""Time ranges and access control lists.

H3C and Huawei render rules inside `acl` views; Cisco renders named
standard/extended access lists. Rules are emitted in the order given;
an explicit rule id is only used when automatic numbering is off.
"""
import logging
from datetime import datetime

from ...config.schema import DeviceType, Vendor
from ...config.security import ACL, ACLRule, ACLsConfig, DaySelection, TimeRange
from ..fragment import CliBuilder, Fragment, unsupported

logger = logging.getLogger(__name__)

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")
WEEKEND = ("saturday", "sunday")


# --- Time ranges ---

def day_spec(vendor: Vendor, days: DaySelection) -> str:
    """Day list of a periodic range in the vendor's vocabulary ('' if no day is set)."""
    if days.daily:
        return "daily"
    chosen = [day for day in WEEKDAYS + WEEKEND if getattr(days, day)]
    if chosen == list(WEEKDAYS):
        return "weekdays" if vendor == Vendor.CISCO else "working-day"
    if chosen == list(WEEKEND):
        return "weekend" if vendor == Vendor.CISCO else "off-day"
    if vendor == Vendor.CISCO:
        return " ".join(day.capitalize() for day in chosen)
    if vendor == Vendor.HUAWEI:
        return " ".join(day[:3].capitalize() for day in chosen)
    return " ".join(day[:3] for day in chosen)


def _cisco_date(time: str, date: str) -> str:
    """'08:00 01 January 2025', or '' for a malformed date."""
    try:
        parsed = datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        logger.debug(f"Skipping malformed date {date!r}")
        return ""
    return f"{time} {parsed.day:02d} {parsed.strftime('%B')} {parsed.year}"


def _vrp_time_range(vendor: Vendor, tr: TimeRange) -> str:
    periodic = ""
    if tr.periodic.enabled and tr.periodic.start_time and tr.periodic.end_time:
        days = day_spec(vendor, tr.periodic.days)
        if days:
            periodic = f" {tr.periodic.start_time} to {tr.periodic.end_time} {days}"
    absolute = ""
    if tr.absolute.enabled:
        if tr.absolute.from_time and tr.absolute.from_date:
            absolute += f" from {tr.absolute.from_time} {tr.absolute.from_date.replace('-', '/')}"
        if tr.absolute.to_time and tr.absolute.to_date:
            absolute += f" to {tr.absolute.to_time} {tr.absolute.to_date.replace('-', '/')}"
    if not (periodic or absolute):
        return ""
    return f"time-range {tr.name}{periodic}{absolute}"


def _cisco_time_range(tr: TimeRange, out: CliBuilder) -> None:
    body = CliBuilder()
    if tr.periodic.enabled and tr.periodic.start_time and tr.periodic.end_time:
        days = day_spec(Vendor.CISCO, tr.periodic.days)
        if days:
            body.add(f" periodic {days} {tr.periodic.start_time} to {tr.periodic.end_time}")
    if tr.absolute.enabled:
        line = " absolute"
        start = _cisco_date(tr.absolute.from_time, tr.absolute.from_date) if tr.absolute.from_date else ""
        end = _cisco_date(tr.absolute.to_time, tr.absolute.to_date) if tr.absolute.to_date else ""
        if start:
            line += f" start {start}"
        if end:
            line += f" end {end}"
        if start or end:
            body.add(line)
    if not len(body):
        return
    out.add(f"time-range {tr.name}", f"Defines time range {tr.name}.")
    out.extend(body)
    out.add("exit")


def generate_time_ranges(vendor: Vendor, device_type: DeviceType, time_ranges: list[TimeRange]) -> Fragment:
    """Generate time ranges; ranges without a periodic or absolute part are skipped."""
    named = [tr for tr in time_ranges if tr.name]
    if not named:
        return Fragment.empty("No time ranges configured.")

    out = CliBuilder()
    if vendor in (Vendor.HUAWEI, Vendor.H3C):
        for tr in named:
            line = _vrp_time_range(vendor, tr)
            if line:
                out.add(line, f"Defines time range {tr.name}.")
    elif vendor == Vendor.CISCO:
        for tr in named:
            _cisco_time_range(tr, out)
    else:
        return unsupported("Time ranges", vendor)

    if not len(out):
        return Fragment.empty("No time range has a periodic or absolute part.")
    return out.build("Time-range configuration generated.")


# --- ACL rules ---

def _address(keyword: str, is_any: bool, address: str, wildcard: str) -> str:
    if is_any:
        return f" {keyword} any"
    if address:
        return f" {keyword} {address} {wildcard or '0.0.0.0'}"
    return ""


def _port_match(operator: str, port1: str, port2: str) -> str:
    """' eq 80' / ' range 1000 2000', or '' when incomplete."""
    if not (operator and port1):
        return ""
    text = f" {operator} {port1}"
    if operator == "range" and port2:
        text += f" {port2}"
    return text


def _ports(keyword: str, operator: str, port1: str, port2: str) -> str:
    match = _port_match(operator, port1, port2)
    return f" {keyword}{match}" if match else ""


def _vrp_rule(vendor: Vendor, acl: ACL, rule: ACLRule) -> str:
    huawei = vendor == Vendor.HUAWEI
    line = " rule"
    if rule.explicit_id:
        line += f" {rule.explicit_id}"
    line += f" {rule.action}"

    if acl.type == "basic":
        line += _address("source", rule.source_is_any, rule.source_address, rule.source_wildcard)
        if rule.fragment:
            line += " fragment-type fragment" if huawei else " fragment"
        if rule.logging:
            line += " logging"
        if rule.counting and not huawei:
            line += " counting"
        if rule.time_range:
            line += f" time-range {rule.time_range}"
        if rule.vpn_instance and not huawei:
            line += f" vpn-instance {rule.vpn_instance}"
        return line

    protocol = rule.protocol or ("ip" if huawei else "")
    if protocol:
        line += f" {protocol}"
    line += _address("source", rule.source_is_any, rule.source_address, rule.source_wildcard)
    line += _address("destination", rule.destination_is_any, rule.destination_address, rule.destination_wildcard)
    if rule.protocol in ("tcp", "udp"):
        line += _ports("source-port", rule.source_port_operator, rule.source_port1, rule.source_port2)
        line += _ports(
            "destination-port", rule.destination_port_operator, rule.destination_port1, rule.destination_port2
        )
    if rule.protocol == "tcp":
        flags = rule.tcp_flags.set_flags()
        if rule.established:
            line += " tcp-flag established" if huawei else " established"
        elif flags and huawei:
            line += f" tcp-flag {' '.join(flags)}"
        elif flags:
            line += "".join(f" {flag} 1" for flag in flags)
    if rule.protocol == "icmp" and rule.icmp_type:
        line += f" icmp-type {rule.icmp_type}"
        if rule.icmp_code:
            line += f" {rule.icmp_code}"
    if huawei and rule.ttl_operator and rule.ttl_value1:
        line += f" ttl {rule.ttl_operator} {rule.ttl_value1}"
        if rule.ttl_operator == "range" and rule.ttl_value2:
            line += f" {rule.ttl_value2}"
    if rule.dscp:
        line += f" dscp {rule.dscp}"
    if rule.precedence:
        line += f" precedence {rule.precedence}"
    if rule.tos:
        line += f" tos {rule.tos}"
    if rule.fragment:
        line += " fragment-type fragment" if huawei else " fragment"
    if rule.logging:
        line += " logging"
    if rule.counting and not huawei:
        line += " counting"
    if rule.time_range:
        line += f" time-range {rule.time_range}"
    if rule.vpn_instance and not huawei:
        line += f" vpn-instance {rule.vpn_instance}"
    return line


def _h3c_acl(acl: ACL, out: CliBuilder) -> None:
    if acl.number:
        header = f"acl number {acl.number}"
        if acl.name:
            header += f" name {acl.name}"
    else:
        header = f"acl {'basic' if acl.type == 'basic' else 'advanced'} name {acl.name}"
    header += f" match-order {acl.match_order}"
    out.add(header, f"Creates ACL {acl.name or acl.number} ({acl.match_order} order).")
    if acl.step.isdigit():
        out.add(f" step {acl.step}")
    for rule in acl.rules:
        if rule.description:
            out.comment(rule.description, marker=" #")
        out.add(_vrp_rule(Vendor.H3C, acl, rule))
    out.add("quit")


def _huawei_acl(acl: ACL, out: CliBuilder) -> None:
    if acl.name:
        kind = "advance" if acl.type == "advanced" else "basic"
        out.add(f"acl name {acl.name} {kind}", f"Creates {kind} ACL {acl.name}.")
    else:
        out.add(f"acl {acl.number}", f"Creates ACL {acl.number}.")
    if acl.description:
        out.add(f" description {acl.description}")
    if acl.step.isdigit():
        out.add(f" step {acl.step}")
    for rule in acl.rules:
        out.add(_vrp_rule(Vendor.HUAWEI, acl, rule))
        if rule.description and rule.explicit_id:
            out.add(f" rule {rule.explicit_id} description {rule.description}")
        elif rule.description:
            out.comment(f"rule description: {rule.description}", marker=" #")
    out.add("quit")


def _cisco_address(is_any: bool, address: str, wildcard: str) -> str:
    if is_any or not address:
        return "any"
    if not wildcard or wildcard == "0.0.0.0":
        return f"host {address}"
    return f"{address} {wildcard}"


def _cisco_rule(acl: ACL, rule: ACLRule) -> str:
    line = f" {rule.explicit_id} {rule.action}" if rule.explicit_id else f" {rule.action}"
    if acl.type == "basic":
        line += f" {_cisco_address(rule.source_is_any, rule.source_address, rule.source_wildcard)}"
        if rule.logging:
            line += " log"
        return line

    protocol = rule.protocol or "ip"
    line += f" {protocol}"
    line += f" {_cisco_address(rule.source_is_any, rule.source_address, rule.source_wildcard)}"
    if protocol in ("tcp", "udp"):
        line += _port_match(rule.source_port_operator, rule.source_port1, rule.source_port2)
    line += f" {_cisco_address(rule.destination_is_any, rule.destination_address, rule.destination_wildcard)}"
    if protocol in ("tcp", "udp"):
        line += _port_match(rule.destination_port_operator, rule.destination_port1, rule.destination_port2)
    if protocol == "tcp":
        flags = rule.tcp_flags.set_flags()
        if rule.established:
            line += " established"
        elif flags:
            line += " match-all " + " ".join(f"+{flag}" for flag in flags)
    if protocol == "icmp" and rule.icmp_type:
        line += f" {rule.icmp_type}"
        if rule.icmp_code:
            line += f" {rule.icmp_code}"
    if rule.dscp:
        line += f" dscp {rule.dscp}"
    elif rule.precedence:
        line += f" precedence {rule.precedence}"
    if rule.tos:
        line += f" tos {rule.tos}"
    if rule.fragment:
        line += " fragments"
    if rule.time_range:
        line += f" time-range {rule.time_range}"
    if rule.logging:
        line += " log"
    return line


def _cisco_acl(acl: ACL, out: CliBuilder) -> None:
    kind = "standard" if acl.type == "basic" else "extended"
    ref = acl.name or acl.number
    out.add(f"ip access-list {kind} {ref}", f"Creates {kind} access list {ref}.")
    if acl.description:
        out.add(f" remark {acl.description}")
    for rule in acl.rules:
        if rule.description:
            out.add(f" remark {rule.description}")
        out.add(_cisco_rule(acl, rule))
    out.add("exit")


_RENDERERS = {
    Vendor.CISCO: _cisco_acl,
    Vendor.HUAWEI: _huawei_acl,
    Vendor.H3C: _h3c_acl,
}


def generate_acl(vendor: Vendor, device_type: DeviceType, config: ACLsConfig) -> Fragment:
    """
    Generate every ACL with its rules.

    Args:
        vendor: Node vendor
        device_type: Node device type
        config: ACL list; ACLs without a number or name are skipped

    Returns:
        Fragment with one block per ACL separated by blank lines
    """
    if not config.enabled:
        return Fragment.empty("ACL is disabled.")
    render = _RENDERERS.get(vendor)
    if render is None:
        return unsupported("ACL", vendor)

    out = CliBuilder()
    for acl in config.acls:
        if not (acl.number or acl.name):
            continue
        out.blank()
        render(acl, out)

    if not len(out):
        return Fragment.empty("No ACLs configured.")
    return out.build("ACL configuration generated locally.")

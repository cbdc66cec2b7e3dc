"""Stacking: H3C IRF, Huawei iStack/CSS and Cisco StackWise.

Stacking is a multi-phase procedure with reboots in between, so the
output is a runbook: commands grouped by phase with comment headers.
Priorities are set after renumbering when any member is renumbered.
"""
import re

from ...config.schema import DeviceType, Vendor
from ...config.switching import StackingConfig, StackMember
from ..fragment import CliBuilder, Fragment, unsupported

IFACE_MEMBER_RE = re.compile(r"^([A-Za-z-]+)(\d+)(/\d+/\d+)$")


def renumber_interface(iface: str, member_id: str, new_member_id: str) -> str:
    """Rewrite the member (first) number of an interface name."""
    if not new_member_id or member_id == new_member_id:
        return iface
    match = IFACE_MEMBER_RE.match(iface)
    if match and match.group(2) == member_id:
        return f"{match.group(1)}{new_member_id}{match.group(3)}"
    return iface


def _unique_interfaces(members: list[StackMember]) -> list[str]:
    seen: dict[str, None] = {}
    for member in members:
        for port in member.irf_ports:
            for iface in port.port_group:
                if iface:
                    seen.setdefault(iface, None)
    return list(seen)


def _set_shutdown(out: CliBuilder, interfaces: list[str], shutdown: bool) -> None:
    for iface in interfaces:
        out.add(f"interface {iface}")
        out.add(" shutdown" if shutdown else " undo shutdown")
        out.add("quit")


def _h3c_new(config: StackingConfig, out: CliBuilder) -> None:
    out.comment("Phase 1: pre-configure IRF in independent mode on each switch.")
    interfaces = _unique_interfaces(config.members)
    if interfaces:
        out.comment("Shut IRF physical ports before binding them.")
        _set_shutdown(out, interfaces, True)
    for member in config.members:
        out.blank()
        out.comment(f"Intended member ID {member.member_id}")
        out.add(f"irf member {member.member_id}", "Sets the member ID used after conversion.")
        if member.priority:
            out.add(f"irf priority {member.priority}", "Higher priority wins the master election.")
        if member.irf_ports and member.stack_interfaces:
            port = member.irf_ports[0]
            out.add(f"irf-port {port.id}")
            for iface in member.stack_interfaces:
                out.add(f" port group interface {iface}", f"Binds {iface} to IRF port {port.id}.")
            out.add("quit")
    if interfaces:
        out.blank()
        out.comment("Bring IRF physical ports back up.")
        _set_shutdown(out, interfaces, False)
    out.blank()
    out.comment("Phase 2: save and convert to IRF mode. The switch reboots.")
    out.add("save force")
    out.add("chassis convert mode irf", "Converts the switch to IRF mode; triggers a reboot.")
    if config.domain_id:
        out.blank()
        out.comment("Phase 3: on the master after the stack forms.")
        out.add(f"irf domain {config.domain_id}", "Distinguishes this IRF fabric from neighbours.")


def _h3c_old(config: StackingConfig, out: CliBuilder) -> None:
    if config.domain_id:
        out.add(f"irf domain {config.domain_id}", "Distinguishes this IRF fabric from neighbours.")
    for member in config.members:
        if member.member_id and member.new_member_id:
            out.add(
                f"irf member {member.member_id} renumber {member.new_member_id}",
                "Renumbering takes effect after reboot.",
            )
        if member.effective_id and member.priority:
            out.add(f"irf member {member.effective_id} priority {member.priority}")

    renamed: dict[str, str] = {}
    for member in config.members:
        for iface in member.stack_interfaces:
            renamed[iface] = renumber_interface(iface, member.member_id, member.new_member_id)
    interfaces = list(dict.fromkeys(renamed.values()))

    _set_shutdown(out, interfaces, True)
    for member in config.members:
        if not member.stack_interfaces:
            continue
        port = member.irf_ports[0]
        out.add(f"irf-port {member.effective_id}/{port.id}")
        for iface in member.stack_interfaces:
            out.add(f" port group interface {renamed.get(iface, iface)}")
        out.add("quit")
    _set_shutdown(out, interfaces, False)

    out.blank()
    out.comment("Save the configuration before activating IRF ports.")
    out.add("save force")
    out.blank()
    out.comment("Activating IRF ports may reboot member devices.")
    out.add("irf-port-configuration active", "Activates the IRF port bindings.")


def _huawei_stack_ports(out: CliBuilder, slot: str, member: StackMember) -> None:
    for index, iface in enumerate(member.stack_interfaces, start=1):
        out.add(f"interface stack-port {slot}/{index}")
        out.add(f" port interface {iface} enable", f"Adds {iface} to stack port {slot}/{index}.")
        out.add(" quit")


def _huawei_priority(out: CliBuilder, slot: str, priority: str) -> None:
    out.add(f"stack slot {slot}")
    out.add(f" priority {priority}", "Higher priority wins the master election.")
    out.add(" quit")


def _huawei_save(out: CliBuilder) -> None:
    out.add("save")
    out.add("y")


def _huawei(config: StackingConfig, out: CliBuilder) -> None:
    renumbering = any(m.renumbers for m in config.members)
    out.comment("Huawei stacking (iStack/CSS): configure, renumber, save, then reboot.")

    if config.model_type == "new":
        out.comment("Phase 1: base configuration on each switch.")
        for member in config.members:
            out.blank()
            out.comment(f"Switch currently in slot {member.member_id}")
            out.add("system-view")
            if config.domain_id:
                out.add(f"stack domain {config.domain_id}")
            # ports use the slot id the switch has before renumbering
            _huawei_stack_ports(out, member.member_id, member)
            if member.priority and not renumbering:
                _huawei_priority(out, member.member_id, member.priority)
            out.add("quit")
            _huawei_save(out)
    else:
        out.comment("Phase 1: base configuration.")
        out.add("system-view")
        if config.domain_id:
            out.add(f"stack domain {config.domain_id}")
        if not renumbering:
            for member in config.members:
                if member.priority:
                    _huawei_priority(out, member.member_id, member.priority)
        for member in config.members:
            _huawei_stack_ports(out, member.effective_id, member)
        out.add("quit")
        _huawei_save(out)

    if renumbering:
        out.blank()
        out.comment("Phase 2: renumber members. Each renumbered switch reboots.")
        for member in config.members:
            if not member.renumbers:
                continue
            out.add("system-view")
            out.add(f"stack slot {member.member_id}")
            out.add(f" renumber {member.new_member_id}", f"Slot {member.member_id} becomes {member.new_member_id}.")
            out.add(" quit")
            out.add("quit")
            _huawei_save(out)
        out.blank()
        out.comment("Phase 3: set priorities after all members have rebooted.")
        for member in config.members:
            if member.priority:
                out.add("system-view")
                _huawei_priority(out, member.effective_id, member.priority)
                out.add("quit")
                _huawei_save(out)

    out.blank()
    out.comment("Connect the stack cables, then verify:")
    out.comment("display stack")
    out.comment("display stack topology")


def _cisco(config: StackingConfig, out: CliBuilder) -> None:
    renumbering = any(m.renumbers for m in config.members)
    virtual = config.model_type == "new"
    members = config.members[:2] if virtual else config.members
    title = "StackWise Virtual" if virtual else "StackWise"
    out.comment(f"Cisco {title}: configure, renumber, save, then reload.", marker="!")

    for member in members:
        out.blank()
        out.comment(f"Phase 1: switch {member.member_id}", marker="!")
        out.add("configure terminal")
        if virtual:
            if config.domain_id:
                out.add(f"stackwise-virtual domain {config.domain_id}")
            for link_id, iface in enumerate(member.stack_interfaces, start=1):
                out.add(f"interface {iface}")
                out.add(f" stackwise-virtual link {link_id}", f"{iface} carries virtual link {link_id}.")
                out.add(" no shutdown")
                out.add("exit")
        if member.priority and not renumbering:
            out.add(f"switch {member.member_id} priority {member.priority}")
        out.add("end")
        out.add("copy running-config startup-config")

    if virtual and len(config.members) > 2:
        out.comment("StackWise Virtual supports two switches; further members are ignored.", marker="!")

    if renumbering:
        out.blank()
        out.comment("Phase 2: renumber members. Each renumbered switch reloads.", marker="!")
        for member in members:
            if member.renumbers:
                out.add("configure terminal")
                out.add(f"switch {member.member_id} renumber {member.new_member_id}")
                out.add("end")
                out.add("copy running-config startup-config")
        out.blank()
        out.comment("Phase 3: set priorities after the reload.", marker="!")
        for member in members:
            if member.priority:
                out.add("configure terminal")
                out.add(f"switch {member.effective_id} priority {member.priority}")
                out.add("end")
                out.add("copy running-config startup-config")

    out.blank()
    out.comment("Verify with:", marker="!")
    out.comment("show switch virtual" if virtual else "show switch", marker="!")


def generate_stacking(vendor: Vendor, device_type: DeviceType, config: StackingConfig) -> Fragment:
    """
    Generate the stacking runbook for the node's vendor.

    Returns:
        Fragment; empty when stacking is disabled
    """
    if not config.enabled:
        return Fragment.empty("Stacking (IRF) is disabled.")

    out = CliBuilder()
    if vendor == Vendor.H3C:
        if config.model_type == "new":
            _h3c_new(config, out)
        else:
            _h3c_old(config, out)
        summary = "H3C Stacking (IRF) configuration generated."
    elif vendor == Vendor.HUAWEI:
        _huawei(config, out)
        summary = "Huawei stacking configuration generated: configure, renumber, save, then reboot."
    elif vendor == Vendor.CISCO:
        _cisco(config, out)
        summary = "Cisco StackWise configuration generated."
    else:
        return unsupported("Stacking", vendor)
    return out.build(summary)

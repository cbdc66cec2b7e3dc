"""DHCP snooping."""
from ...config.schema import DeviceType, Vendor
from ...config.services import DHCPSnoopingConfig
from ..fragment import CliBuilder, Fragment, unsupported
from ..formatting import is_default, vrp_vlan_list

DEFAULT_AUTOSAVE_DELAY = "3600"


def _h3c(config: DHCPSnoopingConfig, out: CliBuilder) -> None:
    out.add("dhcp snooping enable", "Enables DHCP snooping globally.")

    database = config.h3c.binding_database
    if database.enabled:
        out.blank()
        out.comment("Snooping entry backup")
        if database.filename:
            out.add(
                f"dhcp snooping binding database filename {database.filename}",
                f"Entries are saved to {database.filename}.",
            )
        if database.update_interval:
            out.add(f"dhcp snooping binding database update interval {database.update_interval}")

    interfaces = [i for i in config.interfaces if i.interface_name and (i.trust or i.binding_record)]
    if interfaces:
        out.blank()
        out.comment("Interfaces")
    for iface in interfaces:
        out.add(f"interface {iface.interface_name}")
        if iface.trust:
            out.add(" dhcp snooping trust", f"{iface.interface_name} may carry DHCP server replies.")
        if iface.binding_record:
            out.add(" dhcp snooping binding record", "Records client bindings learned here.")
        out.add("quit")


def _huawei(config: DHCPSnoopingConfig, out: CliBuilder) -> None:
    options = config.huawei
    out.add("dhcp enable", "DHCP must be enabled for snooping.")
    out.add("dhcp snooping enable", "Enables DHCP snooping globally.")

    vlans = vrp_vlan_list(options.enabled_on_vlans)
    if vlans:
        out.blank()
        out.add(f"dhcp snooping enable vlan {vlans}", f"Snooping runs in VLANs {vlans}.")

    autosave = options.user_bind_autosave
    if autosave.enabled and autosave.filename:
        line = f"dhcp snooping user-bind autosave {autosave.filename}"
        if not is_default(autosave.write_delay, DEFAULT_AUTOSAVE_DELAY):
            line += f" write-delay {autosave.write_delay}"
        out.blank()
        out.comment("Binding table autosave")
        out.add(line, f"Backs up the binding table to {autosave.filename}.")

    trusted = [i for i in options.trusted_interfaces if i.name]
    if trusted:
        out.blank()
        out.comment("Trusted interfaces")
    for iface in trusted:
        out.add(f"interface {iface.name}")
        out.add(" dhcp snooping trusted", f"{iface.name} may carry DHCP server replies.")
        out.add("quit")


def generate_dhcp_snooping(vendor: Vendor, device_type: DeviceType, config: DHCPSnoopingConfig) -> Fragment:
    """Generate DHCP snooping for H3C or Huawei."""
    if not config.enabled:
        return Fragment.empty("DHCP Snooping is disabled.")

    out = CliBuilder()
    if vendor == Vendor.H3C:
        _h3c(config, out)
    elif vendor == Vendor.HUAWEI:
        _huawei(config, out)
    else:
        return unsupported("DHCP Snooping", vendor)
    return out.build("DHCP snooping configuration generated.")

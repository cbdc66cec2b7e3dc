"""DHCP relay agents on H3C and Huawei interfaces."""
from ...config.schema import DeviceType, Vendor
from ...config.services import DHCPOption82Config, DHCPRelayConfig, DHCPRelayInterface
from ..fragment import CliBuilder, Fragment, unsupported

DEFAULT_DSCP = "56"


def _h3c_circuit_id(opt82: DHCPOption82Config) -> str:
    line = " dhcp relay information circuit-id"
    if opt82.circuit_id_format == "string" and opt82.circuit_id_string:
        return f"{line} string {opt82.circuit_id_string}"
    if opt82.circuit_id_format in ("normal", "verbose"):
        line += f" {opt82.circuit_id_format}"
        node_id = opt82.circuit_id_verbose_node_identifier
        if opt82.circuit_id_format == "verbose" and node_id:
            line += f" node-identifier {node_id}"
            if node_id == "user-defined" and opt82.circuit_id_verbose_node_identifier_string:
                line += f" {opt82.circuit_id_verbose_node_identifier_string}"
        if opt82.circuit_id_format_type:
            line += f" format {opt82.circuit_id_format_type}"
    return line


def _h3c_remote_id(opt82: DHCPOption82Config) -> str:
    line = " dhcp relay information remote-id"
    if opt82.remote_id_format == "string" and opt82.remote_id_string:
        return f"{line} string {opt82.remote_id_string}"
    if opt82.remote_id_format == "sysname":
        return f"{line} sysname"
    if opt82.remote_id_format == "normal":
        line += " normal"
        if opt82.remote_id_format_type:
            line += f" format {opt82.remote_id_format_type}"
    return line


def _h3c_interface(config: DHCPRelayConfig, iface: DHCPRelayInterface, out: CliBuilder) -> None:
    out.add(f"interface {iface.interface_name}")
    out.add(" dhcp select relay", "Puts the interface in DHCP relay mode.")
    for server in iface.server_addresses:
        if server.ip:
            out.add(f" dhcp relay server-address {server.ip}", f"Relays requests to DHCP server {server.ip}.")
    if config.security.mac_check:
        out.add(" dhcp relay check mac-address", "Drops requests whose chaddr differs from the source MAC.")

    opt82 = iface.option82
    if opt82.enabled:
        out.add(" dhcp relay information enable", "Enables Option 82 handling.")
        out.add(f" dhcp relay information strategy {opt82.strategy}")
        out.add(_h3c_circuit_id(opt82), "Circuit ID sub-option content.")
        out.add(_h3c_remote_id(opt82), "Remote ID sub-option content.")
    out.add("quit")


def _h3c(config: DHCPRelayConfig, out: CliBuilder) -> None:
    out.add("dhcp enable", "Enables DHCP globally.")

    security = config.security
    glob = CliBuilder()
    if security.client_info_recording:
        glob.add("dhcp relay client-information record", "Records relayed client address entries.")
    if security.client_info_refresh:
        glob.add("dhcp relay client-information refresh enable")
        if security.client_info_refresh_type == "interval" and security.client_info_refresh_interval:
            glob.add(
                f"dhcp relay client-information refresh interval {security.client_info_refresh_interval}",
                f"Refreshes client entries every {security.client_info_refresh_interval} seconds.",
            )
        elif security.client_info_refresh_type == "auto":
            glob.add("dhcp relay client-information refresh auto")
    if security.mac_check and security.mac_check_aging_time:
        glob.add(f"dhcp relay check mac-address aging-time {security.mac_check_aging_time}")
    if config.dscp and config.dscp != DEFAULT_DSCP:
        glob.add(f"dhcp dscp {config.dscp}", f"Marks relayed DHCP packets with DSCP {config.dscp}.")
    if len(glob):
        out.blank()
        out.comment("Global DHCP relay settings")
        out.extend(glob)

    for iface in config.interfaces:
        if not iface.interface_name:
            continue
        out.blank()
        out.comment(f"Interface {iface.interface_name}")
        _h3c_interface(config, iface, out)


def _huawei(config: DHCPRelayConfig, out: CliBuilder) -> None:
    out.add("dhcp enable", "Enables DHCP globally.")

    glob = CliBuilder()
    if not config.huawei.server_match_check:
        glob.add(
            "undo dhcp relay request server-match enable",
            "REQUEST packets are relayed without checking the server identifier (Option 54).",
        )
    if config.huawei.reply_forward_all:
        glob.add("dhcp relay reply forward all enable", "Relays every DHCP ACK.")
    if not config.huawei.trust_option82:
        glob.add("undo dhcp relay trust option82", "Packets already carrying Option 82 are dropped.")
    if len(glob):
        out.blank()
        out.comment("Global DHCP relay settings")
        out.extend(glob)

    for iface in config.interfaces:
        if not iface.interface_name:
            continue
        options = iface.huawei_options
        out.blank()
        out.comment(f"Interface {iface.interface_name}")
        out.add(f"interface {iface.interface_name}")
        out.add(" dhcp select relay", "Enables DHCPv4 relay on the interface.")
        if options and options.source_ip_address:
            out.add(f" dhcp relay source-ip-address {options.source_ip_address}")
        if options and options.gateway:
            out.add(f" dhcp relay gateway {options.gateway}")
        for server in iface.server_addresses:
            if not server.ip:
                continue
            line = f" dhcp relay server-ip {server.ip}"
            if server.vpn_instance:
                line += f" vpn-instance {server.vpn_instance}"
            out.add(line, f"Relays requests to DHCP server {server.ip}.")
        if options:
            info = options.option82.information
            if info.enabled:
                out.add(" dhcp relay information enable", "Enables Option 82 handling.")
                if info.strategy != "replace":
                    out.add(f" dhcp relay information strategy {info.strategy}")
            insert = options.option82.insert
            if insert.vss_control:
                out.add(" dhcp option82 vss-control insert enable")
            if insert.link_selection:
                out.add(" dhcp option82 link-selection insert enable")
            if insert.server_id_override:
                out.add(" dhcp option82 server-id-override insert enable")
        out.add("quit")


def generate_dhcp_relay(vendor: Vendor, device_type: DeviceType, config: DHCPRelayConfig) -> Fragment:
    """Generate global relay settings and per-interface relay blocks."""
    if not config.enabled:
        return Fragment.empty("DHCP Relay is disabled.")

    out = CliBuilder()
    if vendor == Vendor.H3C:
        _h3c(config, out)
    elif vendor == Vendor.HUAWEI:
        _huawei(config, out)
    else:
        return unsupported("DHCP Relay", vendor)
    return out.build("DHCP relay configuration generated.")

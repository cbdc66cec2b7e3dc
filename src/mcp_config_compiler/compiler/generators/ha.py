"""Firewall high availability: H3C RBM remote-backup groups and Huawei HRP."""
from ...config.schema import DeviceType, Vendor
from ...config.security import H3CHA, HAConfig, HuaweiHA
from ..fragment import CliBuilder, Fragment, unsupported
from ..formatting import is_default

DEFAULT_RBM_PORT = "1026"
DEFAULT_KEEPALIVE_INTERVAL = "1"
DEFAULT_KEEPALIVE_COUNT = "10"
DEFAULT_FAILBACK_DELAY = "30"
DEFAULT_HELLO_INTERVAL = "1000"
DEFAULT_PREEMPT_DELAY = "60"
DEFAULT_PACKET_PRIORITY = "6"

# HRP packet priority is configured as a DSCP-style byte, one step per level
HRP_PRIORITY_BYTES = {str(level): str(level * 32) for level in range(8)}


def _toggle(out: CliBuilder, enabled: bool, command: str, explain: str = "") -> None:
    out.add(f" {command}" if enabled else f" undo {command}", explain or None)


def _h3c(ha: H3CHA, out: CliBuilder) -> None:
    tracks = ha.monitoring.tracks
    for item in tracks:
        if item.id and item.value and item.type == "interface":
            out.add(f"track {item.id} interface {item.value}", f"Track {item.id} follows {item.value}.")
            out.add("quit")

    out.blank()
    out.add("remote-backup group", "Enters the RBM remote-backup group.")
    out.add(f" device-role {ha.device_role}")
    if ha.work_mode == "dual-active":
        out.add(" backup-mode dual-active", "Both devices forward traffic.")
    else:
        out.add(" undo backup-mode", "Active/standby operation.")

    channel = ha.control_channel
    if channel.local_ip and channel.remote_ip:
        out.add(f" local-ip {channel.local_ip}")
        out.add(
            f" remote-ip {channel.remote_ip} port {channel.port or DEFAULT_RBM_PORT}",
            f"Control channel to peer {channel.remote_ip}.",
        )
    if not is_default(channel.keepalive_interval, DEFAULT_KEEPALIVE_INTERVAL):
        out.add(f" keepalive interval {channel.keepalive_interval}")
    if not is_default(channel.keepalive_count, DEFAULT_KEEPALIVE_COUNT):
        out.add(f" keepalive count {channel.keepalive_count}")
    if ha.data_channel_interface:
        out.add(f" data-channel interface {ha.data_channel_interface}", "Carries session backup traffic.")

    _toggle(out, ha.hot_backup_enabled, "hot-backup enable")
    _toggle(out, ha.auto_sync_enabled, "configuration auto-sync enable")
    _toggle(out, ha.sync_check_enabled, "configuration sync-check")
    if ha.failback.enabled:
        out.add(f" delay-time {ha.failback.delay_time or DEFAULT_FAILBACK_DELAY}", "Failback delay.")
    for item in tracks:
        if item.id:
            out.add(f" track {item.id}")
    out.add("quit")


def _huawei_packet(ha: HuaweiHA, out: CliBuilder) -> None:
    if ha.authentication_key:
        out.add(f"hrp authentication-key {ha.authentication_key}")
    if ha.checksum_enabled:
        out.add("hrp checksum enable")
    if not ha.encryption_enabled:
        out.add("hrp encryption disable")
    if ha.encryption_key_refresh_enabled:
        out.add("hrp encryption-key refresh enable")
        if ha.encryption_key_refresh_interval:
            out.add(f"hrp encryption-key refresh interval {ha.encryption_key_refresh_interval}")
    if not is_default(ha.hello_interval, DEFAULT_HELLO_INTERVAL):
        out.add(f"hrp timer hello {ha.hello_interval}")
    if not is_default(ha.ip_packet_priority, DEFAULT_PACKET_PRIORITY):
        priority = HRP_PRIORITY_BYTES.get(ha.ip_packet_priority, HRP_PRIORITY_BYTES[DEFAULT_PACKET_PRIORITY])
        out.add(f"hrp ip-packet priority {priority}")


def _huawei_backup(ha: HuaweiHA, out: CliBuilder) -> None:
    flags = (
        (ha.auto_sync_connection_status, "hrp auto-sync connection-status"),
        (ha.mirror_session_enabled, "hrp mirror session enable"),
        (ha.auto_sync_config, "hrp auto-sync config"),
        (ha.auto_sync_dns_transparent_policy_disabled, "undo hrp auto-sync config dns-transparent-policy"),
        (ha.auto_sync_static_route, "hrp auto-sync config static-route"),
        (ha.auto_sync_policy_based_route, "hrp auto-sync config policy-based-route"),
    )
    for enabled, command in flags:
        if enabled:
            out.add(command)


def _huawei_final(ha: HuaweiHA, out: CliBuilder) -> None:
    if ha.escape_enabled:
        out.add("hrp escape enable")
    if ha.device_role != "none":
        out.add(f"hrp device {ha.device_role}", f"Pins this device as {ha.device_role}.")
    if ha.standby_config_enabled:
        out.add("hrp standby config enable")
    if ha.adjust_bgp_cost_enabled:
        out.add(f"hrp adjust bgp-cost enable {ha.adjust_bgp_slave_cost}".rstrip())
    if ha.adjust_ospf_cost_enabled:
        out.add(f"hrp adjust ospf-cost enable {ha.adjust_ospf_slave_cost}".rstrip())
    if ha.tcp_link_state_check_delay:
        out.add(f"hrp tcp link-state check delay {ha.tcp_link_state_check_delay}")


def _section(title: str, body: CliBuilder, out: CliBuilder) -> None:
    if not len(body):
        return
    out.blank()
    out.comment(title)
    out.extend(body)


def _huawei(ha: HuaweiHA, out: CliBuilder) -> None:
    monitoring = CliBuilder()
    for item in ha.monitoring_items:
        if not item.value:
            continue
        line = f"hrp track {item.type} {item.value}"
        if item.type == "bfd-session-dynamic-interface" and item.least_up_session:
            line += f" least-up-session {item.least_up_session}"
        monitoring.add(line, f"HRP switches over when {item.value} fails.")
    _section("Monitoring Items", monitoring, out)

    heartbeat = CliBuilder()
    for hb in ha.heartbeat_interfaces:
        if hb.interface_name and hb.remote_ip:
            line = f"hrp interface {hb.interface_name} remote {hb.remote_ip}"
            if hb.heartbeat_only:
                line += " heartbeat-only"
            heartbeat.add(line, f"Heartbeat link to {hb.remote_ip}.")
    _section("Heartbeat Interfaces", heartbeat, out)

    packet = CliBuilder()
    _huawei_packet(ha, packet)
    _section("HRP Packet Settings", packet, out)

    backup = CliBuilder()
    _huawei_backup(ha, backup)
    _section("Backup Method", backup, out)

    preempt = CliBuilder()
    if ha.preempt_enabled:
        preempt.add("hrp preempt enable")
        if not is_default(ha.preempt_delay, DEFAULT_PREEMPT_DELAY):
            preempt.add(f"hrp preempt delay {ha.preempt_delay}")
    else:
        preempt.add("undo hrp preempt enable")
    _section("Preemption", preempt, out)

    final = CliBuilder()
    _huawei_final(ha, final)
    _section("Final Enable", final, out)

    out.blank()
    out.add("hrp enable", "Starts hot standby.")


def generate_ha(vendor: Vendor, device_type: DeviceType, config: HAConfig) -> Fragment:
    """Generate HA configuration from the vendor's HA variant."""
    if not config.enabled:
        return Fragment.empty("HA is disabled.")

    out = CliBuilder()
    if vendor == Vendor.H3C and isinstance(config.variant, H3CHA):
        _h3c(config.variant, out)
        summary = "H3C HA configuration generated."
    elif vendor == Vendor.HUAWEI and isinstance(config.variant, HuaweiHA):
        _huawei(config.variant, out)
        summary = "Huawei HRP hot standby configuration generated."
    else:
        return unsupported("HA", vendor)
    return out.build(summary)

"""M-LAG: H3C m-lag system settings and Huawei DFS groups."""
from ...config.schema import DeviceType, Vendor
from ...config.switching import H3CMlag, HuaweiMlag, MLAGConfig
from ..fragment import CliBuilder, Fragment, unsupported
from ..formatting import is_default


def _h3c(cfg: H3CMlag) -> Fragment:
    out = CliBuilder()

    # system-mac, system-number and system-priority prompt for confirmation
    if cfg.system_mac:
        out.add(f"m-lag system-mac {cfg.system_mac}", "Shared system MAC presented by both peers.")
        out.add("Y")
    if cfg.system_number:
        out.add(f"m-lag system-number {cfg.system_number}", "Distinguishes the two M-LAG peers.")
        out.add("Y")
    if not is_default(cfg.system_priority, "32768"):
        out.add(f"m-lag system-priority {cfg.system_priority}")
        out.add("Y")
    if not is_default(cfg.role_priority, "32768"):
        out.add(f"m-lag role priority {cfg.role_priority}", "Lower value is preferred for the primary role.")
    if cfg.standalone.enabled:
        line = "m-lag standalone enable"
        if cfg.standalone.delay_time:
            line += f" delay {cfg.standalone.delay_time}"
        out.add(line, "Keeps forwarding as a standalone device when the peer is lost.")
    if cfg.mac_address_hold:
        out.add("m-lag peer-link mac-address hold")

    keepalive = cfg.keepalive
    if keepalive.enabled:
        line = "m-lag keepalive"
        if keepalive.destination_ip:
            line += f" destination {keepalive.destination_ip}"
        if keepalive.source_ip:
            line += f" source {keepalive.source_ip}"
        if not is_default(keepalive.udp_port, "6400"):
            line += f" udp-port {keepalive.udp_port}"
        if keepalive.vpn_instance:
            line += f" vpn-instance {keepalive.vpn_instance}"
        out.blank()
        out.add(line, "Keepalive link used to detect a failed peer.")

        timers = ""
        if not is_default(keepalive.interval, "1000"):
            timers += f" interval {keepalive.interval}"
        if not is_default(keepalive.timeout, "5"):
            timers += f" timeout {keepalive.timeout}"
        if timers:
            out.add(f"m-lag keepalive{timers}")

    mad = CliBuilder()
    if not is_default(cfg.mad.default_action, "down"):
        mad.add(f"m-lag mad default-action {cfg.mad.default_action}")
    for iface in cfg.mad.exclude_interfaces:
        if iface.name:
            mad.add(f"m-lag mad exclude interface {iface.name}", f"{iface.name} stays up on MAD detection.")
    if cfg.mad.exclude_logical_interfaces:
        mad.add("m-lag mad exclude logical-interfaces")
    for iface in cfg.mad.include_interfaces:
        if iface.name:
            mad.add(f"m-lag mad include interface {iface.name}")
    if cfg.mad.persistent:
        mad.add("m-lag mad persistent")
    if len(mad):
        out.blank()
        out.comment("M-LAG MAD Configuration")
        out.extend(mad)

    if cfg.peer_link_bridge_aggregation_id:
        agg_id = cfg.peer_link_bridge_aggregation_id
        out.blank()
        out.add(f"interface Bridge-Aggregation{agg_id}")
        out.add(f" port m-lag peer-link {agg_id}", "Makes this aggregation the peer-link.")
        if cfg.peer_link_drcp_short_timeout:
            out.add(" m-lag drcp period short")
        out.add("quit")

    for iface in cfg.interfaces:
        if not iface.bridge_aggregation_id:
            continue
        out.blank()
        out.add(f"interface Bridge-Aggregation{iface.bridge_aggregation_id}")
        if iface.group_id:
            out.add(f" port m-lag group {iface.group_id}", f"Pairs this aggregation with M-LAG group {iface.group_id}.")
        if iface.system_mac:
            out.add(f" port m-lag system-mac {iface.system_mac}")
        if iface.system_priority:
            out.add(f" port m-lag system-priority {iface.system_priority}")
        if iface.drcp_short_timeout:
            out.add(" m-lag drcp period short")
        out.add("quit")

    return out.build("H3C M-LAG configuration generated.")


def _huawei(cfg: HuaweiMlag) -> Fragment:
    out = CliBuilder()
    out.note("NOTE: Ensure STP is correctly configured on both devices before applying.")

    out.comment("DFS Group & Dual-Active Detection Configuration")
    out.add(f"dfs-group {cfg.dfs_group_id}", "DFS group pairs the two M-LAG devices.")
    if not is_default(cfg.dfs_group_priority, "100"):
        out.add(f" priority {cfg.dfs_group_priority}")
    if cfg.authentication_password:
        out.add(f" authentication-mode hmac-sha256 password {cfg.authentication_password}")
    if cfg.dual_active_source_ip and cfg.dual_active_peer_ip:
        out.add(
            f" dual-active detection source ip {cfg.dual_active_source_ip} peer {cfg.dual_active_peer_ip}",
            "Heartbeat path used to detect a split.",
        )
    if cfg.active_standby_election and any(i.mode == "active-standby" for i in cfg.interfaces):
        types = cfg.active_standby_election.enabled_types()
        if types:
            out.add(f" m-lag active-standby election {' '.join(types)}")
    out.add("quit")

    if cfg.peer_link_trunk_id:
        out.blank()
        out.comment("Peer-Link Configuration")
        out.add(f"interface Eth-Trunk{cfg.peer_link_trunk_id}")
        out.add(f" peer-link {cfg.peer_link_trunk_id}", "Carries synchronisation traffic between peers.")
        out.add(" stp enable")
        out.add("quit")

    members = [i for i in cfg.interfaces if i.eth_trunk_id and i.mlag_id]
    if members:
        out.blank()
        out.comment("M-LAG Member Interfaces Configuration")
        for iface in members:
            line = f" dfs-group {cfg.dfs_group_id} m-lag {iface.mlag_id}"
            if iface.mode == "active-standby":
                line += " active-standby"
            out.add(f"interface Eth-Trunk{iface.eth_trunk_id}")
            out.add(line, f"Binds Eth-Trunk{iface.eth_trunk_id} to M-LAG {iface.mlag_id}.")
            out.add("quit")

    return out.build("Huawei M-LAG (V-STP mode) configuration.")


def generate_mlag(vendor: Vendor, device_type: DeviceType, config: MLAGConfig) -> Fragment:
    """Generate M-LAG from the vendor-specific variant of the config."""
    if not config.enabled:
        return Fragment.empty("M-LAG is disabled.")
    if vendor == Vendor.H3C and isinstance(config.variant, H3CMlag):
        return _h3c(config.variant)
    if vendor == Vendor.HUAWEI and isinstance(config.variant, HuaweiMlag):
        return _huawei(config.variant)
    return unsupported("M-LAG", vendor)

"""Security-side feature configs.

Time ranges, ACLs, security zones/policies, object groups, IPsec/IKE,
NAT and high availability. NAT and HA carry vendor-specific variants
because the vendor models do not line up field for field.
"""
from dataclasses import dataclass, field
from typing import Optional, Union


# --- Time ranges ---

@dataclass
class DaySelection:
    monday: bool = False
    tuesday: bool = False
    wednesday: bool = False
    thursday: bool = False
    friday: bool = False
    saturday: bool = False
    sunday: bool = False
    daily: bool = False


@dataclass
class PeriodicTime:
    enabled: bool = False
    start_time: str = ""  # HH:MM
    end_time: str = ""
    days: DaySelection = field(default_factory=DaySelection)


@dataclass
class AbsoluteTime:
    enabled: bool = False
    from_time: str = ""
    from_date: str = ""  # YYYY-MM-DD
    to_time: str = ""
    to_date: str = ""


@dataclass
class TimeRange:
    name: str = ""
    periodic: PeriodicTime = field(default_factory=PeriodicTime)
    absolute: AbsoluteTime = field(default_factory=AbsoluteTime)
    id: str = ""


# --- ACL ---

@dataclass
class TCPFlags:
    ack: bool = False
    fin: bool = False
    psh: bool = False
    rst: bool = False
    syn: bool = False
    urg: bool = False

    def set_flags(self) -> list[str]:
        return [name for name in ("ack", "fin", "psh", "rst", "syn", "urg") if getattr(self, name)]


@dataclass
class ACLRule:
    """A basic or advanced ACL rule; basic rules ignore the L4 fields."""
    action: str = "permit"  # permit, deny
    description: str = ""
    rule_id: str = ""
    auto_rule_id: bool = True
    protocol: str = ""
    source_is_any: bool = False
    source_address: str = ""
    source_wildcard: str = ""
    destination_is_any: bool = False
    destination_address: str = ""
    destination_wildcard: str = ""
    source_port_operator: str = ""  # lt, gt, eq, neq, range
    source_port1: str = ""
    source_port2: str = ""
    destination_port_operator: str = ""
    destination_port1: str = ""
    destination_port2: str = ""
    icmp_type: str = ""
    icmp_code: str = ""
    dscp: str = ""
    precedence: str = ""
    tos: str = ""
    established: bool = False
    tcp_flags: TCPFlags = field(default_factory=TCPFlags)
    ttl_operator: str = ""  # Huawei
    ttl_value1: str = ""
    ttl_value2: str = ""
    time_range: str = ""
    vpn_instance: str = ""
    fragment: bool = False
    logging: bool = False
    counting: bool = False
    id: str = ""

    @property
    def explicit_id(self) -> str:
        """Rule number to emit, or '' when the device numbers rules itself."""
        return "" if self.auto_rule_id else self.rule_id


@dataclass
class ACL:
    number: str = ""
    name: str = ""
    description: str = ""
    type: str = "advanced"  # basic, advanced
    match_order: str = "config"  # auto, config
    step: str = ""
    rules: list[ACLRule] = field(default_factory=list)
    id: str = ""


@dataclass
class ACLsConfig:
    enabled: bool = False
    acls: list[ACL] = field(default_factory=list)

    def find(self, acl_id: str) -> Optional[ACL]:
        """Look up an ACL by its stable id."""
        if not acl_id:
            return None
        for acl in self.acls:
            if acl.id == acl_id:
                return acl
        return None


# --- Security zones and policies ---

@dataclass
class SecurityZoneMember:
    interface_name: str = ""
    id: str = ""


@dataclass
class SecurityZone:
    name: str = ""
    priority: str = ""
    description: str = ""
    members: list[SecurityZoneMember] = field(default_factory=list)
    id: str = ""


@dataclass
class SecurityPolicyRule:
    name: str = ""
    description: str = ""
    action: str = "permit"
    source_zone: str = ""
    destination_zone: str = ""
    source_address_type: str = "any"  # any, custom, group
    source_address_value: str = ""
    destination_address_type: str = "any"
    destination_address_value: str = ""
    service_type: str = "any"
    service_value: str = ""
    application: str = ""
    user: str = ""
    time_range: str = ""
    logging: bool = False
    counting: bool = False
    enabled: bool = True
    id: str = ""


@dataclass
class SecurityConfig:
    zones_enabled: bool = False
    policies_enabled: bool = False
    zones: list[SecurityZone] = field(default_factory=list)
    policies: list[SecurityPolicyRule] = field(default_factory=list)


# --- Object groups ---

@dataclass
class AddressMember:
    type: str = "ip-mask"  # ip-mask, range, host-name
    address: str = ""
    mask: str = ""
    start_address: str = ""
    end_address: str = ""
    host_name: str = ""
    id: str = ""


@dataclass
class AddressGroup:
    name: str = ""
    description: str = ""
    members: list[AddressMember] = field(default_factory=list)
    id: str = ""


@dataclass
class ServiceMember:
    protocol: str = "tcp"  # tcp, udp, icmp, custom
    custom_protocol_number: str = ""
    source_port_operator: str = ""
    source_port1: str = ""
    source_port2: str = ""
    destination_port_operator: str = ""
    destination_port1: str = ""
    destination_port2: str = ""
    icmp_type: str = ""
    icmp_code: str = ""
    id: str = ""


@dataclass
class ServiceGroup:
    name: str = ""
    description: str = ""
    members: list[ServiceMember] = field(default_factory=list)
    id: str = ""


@dataclass
class DomainMember:
    name: str = ""
    id: str = ""


@dataclass
class DomainGroup:
    name: str = ""
    description: str = ""
    members: list[DomainMember] = field(default_factory=list)
    id: str = ""


@dataclass
class ObjectGroupConfig:
    address_groups_enabled: bool = False
    service_groups_enabled: bool = False
    domain_groups_enabled: bool = False
    address_groups: list[AddressGroup] = field(default_factory=list)
    service_groups: list[ServiceGroup] = field(default_factory=list)
    domain_groups: list[DomainGroup] = field(default_factory=list)

    @property
    def any_enabled(self) -> bool:
        return self.address_groups_enabled or self.service_groups_enabled or self.domain_groups_enabled


# --- IPsec / IKE ---

@dataclass
class TransformSet:
    name: str = ""
    protocol: str = "esp"  # esp, ah, ah-esp
    encapsulation_mode: str = "tunnel"  # tunnel, transport, auto
    esp_encryption: str = ""
    esp_auth: str = ""
    ah_auth: str = ""
    pfs: str = ""
    id: str = ""


@dataclass
class PresharedKey:
    address: str = ""
    mask: str = ""
    key: str = ""
    id: str = ""


@dataclass
class IKEKeychain:
    name: str = ""
    pre_shared_keys: list[PresharedKey] = field(default_factory=list)
    id: str = ""


@dataclass
class IKEProfile:
    name: str = ""
    keychain_id: str = ""
    match_remote_address: str = ""
    local_identity: str = ""  # "<type> <value>"
    id: str = ""


@dataclass
class ManualSAKeys:
    inbound_spi: str = ""
    outbound_spi: str = ""
    inbound_key: str = ""
    outbound_key: str = ""


@dataclass
class ManualSA:
    esp: Optional[ManualSAKeys] = None
    ah: Optional[ManualSAKeys] = None


@dataclass
class IPsecPolicy:
    name: str = ""
    seq_number: str = ""
    mode: str = "isakmp"  # isakmp, manual
    acl_id: str = ""
    transform_set_ids: list[str] = field(default_factory=list)
    remote_address: str = ""
    local_address: str = ""
    ike_profile_id: str = ""
    manual_sa: Optional[ManualSA] = field(default=None, metadata={"key": "manualSA"})
    id: str = ""


@dataclass
class IPsecConfig:
    enabled: bool = False
    transform_sets: list[TransformSet] = field(default_factory=list)
    ike_keychains: list[IKEKeychain] = field(default_factory=list)
    ike_profiles: list[IKEProfile] = field(default_factory=list)
    policies: list[IPsecPolicy] = field(default_factory=list)

    def find_transform_set(self, ts_id: str) -> Optional[TransformSet]:
        return next((ts for ts in self.transform_sets if ts.id == ts_id), None)

    def find_keychain(self, kc_id: str) -> Optional[IKEKeychain]:
        return next((kc for kc in self.ike_keychains if kc.id == kc_id), None)

    def find_profile(self, profile_id: str) -> Optional[IKEProfile]:
        return next((p for p in self.ike_profiles if p.id == profile_id), None)

    def find_policy(self, policy_id: str) -> Optional[IPsecPolicy]:
        return next((p for p in self.policies if p.id == policy_id), None)


# --- NAT ---

@dataclass
class NATAddressPool:
    group_id: str = ""
    name: str = ""
    start_address: str = ""
    end_address: str = ""
    id: str = ""


@dataclass
class NATStaticRule:
    direction: str = "outbound"  # outbound, inbound
    type: str = "one-to-one"  # one-to-one, net-to-net, address-group
    local_ip: str = ""
    global_ip: str = ""
    local_start_ip: str = ""
    local_end_ip: str = ""
    global_network: str = ""
    global_mask: str = ""
    global_start_ip: str = ""
    global_end_ip: str = ""
    local_network: str = ""
    local_mask: str = ""
    local_address_group: str = ""
    global_address_group: str = ""
    acl_id: str = ""
    reversible: bool = False
    id: str = ""


@dataclass
class NATPortMappingRule:
    interface_name: str = ""
    # Only load-balancing and acl-based change the rendered shape
    mapping_type: str = "single-global-ip-no-port"
    protocol: str = "tcp"  # tcp, udp, icmp, all
    policy_name: str = ""
    global_address_type: str = "ip"  # ip, interface
    global_address: str = ""
    global_end_address: str = ""
    global_port: str = ""
    global_start_port: str = ""
    global_end_port: str = ""
    local_address: str = ""
    local_end_address: str = ""
    local_port: str = ""
    local_start_port: str = ""
    local_end_port: str = ""
    server_group_id: str = ""
    acl_id: str = ""
    reversible: bool = False
    id: str = ""


@dataclass
class NATServerGroupMember:
    ip: str = ""
    port: str = ""
    weight: str = ""
    id: str = ""


@dataclass
class NATServerGroup:
    group_id: str = ""
    members: list[NATServerGroupMember] = field(default_factory=list)
    id: str = ""


@dataclass
class H3CGlobalNatRule:
    name: str = ""
    description: str = ""
    enabled: bool = True
    counting_enabled: bool = False
    source_zone: str = ""
    destination_zone: str = ""
    source_ip_type: str = "any"  # any, object-group, host, subnet
    source_ip_value: str = ""
    destination_ip_type: str = "any"
    destination_ip_value: str = ""
    service_type: str = "any"  # any, object-group
    service_value: str = ""
    snat_action: str = "none"  # none, no-pat, pat, easy-ip, static, no-nat
    snat_address_group: str = ""
    snat_port_preserved: bool = False
    snat_reversible: bool = False
    snat_static_global_value: str = ""
    dnat_action: str = "none"  # none, static, no-nat
    dnat_local_address: str = ""
    dnat_local_port: str = ""
    id: str = ""


@dataclass
class StaticNATSettings:
    enabled: bool = False
    rules: list[NATStaticRule] = field(default_factory=list)


@dataclass
class PortMappingSettings:
    enabled: bool = False
    rules: list[NATPortMappingRule] = field(default_factory=list)


@dataclass
class AddressPoolSettings:
    enabled: bool = False
    pools: list[NATAddressPool] = field(default_factory=list)


@dataclass
class GlobalPolicySettings:
    enabled: bool = False
    rules: list[H3CGlobalNatRule] = field(default_factory=list)


@dataclass
class H3CNat:
    static_outbound: StaticNATSettings = field(default_factory=StaticNATSettings)
    port_mapping: PortMappingSettings = field(default_factory=PortMappingSettings)
    address_pool: AddressPoolSettings = field(default_factory=AddressPoolSettings)
    server_groups: list[NATServerGroup] = field(default_factory=list)
    global_policy: GlobalPolicySettings = field(default_factory=GlobalPolicySettings)


@dataclass
class HuaweiPoolSection:
    section_id: str = ""
    start_address: str = ""
    end_address: str = ""
    id: str = ""


@dataclass
class HuaweiNATAddressPool:
    group_name: str = ""
    group_number: str = ""
    sections: list[HuaweiPoolSection] = field(default_factory=list)
    mode: str = "pat"  # pat, no-pat-global, no-pat-local
    route_enable: bool = False
    id: str = ""


@dataclass
class HuaweiNATRule:
    rule_name: str = ""
    source_address: str = ""
    source_mask: str = ""
    destination_address: str = ""
    destination_mask: str = ""
    action: str = "source-nat"  # source-nat, no-nat
    nat_address_group: str = ""
    easy_ip: bool = False
    id: str = ""


@dataclass
class HuaweiNATServer:
    name: str = ""
    zone: str = ""
    protocol: str = "any"  # tcp, udp, sctp, icmp, any
    global_address_type: str = "ip"  # ip, interface
    global_address: str = ""
    global_address_end: str = ""
    global_interface: str = ""
    global_port: str = ""
    global_port_end: str = ""
    inside_host_address: str = ""
    inside_host_address_end: str = ""
    inside_host_port: str = ""
    inside_host_port_end: str = ""
    no_reverse: bool = False
    route: bool = False
    disabled: bool = False
    description: str = ""
    id: str = ""


@dataclass
class HuaweiNat:
    address_pools: list[HuaweiNATAddressPool] = field(default_factory=list)
    rules: list[HuaweiNATRule] = field(default_factory=list)
    servers: list[HuaweiNATServer] = field(default_factory=list)


@dataclass
class NATConfig:
    """NAT config; variant is selected by the node's vendor."""
    enabled: bool = False
    variant: Union[H3CNat, HuaweiNat, None] = field(
        default=None, metadata={"vendor_variant": True}
    )


# --- High availability ---

@dataclass
class TrackItem:
    id: str = ""
    type: str = "interface"
    value: str = ""
    least_up_session: str = ""
    key: str = ""


@dataclass
class ControlChannel:
    local_ip: str = ""
    remote_ip: str = ""
    port: str = ""
    keepalive_interval: str = ""
    keepalive_count: str = ""


@dataclass
class Failback:
    enabled: bool = False
    delay_time: str = ""


@dataclass
class HAMonitoring:
    type: str = "none"  # none, track
    track_items: list[TrackItem] = field(default_factory=list)

    @property
    def tracks(self) -> list[TrackItem]:
        return self.track_items if self.type == "track" else []


@dataclass
class H3CHA:
    """H3C RBM (remote-backup group)."""
    device_role: str = "primary"  # primary, secondary
    work_mode: str = "active-standby"  # active-standby, dual-active
    control_channel: ControlChannel = field(default_factory=ControlChannel)
    data_channel_interface: str = ""
    hot_backup_enabled: bool = False
    auto_sync_enabled: bool = False
    sync_check_enabled: bool = False
    failback: Failback = field(default_factory=Failback)
    monitoring: HAMonitoring = field(default_factory=HAMonitoring)


@dataclass
class HeartbeatInterface:
    interface_name: str = ""
    remote_ip: str = ""
    heartbeat_only: bool = False
    id: str = ""


@dataclass
class HuaweiHA:
    """Huawei HRP hot standby."""
    monitoring_items: list[TrackItem] = field(default_factory=list)
    heartbeat_interfaces: list[HeartbeatInterface] = field(default_factory=list)
    authentication_key: str = ""
    checksum_enabled: bool = False
    encryption_enabled: bool = True
    encryption_key_refresh_enabled: bool = False
    encryption_key_refresh_interval: str = ""
    hello_interval: str = "1000"
    ip_packet_priority: str = "6"
    escape_enabled: bool = False
    auto_sync_connection_status: bool = False
    mirror_session_enabled: bool = False
    auto_sync_config: bool = False
    auto_sync_dns_transparent_policy_disabled: bool = False
    auto_sync_static_route: bool = False
    auto_sync_policy_based_route: bool = False
    preempt_enabled: bool = True
    preempt_delay: str = "60"
    device_role: str = "none"  # active, standby, none
    standby_config_enabled: bool = False
    adjust_bgp_cost_enabled: bool = False
    adjust_bgp_slave_cost: str = ""
    adjust_ospf_cost_enabled: bool = False
    adjust_ospf_slave_cost: str = ""
    tcp_link_state_check_delay: str = ""


@dataclass
class HAConfig:
    """HA config; variant is selected by the node's vendor."""
    enabled: bool = False
    variant: Union[H3CHA, HuaweiHA, None] = field(
        default=None, metadata={"vendor_variant": True}
    )

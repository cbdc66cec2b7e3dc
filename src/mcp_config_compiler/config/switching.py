"""Layer-2 and interface feature configs.

VLAN interfaces, physical interface IP settings, link aggregation, port
isolation, spanning tree, stacking and M-LAG.
"""
from dataclasses import dataclass, field
from typing import Optional, Union


# --- VLAN / interface IP ---

@dataclass
class InterfacePoolConfig:
    """Interface-scoped DHCP pool parameters."""
    network: str = ""
    subnet_mask: str = ""
    gateway: str = ""
    dns_server: str = ""
    lease_days: str = ""
    lease_hours: str = ""
    lease_minutes: str = ""
    lease_seconds: str = ""


@dataclass
class VLANInterface:
    """An SVI (Vlanif / Vlan-interface) with its bindings."""
    vlan_id: str = ""
    ip_address: str = ""
    subnet_mask: str = ""
    vlan_description: str = ""
    interface_description: str = ""
    enable_dhcp: bool = field(default=False, metadata={"key": "enableDHCP"})
    dhcp_mode: str = "global"  # global, interface
    selected_pool: str = ""
    interface_pool_config: Optional[InterfacePoolConfig] = None
    packet_filter_inbound_acl_id: str = ""
    packet_filter_outbound_acl_id: str = ""
    ipsec_policy_id: str = ""
    nat_static_enable: bool = False
    huawei_nat_enable: bool = False
    nat_hairpin_enable: bool = False


@dataclass
class VLANConfig:
    enabled: bool = False
    vlan_interfaces: list[VLANInterface] = field(default_factory=list)


@dataclass
class PhysicalInterfaceIPConfig:
    """IP settings on a routed physical interface."""
    interface_name: str = ""
    ip_address: str = ""
    subnet_mask: str = ""
    description: str = ""
    enable_dhcp: bool = field(default=False, metadata={"key": "enableDHCP"})
    dhcp_mode: str = "global"
    selected_pool: str = ""
    interface_pool_config: Optional[InterfacePoolConfig] = None
    packet_filter_inbound_acl_id: str = ""
    packet_filter_outbound_acl_id: str = ""
    ipsec_policy_id: str = ""
    nat_static_enable: bool = False
    huawei_nat_enable: bool = False
    nat_hairpin_enable: bool = False


@dataclass
class InterfaceIPConfig:
    enabled: bool = False
    interfaces: list[PhysicalInterfaceIPConfig] = field(default_factory=list)


# --- Link aggregation ---

@dataclass
class LinkAggregationMember:
    """A physical member port of an aggregation group."""
    name: str = ""
    id: str = ""
    lacp_mode: str = "active"  # active, passive (H3C)
    lacp_period: str = "long"  # short, long (H3C)
    port_priority: str = ""


@dataclass
class AggregationGroup:
    """One Port-channel / Eth-Trunk / Bridge-Aggregation."""
    group_id: str = ""
    # Cisco: active, passive, on; Huawei: manual, lacp-static; H3C: static, dynamic
    mode: str = ""
    members: list[LinkAggregationMember] = field(default_factory=list)
    system_priority: str = ""
    load_balance_algorithm: str = ""
    description: str = ""
    interface_mode: str = "unconfigured"  # unconfigured, access, trunk, l3
    access_vlan: str = ""
    trunk_native_vlan: str = ""
    trunk_allowed_vlans: str = ""
    # Huawei
    preempt_enabled: bool = False
    preempt_delay: str = ""
    timeout: str = "slow"  # fast, slow
    huawei_lacp_priority_mode: str = "default"  # default, system-priority

    @property
    def member_names(self) -> list[str]:
        return [m.name for m in self.members if m.name]


@dataclass
class LinkAggregationConfig:
    enabled: bool = False
    groups: list[AggregationGroup] = field(default_factory=list)

    def is_member(self, port_name: str) -> bool:
        """Check if a port belongs to any aggregation group."""
        return any(port_name in group.member_names for group in self.groups)


# --- Port isolation ---

@dataclass
class PortIsolationGroup:
    group_id: str = ""
    interfaces: list[str] = field(default_factory=list)
    community_vlans: str = ""  # H3C


@dataclass
class PortIsolationConfig:
    enabled: bool = False
    mode: str = "l2"  # l2, all (Huawei)
    excluded_vlans: str = ""  # Huawei
    groups: list[PortIsolationGroup] = field(default_factory=list)


# --- Spanning tree ---

@dataclass
class MSTPRegion:
    region_name: str = ""
    revision_level: str = ""
    vlan_mapping_mode: str = "manual"  # manual, modulo
    modulo_value: str = ""


@dataclass
class MSTPInstance:
    instance_id: str = ""
    vlan_list: str = ""
    priority: str = ""
    root_bridge: str = "none"  # none, primary, secondary


@dataclass
class PVSTVlan:
    vlan_list: str = ""
    priority: str = ""
    root_bridge: str = "none"


@dataclass
class InstanceCost:
    instance_list: str = ""
    cost: str = ""


@dataclass
class InstancePriority:
    instance_list: str = ""
    priority: str = ""


@dataclass
class VlanCost:
    vlan_list: str = ""
    cost: str = ""


@dataclass
class STPPortConfig:
    interface_name: str = ""
    port_priority: str = ""
    path_cost: str = ""
    edge_port: bool = False
    bpdu_guard: bool = False
    stp_cost: str = ""
    pvst_vlan_costs: list[VlanCost] = field(default_factory=list)
    mstp_instance_costs: list[InstanceCost] = field(default_factory=list)
    mstp_instance_priorities: list[InstancePriority] = field(default_factory=list)


@dataclass
class STPConfig:
    enabled: bool = False
    mode: str = "mstp"  # stp, rstp, pvst, mstp
    priority: str = "32768"
    max_age: str = ""
    hello_time: str = ""
    forward_delay: str = ""
    root_bridge: str = "none"
    path_cost_standard: str = ""  # dot1d-1998, dot1t, legacy
    mstp_region: MSTPRegion = field(default_factory=MSTPRegion)
    mstp_instances: list[MSTPInstance] = field(default_factory=list)
    pvst_vlans: list[PVSTVlan] = field(default_factory=list)
    port_configs: list[STPPortConfig] = field(default_factory=list)


# --- Stacking ---

@dataclass
class StackPort:
    """An IRF / stack port and the physical interfaces bound to it."""
    id: str = "1"
    port_group: list[str] = field(default_factory=list)


@dataclass
class StackMember:
    member_id: str = ""
    new_member_id: str = ""
    priority: str = ""
    irf_ports: list[StackPort] = field(default_factory=list)

    @property
    def effective_id(self) -> str:
        return self.new_member_id or self.member_id

    @property
    def renumbers(self) -> bool:
        return bool(self.member_id and self.new_member_id and self.member_id != self.new_member_id)

    @property
    def stack_interfaces(self) -> list[str]:
        """Interfaces of the first stack port, empty names dropped."""
        if not self.irf_ports:
            return []
        return [iface for iface in self.irf_ports[0].port_group if iface]


@dataclass
class StackingConfig:
    enabled: bool = False
    model_type: str = "new"  # new, old
    domain_id: str = ""
    members: list[StackMember] = field(default_factory=list)


# --- M-LAG ---

@dataclass
class NamedInterface:
    name: str = ""
    id: str = ""


@dataclass
class MLAGInterface:
    """H3C M-LAG member aggregate."""
    bridge_aggregation_id: str = ""
    group_id: str = ""
    system_mac: str = ""
    system_priority: str = ""
    drcp_short_timeout: bool = False


@dataclass
class MLAGStandalone:
    enabled: bool = False
    delay_time: str = ""


@dataclass
class MLAGKeepalive:
    enabled: bool = False
    destination_ip: str = ""
    source_ip: str = ""
    udp_port: str = "6400"
    vpn_instance: str = ""
    interval: str = "1000"
    timeout: str = "5"


@dataclass
class MLAGMad:
    default_action: str = "down"  # down, none
    exclude_interfaces: list[NamedInterface] = field(default_factory=list)
    exclude_logical_interfaces: bool = False
    include_interfaces: list[NamedInterface] = field(default_factory=list)
    persistent: bool = False


@dataclass
class H3CMlag:
    """H3C M-LAG: system identity, keepalive, MAD and peer-link."""
    system_mac: str = ""
    system_number: str = ""
    system_priority: str = "32768"
    role_priority: str = "32768"
    standalone: MLAGStandalone = field(default_factory=MLAGStandalone)
    mac_address_hold: bool = False
    peer_link_bridge_aggregation_id: str = ""
    peer_link_drcp_short_timeout: bool = False
    interfaces: list[MLAGInterface] = field(default_factory=list)
    keepalive: MLAGKeepalive = field(default_factory=MLAGKeepalive)
    mad: MLAGMad = field(default_factory=MLAGMad)


@dataclass
class HuaweiMLAGInterface:
    eth_trunk_id: str = ""
    mlag_id: str = ""
    mode: str = "dual-active"  # dual-active, active-standby


@dataclass
class ActiveStandbyElection:
    arp: bool = False
    nd: bool = False
    igmp: bool = False
    dhcp: bool = False

    def enabled_types(self) -> list[str]:
        return [name for name in ("arp", "nd", "igmp", "dhcp") if getattr(self, name)]


@dataclass
class HuaweiMlag:
    """Huawei M-LAG: DFS group, dual-active detection, peer-link."""
    dfs_group_id: str = "1"
    dfs_group_priority: str = "100"
    authentication_password: str = ""
    dual_active_source_ip: str = ""
    dual_active_peer_ip: str = ""
    peer_link_trunk_id: str = ""
    interfaces: list[HuaweiMLAGInterface] = field(default_factory=list)
    active_standby_election: Optional[ActiveStandbyElection] = None


@dataclass
class MLAGConfig:
    """M-LAG config; variant is selected by the node's vendor."""
    enabled: bool = False
    variant: Union[H3CMlag, HuaweiMlag, None] = field(
        default=None, metadata={"vendor_variant": True}
    )

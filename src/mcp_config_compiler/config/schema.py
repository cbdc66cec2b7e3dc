"""Core topology schema: vendors, device types, ports, connections and nodes.

Feature sub-configs live in switching.py, services.py and security.py;
NodeConfig below stitches them together.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .switching import (
    VLANConfig,
    InterfaceIPConfig,
    LinkAggregationConfig,
    PortIsolationConfig,
    STPConfig,
    StackingConfig,
    MLAGConfig,
)
from .services import (
    DHCPConfig,
    DHCPRelayConfig,
    DHCPSnoopingConfig,
    RoutingConfig,
    VRRPConfig,
    SSHConfig,
    WirelessConfig,
    GREVPNConfig,
)
from .security import (
    TimeRange,
    ACLsConfig,
    SecurityConfig,
    ObjectGroupConfig,
    IPsecConfig,
    NATConfig,
    HAConfig,
)


class Vendor(str, Enum):
    """Supported command dialects."""
    CISCO = "Cisco"
    HUAWEI = "Huawei"
    H3C = "H3C"
    GENERIC = "Generic"   # No dialect; generators emit nothing or a comment


class DeviceType(str, Enum):
    """Device role as drawn in the topology editor."""
    ROUTER = "Router"
    L3_SWITCH = "L3 Switch"
    L2_SWITCH = "L2 Switch"
    FIREWALL = "Firewall"
    AP = "Access Point"
    AC = "Access Controller"
    PC = "PC"
    SERVER = "Server"
    PRINTER = "Print"
    MONITOR = "Monitor"


class InterfaceMode(str, Enum):
    """Layer-2/3 mode of an interface or link."""
    UNCONFIGURED = "unconfigured"
    ACCESS = "access"
    TRUNK = "trunk"
    L3 = "l3"


@dataclass
class Port:
    """A physical port on a node."""
    id: str
    name: str = ""
    status: str = "available"  # available, connected


@dataclass
class Endpoint:
    """One end of a topology edge."""
    node_id: str = ""
    port_id: str = ""


@dataclass
class LinkConfig:
    """Per-link interface mode settings."""
    mode: InterfaceMode = InterfaceMode.UNCONFIGURED
    access_vlan: str = ""
    trunk_native_vlan: str = ""
    trunk_allowed_vlans: str = ""
    # Extra port numbers (e.g. "2-4,7") sharing the local port's base name
    apply_to_port_range: str = ""


@dataclass
class Connection:
    """Topology edge between two node ports."""
    id: str = ""
    source: Endpoint = field(default_factory=Endpoint, metadata={"key": "from"})
    target: Endpoint = field(default_factory=Endpoint, metadata={"key": "to"})
    config: LinkConfig = field(default_factory=LinkConfig)

    def touches(self, node_id: str) -> bool:
        """Check if either end of the edge is on the given node."""
        return self.source.node_id == node_id or self.target.node_id == node_id

    def local_port_id(self, node_id: str) -> Optional[str]:
        """Port id on the given node, preferring the 'from' end."""
        if self.source.node_id == node_id:
            return self.source.port_id
        if self.target.node_id == node_id:
            return self.target.port_id
        return None


@dataclass
class NodeConfig:
    """All feature configs of a device."""
    dhcp: DHCPConfig = field(default_factory=DHCPConfig)
    dhcp_relay: DHCPRelayConfig = field(default_factory=DHCPRelayConfig)
    dhcp_snooping: DHCPSnoopingConfig = field(default_factory=DHCPSnoopingConfig)
    vlan: VLANConfig = field(default_factory=VLANConfig)
    interface_ip: InterfaceIPConfig = field(
        default_factory=InterfaceIPConfig, metadata={"key": "interfaceIP"}
    )
    link_aggregation: LinkAggregationConfig = field(default_factory=LinkAggregationConfig)
    port_isolation: PortIsolationConfig = field(default_factory=PortIsolationConfig)
    stp: STPConfig = field(default_factory=STPConfig)
    stacking: StackingConfig = field(default_factory=StackingConfig)
    mlag: MLAGConfig = field(default_factory=MLAGConfig)
    routing: RoutingConfig = field(default_factory=RoutingConfig)
    vrrp: VRRPConfig = field(default_factory=VRRPConfig)
    acl: ACLsConfig = field(default_factory=ACLsConfig)
    nat: NATConfig = field(default_factory=NATConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    object_groups: ObjectGroupConfig = field(default_factory=ObjectGroupConfig)
    ssh: SSHConfig = field(default_factory=SSHConfig)
    wireless: WirelessConfig = field(default_factory=WirelessConfig)
    time_ranges: list[TimeRange] = field(default_factory=list)
    ha: HAConfig = field(default_factory=HAConfig)
    ipsec: IPsecConfig = field(default_factory=IPsecConfig)
    gre: GREVPNConfig = field(default_factory=GREVPNConfig)


@dataclass
class Node:
    """A device in the topology; the unit of compilation."""
    id: str
    name: str = ""
    vendor: Vendor = Vendor.GENERIC
    device_type: DeviceType = field(default=DeviceType.L3_SWITCH, metadata={"key": "type"})
    ports: list[Port] = field(default_factory=list)
    config: NodeConfig = field(default_factory=NodeConfig)

    def port_name(self, port_id: Optional[str]) -> str:
        """Resolve a port id to its name ('' if unknown)."""
        for port in self.ports:
            if port.id == port_id:
                return port.name
        return ""

"""Per-feature CLI generators.

Every generator takes (vendor, device_type, feature config, ...) and
returns a Fragment. Disabled features give an empty Fragment; a vendor
without a rendering gives a one-line unsupported comment.
"""
from .acl import generate_acl, generate_time_ranges
from .dhcp import generate_dhcp
from .dhcp_relay import generate_dhcp_relay
from .dhcp_snooping import generate_dhcp_snooping
from .gre import generate_gre
from .ha import generate_ha
from .interface import generate_interface_ip, generate_vlan_interfaces
from .ipsec import generate_ipsec
from .link_aggregation import aggregate_interface_name, generate_link_aggregation
from .link_mode import generate_link_mode
from .mlag import generate_mlag
from .nat import generate_nat
from .object_groups import generate_object_groups
from .port_isolation import generate_port_isolation
from .routing import generate_routing
from .security import generate_security
from .ssh import generate_ssh
from .stacking import generate_stacking
from .stp import generate_stp
from .vrrp import generate_vrrp
from .wireless import generate_wireless

__all__ = [
    # Switching
    "generate_vlan_interfaces",
    "generate_interface_ip",
    "generate_link_aggregation",
    "aggregate_interface_name",
    "generate_link_mode",
    "generate_port_isolation",
    "generate_stp",
    "generate_stacking",
    "generate_mlag",
    # Services
    "generate_dhcp",
    "generate_dhcp_relay",
    "generate_dhcp_snooping",
    "generate_routing",
    "generate_vrrp",
    "generate_ssh",
    "generate_gre",
    "generate_wireless",
    # Security
    "generate_time_ranges",
    "generate_acl",
    "generate_security",
    "generate_object_groups",
    "generate_ipsec",
    "generate_nat",
    "generate_ha",
]

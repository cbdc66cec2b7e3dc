"""Cisco IOS commands and their Huawei / H3C equivalents."""
from ..rules import CliRule, rule

TRUNK_KEYWORDS = ("add", "remove", "except", "none", "all")


def _cisco_to_range(vlans: str) -> str:
    """'10,20-30' -> '10 20 to 30'."""
    return vlans.replace(",", " ").replace("-", " to ")


def _vlan_create(prefix: str):
    def convert(params: list[str], _named: dict[str, str]) -> str:
        return f"{prefix} {_cisco_to_range(''.join(params))}"
    return convert


def _trunk_allowed(command: str):
    def convert(params: list[str], _named: dict[str, str]) -> str:
        params = list(params)
        keyword = params.pop(0) if params and params[0] in TRUNK_KEYWORDS else ""
        vlans = _cisco_to_range(" ".join(params))
        if keyword == "remove":
            return f"undo {command} {vlans}"
        if keyword == "all":
            return f"{command} all"
        if keyword == "none":
            return f"undo {command} all"
        return f"{command} {vlans}"
    return convert


def _stp_mode(_params: list[str], named: dict[str, str]) -> str:
    mode = named.get("mode")
    if mode == "mst":
        return "stp mode mstp"
    if mode == "rapid-pvst":
        return "stp mode rstp"
    return "stp mode stp"


GENERAL = [
    rule("configure terminal", "Enter global configuration mode.",
         huawei="system-view", h3c="system-view"),
    rule("hostname", "Set the device hostname to $1.",
         huawei="sysname $1", h3c="sysname $1"),
    rule("show ip interface brief", "Show a brief summary of IP interface status and addressing.",
         huawei="display ip interface brief", h3c="display ip interface brief"),
    rule("show running-config", "Show the running configuration.",
         huawei="display current-configuration", h3c="display current-configuration"),
    rule("copy running-config startup-config", "Save the running configuration to the startup configuration.",
         huawei="save", h3c="save"),
]

INTERFACE = [
    rule("interface", "Enter configuration mode for interface $1.",
         huawei="interface $1", h3c="interface $1"),
    rule("ip address", "Assign IP address $1 with subnet mask $2 to the interface.",
         huawei="ip address $1 $2", h3c="ip address $1 $2"),
    rule("description", "Set the interface or VLAN description to $*.",
         huawei="description $*", h3c="description $*"),
    rule("shutdown", "Administratively disable the interface.",
         huawei="shutdown", h3c="shutdown"),
    rule("no shutdown", "Enable the interface.",
         huawei="undo shutdown", h3c="undo shutdown"),
]

DHCP = [
    rule("service dhcp", "Enable the DHCP service globally.",
         huawei="dhcp enable", h3c="dhcp enable"),
    rule("ip dhcp pool", "Create DHCP pool $1 and enter pool configuration mode.",
         huawei="ip pool $1", h3c="dhcp server ip-pool $1"),
    rule("network", "Define network $1 with mask $2 for the DHCP pool.",
         huawei="network $1 mask $2", h3c="network $1 mask $2",
         regex=r"^network\s+\S+\s+\S+$"),
    rule("default-router", "Hand out $1 as the default gateway.",
         huawei="gateway-list $1", h3c="gateway-list $1"),
    rule("dns-server", "Hand out $* as DNS servers.",
         huawei="dns-list $*", h3c="dns-list $*"),
    rule("lease", "Set the lease time to $1 days $2 hours $3 minutes.",
         huawei="lease day $1 hour $2 minute $3", h3c="expired day $1 hour $2 minute $3"),
    rule("ip dhcp excluded-address", "Exclude addresses $1 to $2 from DHCP assignment.",
         huawei="# Configure inside the ip pool\n excluded-ip-address $1 $2",
         h3c="# Configure inside the dhcp server ip-pool\n forbidden-ip $1 $2"),
    rule("ip helper-address", "Relay DHCP requests received on this interface to server $1.",
         huawei="dhcp select relay\n dhcp relay server-ip $1",
         h3c="dhcp select relay\n dhcp relay server-address $1"),
]

VLAN = [
    rule("vlan", "Create VLAN $* and enter VLAN configuration mode.",
         huawei=_vlan_create("vlan batch"), h3c=_vlan_create("vlan")),
    rule("name", "Name the current VLAN $*.",
         huawei="# In VLAN view\n description $*", h3c="# In VLAN view\n description $*"),
    rule("switchport mode access", "Put the interface in access mode.",
         huawei="port link-type access", h3c="port link-type access"),
    rule("switchport access vlan", "Assign the access interface to VLAN $1.",
         huawei="port default vlan $1", h3c="port access vlan $1"),
    rule("switchport mode trunk", "Put the interface in trunk mode.",
         huawei="port link-type trunk", h3c="port link-type trunk"),
    rule("switchport trunk allowed vlan", "Set the VLANs allowed on the trunk to $*.",
         huawei=_trunk_allowed("port trunk allow-pass vlan"), h3c=_trunk_allowed("port trunk permit vlan")),
    rule("switchport trunk native vlan", "Set the trunk native VLAN to $1.",
         huawei="port trunk pvid vlan $1", h3c="port trunk pvid vlan $1"),
    rule("switchport protected",
         "Make the interface a protected port. Protected ports in the same VLAN cannot reach each other, "
         "which is one way to isolate ports.",
         huawei="port-isolate enable group 1", h3c="port-isolate enable group 1"),
]

LINK_AGGREGATION = [
    rule("interface Port-channel", "Create and enter port-channel interface $1.",
         huawei="interface Eth-Trunk$1", h3c="interface Bridge-Aggregation$1"),
    rule("channel-group", "Add the interface to channel group $1 in mode $2. "
         "Huawei and H3C set the mode on the aggregate interface.",
         huawei="eth-trunk $1\n# Set the mode under the Eth-Trunk interface (e.g. mode lacp-static)",
         h3c="port link-aggregation group $1\n"
             "# Set the mode under the Bridge-Aggregation interface (e.g. link-aggregation mode dynamic)"),
    rule("port-channel load-balance", "Set the port-channel load-balancing method to $1.",
         huawei="# Configure under the Eth-Trunk interface\n load-balance $1",
         h3c="link-aggregation global load-sharing mode $1"),
    rule("lacp system-priority", "Set the LACP system priority to $1. Lower values win the LACP election.",
         huawei="lacp system-priority $1", h3c="lacp system-priority $1"),
    rule("lacp port-priority", "Set the LACP port priority to $1. Lower values are preferred as active links.",
         huawei="lacp priority $1", h3c="link-aggregation port-priority $1"),
]

ROUTING = [
    rule("ip route", "Add a static route to $1 $2 via next hop $3.",
         huawei="ip route-static $1 $2 $3", h3c="ip route-static $1 $2 $3"),
    rule("router ospf", "Start OSPF process $1.",
         huawei="ospf $1", h3c="ospf $1"),
    rule("router-id", "Set the OSPF router ID to $1.",
         huawei="# In OSPF process view\n router-id $1", h3c="# In OSPF process view\n router-id $1"),
    rule("network", "Advertise network $1 (wildcard $2) into OSPF area $4.",
         huawei="# In OSPF area view\n network $1 $2", h3c="# In OSPF area view\n network $1 $2",
         regex=r"^network\s+\S+\s+\S+\s+area\s+\S+$"),
    rule("redistribute static", "Redistribute static routes into OSPF.",
         huawei="import-route static", h3c="import-route static"),
    rule("ip ospf priority",
         "Set the interface's OSPF DR election priority to $1 (0-255, default 1). Higher values are more "
         "likely to become DR; 0 never becomes DR or BDR.",
         huawei="ospf dr-priority $1", h3c="ospf dr-priority $1"),
]

VRRP = [
    rule("vrrp", "Set virtual IP ${vip} for VRRP group ${group} on this interface.",
         huawei="vrrp vrid ${group} virtual-ip ${vip}", h3c="vrrp vrid ${group} virtual-ip ${vip}",
         regex=r"^vrrp\s+(?P<group>\d+)\s+ip\s+(?P<vip>\S+)$"),
    rule("vrrp", "Set the priority of VRRP group ${group} to ${prio}.",
         huawei="vrrp vrid ${group} priority ${prio}", h3c="vrrp vrid ${group} priority ${prio}",
         regex=r"^vrrp\s+(?P<group>\d+)\s+priority\s+(?P<prio>\d+)$"),
]

OBJECT_GROUPS = [
    rule("object-group network", "Create network object group $1 to collect hosts, subnets and ranges.",
         huawei="ip address-set $1 type object", h3c="object-group ip address $1"),
    rule("object-group service", "Create service object group $1 to collect protocols and ports.",
         huawei="ip service-set $1 type object", h3c="object-group service $1"),
]

IPSEC = [
    rule("crypto ipsec transform-set", "Create IPsec transform set $1 with its encryption and hash algorithms.",
         huawei="ipsec proposal $1", h3c="ipsec transform-set $1"),
    rule("crypto isakmp key", "Set pre-shared key $1 for peer address $3.",
         huawei="ike keychain <name>\n pre-shared-key address $3 key simple $1",
         h3c="ike keychain <name>\n pre-shared-key address $3 key simple $1"),
    rule("crypto isakmp profile", "Create IKE profile $1.",
         huawei="# Huawei has no IKE profile; the settings live under ike peer",
         h3c="ike profile $1"),
    rule("crypto map", "Create crypto map $1 with sequence number $2.",
         huawei="ipsec policy $1 $2", h3c="ipsec policy $1 $2 isakmp"),
    rule("match address", "Protect the traffic matched by ACL $1.",
         huawei="security acl $1", h3c="security acl $1"),
    rule("set peer", "Set the IPsec tunnel peer address to $1.",
         huawei="remote-address $1", h3c="remote-address $1"),
]

IKE = [
    rule("crypto isakmp policy", "Create IKE (ISAKMP) policy with priority $1.",
         huawei="ike proposal $1", h3c="ike proposal $1"),
    rule("encryption", "Set the IKE encryption algorithm to $1.",
         huawei="encryption-algorithm $1", h3c="encryption-algorithm $1"),
    rule("hash", "Set the IKE hash algorithm to $1.",
         huawei="authentication-algorithm $1", h3c="authentication-algorithm $1"),
    rule("authentication", "Set the IKE authentication method to $1.",
         huawei="authentication-method $1", h3c="authentication-method $1"),
    rule("group", "Set the Diffie-Hellman group to $1.",
         huawei="dh group$1", h3c="dh group$1"),
]

GRE = [
    rule("interface Tunnel", "Create and enter tunnel interface $1.",
         huawei="interface Tunnel$1", h3c="interface Tunnel$1 mode gre"),
    rule("tunnel mode gre ip", "Use GRE over IP as the tunnel mode.",
         huawei="tunnel-protocol gre", h3c="# H3C sets 'mode gre' when the interface is created"),
    rule("tunnel source", "Set the tunnel source address or interface to $1.",
         huawei="source $1", h3c="source $1"),
    rule("tunnel destination", "Set the tunnel destination address to $1.",
         huawei="destination $1", h3c="destination $1"),
    rule("tunnel key", "Set the GRE key to $1.",
         huawei="gre key $1", h3c="gre key $1"),
    rule("keepalive", "Enable GRE keepalives to track tunnel state.",
         huawei="keepalive", h3c="keepalive"),
]

NAT = [
    rule("ip nat pool", "Create NAT pool $1 from $2 to $3 with netmask $5.",
         huawei="nat address-group $1\n section $2 $3",
         h3c="nat address-group <group_id> name $1\n address $2 $3"),
    rule("ip nat inside source list",
         "Translate traffic matched by ACL $1 to addresses of pool $3. overload enables port address translation.",
         huawei="nat-policy\n rule name <rule_name>\n  source-address acl $1\n  action source-nat address-group $3",
         h3c="nat outbound $1 address-group <group_id_of_pool_$3>"),
    rule("ip nat inside source static",
         "Map $1 inside address $2 port $3 to global address $4 port $5.",
         huawei="nat server protocol $1 global $4 $5 inside $2 $3",
         h3c="nat server protocol $1 global $4 $5 inside $2 $3"),
    rule("ip nat inside", "Mark this interface as the NAT inside interface.",
         huawei="# Huawei separates inside and outside through security zones or the nat-policy egress",
         h3c="# H3C separates inside and outside through security zones or the nat outbound interface"),
    rule("ip nat outside", "Mark this interface as the NAT outside interface.",
         huawei="# Huawei separates inside and outside through security zones or the nat-policy egress",
         h3c="# H3C separates inside and outside through security zones or the nat outbound interface"),
]

STP = [
    rule("spanning-tree mode", "Set the spanning tree mode to ${mode}.",
         huawei=_stp_mode, h3c=_stp_mode,
         regex=r"^spanning-tree\s+mode\s+(?P<mode>mst|rapid-pvst|pvst)$"),
    rule("spanning-tree vlan", "Set the bridge priority of VLAN ${vlist} to ${prio}.",
         huawei="stp priority ${prio}", h3c="stp priority ${prio}",
         regex=r"^spanning-tree\s+vlan\s+(?P<vlist>[\w,-]+)\s+priority\s+(?P<prio>\d+)$"),
    rule("spanning-tree vlan", "Make this switch the ${which} root bridge for VLAN ${vlist}.",
         huawei="stp root ${which}", h3c="stp root ${which}",
         regex=r"^spanning-tree\s+vlan\s+(?P<vlist>[\w,-]+)\s+root\s+(?P<which>primary|secondary)$"),
    rule("spanning-tree mst configuration", "Enter MST region configuration mode.",
         huawei="stp region-configuration", h3c="stp region-configuration",
         regex=r"^spanning-tree\s+mst\s+configuration\s*$"),
    rule("revision", "Set the MST revision number to ${rev}.",
         huawei="revision-level ${rev}", h3c="revision-level ${rev}",
         regex=r"^revision\s+(?P<rev>\d+)$"),
    rule("instance", "Map VLANs ${vlist} to MST instance ${inst}.",
         huawei="instance ${inst} vlan ${vlist}", h3c="instance ${inst} vlan ${vlist}",
         regex=r"^instance\s+(?P<inst>\d+)\s+vlan\s+(?P<vlist>.+)$"),
    rule("spanning-tree mst", "Make this switch the ${which} root bridge of MST instance ${inst}.",
         huawei="stp instance ${inst} root ${which}", h3c="stp instance ${inst} root ${which}",
         regex=r"^spanning-tree\s+mst\s+(?P<inst>\d+)\s+root\s+(?P<which>primary|secondary)$"),
    rule("spanning-tree mst", "Set the priority of MST instance ${inst} to ${prio}.",
         huawei="stp instance ${inst} priority ${prio}", h3c="stp instance ${inst} priority ${prio}",
         regex=r"^spanning-tree\s+mst\s+(?P<inst>\d+)\s+priority\s+(?P<prio>\d+)$"),
    rule("spanning-tree portfast", "Enable PortFast on the interface.",
         huawei="stp edged-port enable", h3c="stp edged-port enable"),
    rule("spanning-tree bpduguard enable", "Enable BPDU Guard on the interface.",
         huawei="stp bpdu-protection", h3c="stp bpdu-protection"),
]

STACKING = [
    rule("switch", "Set the priority of stack member ${member} to ${prio}. Higher values (1-15) win the "
         "active switch election.",
         huawei="stack slot ${member} priority ${prio}", h3c="irf member ${member} priority ${prio}",
         regex=r"^switch\s+(?P<member>\d+)\s+priority\s+(?P<prio>\d+)$"),
    rule("switch", "Renumber stack member ${member} to ${new}. The member reloads to apply it.",
         huawei="stack member-id ${member} renumber ${new}", h3c="irf member ${member} renumber ${new}",
         regex=r"^switch\s+(?P<member>\d+)\s+renumber\s+(?P<new>\d+)$"),
    rule("switch", "Pre-provision stack member ${member} as model ${model}.",
         huawei="# Huawei stack members detect their model automatically",
         h3c="# H3C IRF members detect their model automatically",
         regex=r"^switch\s+(?P<member>\d+)\s+provision\s+(?P<model>\S+)$"),
    rule("switch virtual domain", "Set the StackWise Virtual domain ID to $1.",
         huawei="# Huawei CSS uses css cluster-id $1", h3c="irf domain $1"),
    rule("stackwise-virtual", "Enable StackWise Virtual and enter its configuration mode.",
         huawei="# Huawei uses CSS or iStack for this", h3c="# H3C uses IRF for this"),
    rule("stackwise-virtual link", "Set the StackWise Virtual link number to $1.",
         huawei="interface stack-port <slot>/<port>", h3c="irf-port <member>/<port>"),
    rule("stackwise-virtual dual-active-detection", "Enable dual-active detection for StackWise Virtual.",
         huawei="mad detect mode <mode>", h3c="mad detect method <method>"),
    rule("stack-mac persistent timer", "Keep the stack MAC address for $1 minutes after the active switch leaves.",
         huawei="stack mac-address persistent timer $1", h3c="irf mac-address persistent timer $1"),
    rule("show switch", "Show stack members with their role, MAC address, priority and state.",
         huawei="display stack", h3c="display irf"),
    rule("show switch detail", "Show detailed stack member information.",
         huawei="display stack member", h3c="display irf member"),
    rule("show switch stack-ports", "Show stack port state and bandwidth.",
         huawei="display stack topology", h3c="display irf link"),
    rule("show switch virtual", "Show StackWise Virtual state.",
         huawei="display css", h3c="display irf"),
    rule("redundancy", "Enter redundancy configuration mode.",
         huawei="# Huawei includes redundancy settings in the stack configuration",
         h3c="# H3C includes redundancy settings in the IRF configuration"),
]

CISCO_RULES: list[CliRule] = [
    *GENERAL,
    *INTERFACE,
    *DHCP,
    *VLAN,
    *LINK_AGGREGATION,
    *ROUTING,
    *VRRP,
    *OBJECT_GROUPS,
    *IPSEC,
    *IKE,
    *GRE,
    *NAT,
    *STP,
    *STACKING,
]

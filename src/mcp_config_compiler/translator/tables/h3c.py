"""H3C Comware commands and their Cisco / Huawei equivalents."""
from ..rules import CliRule, rule


def _h3c_to_cisco_vlans(params: list[str]) -> str:
    """'10 20 to 30' -> '10,20-30'."""
    return " ".join(params).replace(" to ", "-").replace(" ", ",")


def _cisco_vlan(params: list[str], _named: dict[str, str]) -> str:
    return f"vlan {_h3c_to_cisco_vlans(params)}"


def _cisco_trunk_allowed(params: list[str], _named: dict[str, str]) -> str:
    if " ".join(params).lower() == "all":
        return "switchport trunk allowed vlan all"
    return f"switchport trunk allowed vlan {_h3c_to_cisco_vlans(params)}"


def _cisco_stp_mode(_params: list[str], named: dict[str, str]) -> str:
    mode = named.get("mode")
    if mode == "mstp":
        return "spanning-tree mode mst"
    if mode == "rstp":
        return "spanning-tree mode rapid-pvst"
    return "spanning-tree mode pvst"


def _cisco_lacp_mode(params: list[str], _named: dict[str, str]) -> str:
    mode = params[0] if params else "active"
    return f"channel-group <id> mode {mode}"


def _huawei_lacp_timeout(params: list[str], _named: dict[str, str]) -> str:
    return f"lacp timeout {'fast' if params and params[0] == 'short' else 'slow'}"


GENERAL = [
    rule("system-view", "Enter system view (global configuration).",
         cisco="configure terminal", huawei="system-view"),
    rule("sysname", "Set the device hostname to $1.",
         cisco="hostname $1", huawei="sysname $1"),
    rule("display ip interface brief", "Show interface IP addresses and state.",
         cisco="show ip interface brief", huawei="display ip interface brief"),
    rule("display current-configuration", "Show the running configuration.",
         cisco="show running-config", huawei="display current-configuration"),
    rule("save", "Save the current configuration.",
         cisco="copy running-config startup-config", huawei="save"),
]

INTERFACE = [
    rule("interface", "Enter configuration view of interface $1.",
         cisco="interface $1", huawei="interface $1"),
    rule("ip address", "Assign IP address $1 with mask $2 to the interface.",
         cisco="ip address $1 $2", huawei="ip address $1 $2"),
    rule("description", "Set the interface or VLAN description to $*.",
         cisco="description $*", huawei="description $*"),
    rule("shutdown", "Disable the interface.",
         cisco="shutdown", huawei="shutdown"),
    rule("undo shutdown", "Enable the interface.",
         cisco="no shutdown", huawei="undo shutdown"),
]

DHCP = [
    rule("dhcp enable", "Enable DHCP globally.",
         cisco="service dhcp", huawei="dhcp enable"),
    rule("dhcp server ip-pool", "Create DHCP address pool ${name} and enter its view.",
         cisco="ip dhcp pool ${name}", huawei="ip pool ${name}",
         regex=r"(?P<name>\S+)$"),
    rule("network", "Allocate addresses from network ${net} with mask ${mask}.",
         cisco="network ${net} ${mask}", huawei="network ${net} mask ${mask}",
         regex=r"^network\s+(?P<net>\S+)\s+mask\s+(?P<mask>\S+)$"),
    rule("address range", "Allocate addresses from $1 to $2.",
         cisco="# Cisco defines the whole range with network and removes addresses with ip dhcp excluded-address",
         huawei="# Huawei defines the whole range with network and removes addresses with excluded-ip-address"),
    rule("gateway-list", "Hand out $* as the gateway.",
         cisco="default-router $*", huawei="gateway-list $*"),
    rule("dns-list", "Hand out $* as DNS servers.",
         cisco="dns-server $*", huawei="dns-list $*"),
    rule("domain-name", "Hand out domain suffix $1.",
         cisco="domain-name $1", huawei="domain-name $1"),
    rule("expired day", "Set the lease to $1 days $3 hours $5 minutes.",
         cisco="lease $1 $3 $5", huawei="lease day $1 hour $3 minute $5"),
    rule("forbidden-ip", "Keep addresses $1 to $2 out of the pool.",
         cisco="ip dhcp excluded-address $1 $2",
         huawei="# Configure inside the ip pool\n excluded-ip-address $1 $2"),
    rule("dhcp server forbidden-ip", "Keep addresses $1 to $2 out of every pool.",
         cisco="ip dhcp excluded-address $1 $2",
         huawei="# Huawei has no global exclusion; configure excluded-ip-address in each ip pool"),
    rule("static-bind ip-address", "Bind IP address ${ip} to hardware address ${mac}.",
         cisco="# Cisco needs a dedicated pool per static binding\n"
               "ip dhcp pool STATIC_${mac}\n host ${ip} ${mask}\n client-identifier 01${mac}",
         huawei="static-bind ip-address ${ip} mac-address ${mac}",
         regex=r"^static-bind\s+ip-address\s+(?P<ip>\S+)\s+mask\s+(?P<mask>\S+)\s+hardware-address\s+(?P<mac>\S+)$"),
    rule("option 43 hex", "Set DHCP option 43, which tells access points the controller address, to hex $1.",
         cisco="option 43 hex $1",
         huawei="# Huawei uses the sub-option form\noption 43 sub-option 3 ascii <AC_IP>"),
    rule("dhcp select server", "Act as DHCP server on this interface, using the pool that matches its subnet.",
         cisco="# Cisco needs no command; an interface without ip helper-address is served locally",
         huawei="dhcp select global"),
    rule("dhcp server apply ip-pool", "Bind DHCP pool $1 to this interface.",
         cisco="# Cisco matches pools to interfaces by the pool's network",
         huawei="dhcp select global pool $1"),
    rule("dhcp select relay", "Act as DHCP relay on this interface.",
         cisco="# Configuring ip helper-address on the interface enables relay",
         huawei="dhcp select relay"),
    rule("dhcp relay server-address", "Relay DHCP requests to server $1.",
         cisco="ip helper-address $1", huawei="dhcp relay server-ip $1"),
]

VLAN = [
    rule("vlan", "Create VLAN $*.",
         cisco=_cisco_vlan, huawei="vlan batch $*"),
    rule("port link-type access", "Set the interface link type to access.",
         cisco="switchport mode access", huawei="port link-type access"),
    rule("port access vlan", "Assign the access interface to VLAN $1.",
         cisco="switchport access vlan $1", huawei="port default vlan $1"),
    rule("port link-type trunk", "Set the interface link type to trunk.",
         cisco="switchport mode trunk", huawei="port link-type trunk"),
    rule("port trunk permit vlan", "Allow VLANs $* on the trunk.",
         cisco=_cisco_trunk_allowed, huawei="port trunk allow-pass vlan $*"),
    rule("port trunk pvid vlan", "Set the trunk PVID to VLAN $1.",
         cisco="switchport trunk native vlan $1", huawei="port trunk pvid vlan $1"),
]

PORT_ISOLATION = [
    rule("port-isolate group", "Create port isolation group $1 and enter its view.",
         cisco="# Cisco uses private VLANs for this\n# vlan <isolate_vlan_id>\n# private-vlan isolated",
         huawei="# Huawei enables the group directly on each interface\n"
                "# interface <interface_name>\n# port-isolate enable group $1"),
    rule("community-vlan vlan", "Let traffic in VLAN $1 pass between ports of the isolation group.",
         cisco="# Cisco private VLANs use community VLANs for this",
         huawei="# Huawei excludes VLANs globally, the reverse approach\nport-isolate exclude vlan $1"),
    rule("port-isolate enable group", "Add this interface to port isolation group $1.",
         cisco="switchport protected\n# Private VLANs cover more complex cases",
         huawei="port-isolate enable group $1"),
]

LINK_AGGREGATION = [
    rule("interface Bridge-Aggregation", "Create and enter layer 2 aggregate interface $1.",
         cisco="interface Port-channel$1", huawei="interface Eth-Trunk$1"),
    rule("interface Route-Aggregation", "Create and enter layer 3 aggregate interface $1.",
         cisco="interface Port-channel$1\n no switchport", huawei="interface Eth-Trunk$1\n undo portswitch"),
    rule("port link-aggregation group", "Add this interface to aggregation group $1.",
         cisco="channel-group $1 mode active", huawei="eth-trunk $1"),
    rule("link-aggregation mode static", "Use static aggregation (no LACP).",
         cisco="# Configure on the member interfaces\n channel-group <id> mode on",
         huawei="# Configure under the Eth-Trunk interface\n mode manual load-balance"),
    rule("link-aggregation mode dynamic", "Use dynamic aggregation (LACP).",
         cisco="# Configure on the member interfaces\n channel-group <id> mode active",
         huawei="# Configure under the Eth-Trunk interface\n mode lacp-static"),
    rule("link-aggregation global load-sharing mode", "Set the global load-sharing mode to $*.",
         cisco="port-channel load-balance $1",
         huawei="# Configure under the Eth-Trunk interface\n load-balance $1"),
    rule("lacp system-priority", "Set the LACP system priority to $1.",
         cisco="lacp system-priority $1", huawei="lacp system-priority $1"),
    rule("link-aggregation port-priority", "Set the LACP port priority of this interface to $1.",
         cisco="lacp port-priority $1", huawei="lacp priority $1"),
    rule("lacp mode", "Set the LACP mode of this interface to $1 (active or passive).",
         cisco=_cisco_lacp_mode,
         huawei="# Huawei does not set active/passive per member interface"),
    rule("lacp period", "Set the LACP timeout; short is 3 seconds, long is 90 seconds.",
         cisco="# No direct equivalent", huawei=_huawei_lacp_timeout),
]

ROUTING = [
    rule("ip route-static", "Add a static route to $1 $2 via next hop $3.",
         cisco="ip route $1 $2 $3", huawei="ip route-static $1 $2 $3"),
    rule("ospf", "Start OSPF process $1.",
         cisco="router ospf $1", huawei="ospf $1"),
    rule("area", "Enter OSPF area $1.",
         cisco="# Configure in the OSPF process\n network ... area $1", huawei="area $1"),
    rule("network", "Advertise network ${net} (wildcard ${wildcard}) in the current OSPF area.",
         cisco="network ${net} ${wildcard} area <area_id>", huawei="network ${net} ${wildcard}",
         regex=r"^network\s+(?P<net>\S+)\s+(?P<wildcard>\S+)$"),
    rule("import-route static", "Redistribute static routes into OSPF.",
         cisco="redistribute static subnets", huawei="import-route static"),
    rule("ospf dr-priority",
         "Set the interface DR priority to $1 (0-255, default 1). Higher values are preferred; 0 never "
         "becomes DR or BDR.",
         cisco="ip ospf priority $1", huawei="ospf dr-priority $1"),
]

VRRP = [
    rule("vrrp vrid", "Set virtual IP ${vip} for VRRP group ${vrid}.",
         cisco="vrrp ${vrid} ip ${vip}", huawei="vrrp vrid ${vrid} virtual-ip ${vip}",
         regex=r"^vrrp\s+vrid\s+(?P<vrid>\d+)\s+virtual-ip\s+(?P<vip>\S+)$"),
    rule("vrrp vrid", "Set the priority of VRRP group ${vrid} to ${prio}.",
         cisco="vrrp ${vrid} priority ${prio}", huawei="vrrp vrid ${vrid} priority ${prio}",
         regex=r"^vrrp\s+vrid\s+(?P<vrid>\d+)\s+priority\s+(?P<prio>\d+)$"),
    rule("vrrp vrid", "Let VRRP group ${vrid} preempt after ${delay} seconds.",
         cisco="vrrp ${vrid} preempt delay minimum ${delay}",
         huawei="vrrp vrid ${vrid} preempt-mode timer delay ${delay}",
         regex=r"^vrrp\s+vrid\s+(?P<vrid>\d+)\s+preempt-mode\s+delay\s+(?P<delay>\d+)$"),
]

SECURITY = [
    rule("security-zone name", "Create security zone $1 and enter its view.",
         huawei="firewall zone name $1"),
    rule("import interface", "Add layer 3 interface $1 to the current security zone.",
         huawei="add interface $1"),
    rule("zone-pair security source", "Create the zone pair from $1 to $3.",
         huawei="firewall interzone $1 $3"),
    rule("security-policy ip", "Enter the IPv4 security policy view.",
         huawei="security-policy"),
    rule("rule name", "Create security or NAT policy rule $1.",
         huawei="rule name $1"),
    rule("source-zone", "Match source security zone $1.",
         huawei="source-zone $1"),
    rule("destination-zone", "Match destination security zone $1.",
         huawei="destination-zone $1"),
    rule("source-ip-host", "Match source host $1.",
         huawei="source-address $1 32"),
    rule("source-ip-subnet", "Match source subnet $1 with mask $2.",
         huawei="source-address $1 $2"),
    rule("source-ip-range", "Match source addresses $1 to $2.",
         huawei="source-address range $1 $2"),
    rule("source-ip object-group-name", "Match source address object group $1.",
         huawei="source-address address-set $1"),
    rule("destination-ip-host", "Match destination host $1.",
         huawei="destination-address $1 32"),
    rule("destination-ip-subnet", "Match destination subnet $1 with mask $2.",
         huawei="destination-address $1 $2"),
    rule("destination-ip-range", "Match destination addresses $1 to $2.",
         huawei="destination-address range $1 $2"),
    rule("destination-ip object-group-name", "Match destination address object group $1.",
         huawei="destination-address address-set $1"),
    rule("service object-group-name", "Match service object group $1.",
         huawei="service service-set $1"),
    rule("time-range", "Apply the rule only during time range $1.",
         huawei="time-range $1"),
    rule("action pass", "Permit matching traffic.",
         huawei="action permit"),
    rule("action drop", "Drop matching traffic.",
         huawei="action deny"),
]

OBJECT_GROUPS = [
    rule("object-group ip address", "Create IPv4 address object group $1.",
         cisco="object-group network $1", huawei="ip address-set $1 type object"),
    rule("network host address", "Add host $1 to the address group.",
         cisco="host $1", huawei="address $1 32"),
    rule("network subnet", "Add subnet $1 with mask $2 to the address group.",
         cisco="$1 $2", huawei="address $1 mask $2"),
    rule("network range", "Add addresses $1 to $2 to the address group.",
         cisco="range $1 $2", huawei="address range $1 $2"),
    rule("network host name", "Add host name $1 (FQDN) to the address group.",
         huawei="# Huawei keeps domains in a separate domain-set\ndomain-set name <group_name>\n add domain $1"),
    rule("object-group service", "Create service object group $1.",
         cisco="object-group service $1", huawei="ip service-set $1 type object"),
    rule("service", "Add a $1 service to the service group.",
         cisco="service $1", huawei="service protocol $1"),
]

IPSEC = [
    rule("ipsec transform-set", "Create IPsec transform set $1.",
         cisco="crypto ipsec transform-set $1", huawei="ipsec proposal $1"),
    rule("ike keychain", "Create IKE keychain $1.",
         cisco="crypto isakmp key <key> address <address> <mask>", huawei="ike keychain $1"),
    rule("ike profile", "Create IKE profile $1.",
         cisco="crypto isakmp profile $1",
         huawei="# Huawei has no IKE profile; the settings live under ike peer"),
    rule("ipsec policy", "Create IPsec policy $1 with sequence number $2 in $3 mode.",
         cisco="crypto map $1 $2 ipsec-isakmp\n# This is the ISAKMP equivalent; Cisco configures manual mode differently",
         huawei="ipsec policy $1 $2 $3"),
    rule("security acl", "Protect the traffic matched by ACL $1.",
         cisco="match address $1", huawei="security acl $1"),
    rule("remote-address", "Set the IPsec tunnel peer address to $1.",
         cisco="set peer $1", huawei="remote-address $1"),
    rule("sa spi inbound", "Set the inbound $1 SA SPI to $2 in a manual policy.",
         cisco="set security-association spi inbound $1 $2", huawei="sa spi inbound $1 $2"),
    rule("sa spi outbound", "Set the outbound $1 SA SPI to $2 in a manual policy.",
         cisco="set security-association spi outbound $1 $2", huawei="sa spi outbound $1 $2"),
    rule("sa string-key inbound", "Set the inbound $1 SA key to $3 ($2 text) in a manual policy.",
         cisco="# Set the key within the security association", huawei="sa string-key inbound $1 $3"),
    rule("sa string-key outbound", "Set the outbound $1 SA key to $3 ($2 text) in a manual policy.",
         cisco="# Set the key within the security association", huawei="sa string-key outbound $1 $3"),
]

IKE = [
    rule("ike proposal", "Create IKE proposal $1.",
         cisco="crypto isakmp policy $1", huawei="ike proposal $1"),
    rule("encryption-algorithm", "Set the IKE encryption algorithm to $1.",
         cisco="encryption $1", huawei="encryption-algorithm $1"),
    rule("dh group", "Set the Diffie-Hellman group to $1.",
         cisco="group $1", huawei="dh group $1"),
    rule("authentication-algorithm", "Set the IKE authentication (hash) algorithm to $1.",
         cisco="hash $1", huawei="authentication-algorithm $1"),
    rule("authentication-method", "Set the IKE authentication method to $1.",
         cisco="authentication $1", huawei="authentication-method $1"),
]

# Remote backup (RBM) settings have no line-by-line counterpart elsewhere
HA = [
    rule("remote-backup group", "Enter the remote backup (HA) group view."),
    rule("device-role primary", "Make this device the primary HA member."),
    rule("device-role secondary", "Make this device the secondary HA member."),
    rule("backup-mode dual-active", "Run HA in dual-active mode."),
    rule("undo backup-mode", "Run HA in active/standby mode (the default)."),
    rule("local-ip", "Use $1 as the local address of the HA control channel."),
    rule("remote-ip", "Use $1 port $3 as the peer address of the HA control channel."),
    rule("keepalive interval", "Send HA keepalives every $1 seconds."),
    rule("keepalive count", "Declare the peer down after $1 missed keepalives."),
    rule("data-channel interface", "Carry HA data over interface $1."),
    rule("hot-backup enable", "Back up session entries to the peer."),
    rule("configuration auto-sync enable", "Synchronise configuration to the peer automatically.",
         huawei="hrp auto-sync config"),
    rule("configuration sync-check", "Check that configuration matches the peer."),
    rule("delay-time", "Fail back to this device after $1 seconds.",
         huawei="hrp preempt delay $1"),
    rule("track", "Tie HA state to track entry $1."),
    rule("switchover request", "Force an HA switchover."),
]

NAT = [
    rule("nat address-group", "Create NAT address group $1 named $3.",
         cisco="ip nat pool $3 <start_ip> <end_ip> netmask <netmask>", huawei="nat address-group $3"),
    rule("nat server protocol",
         "Map $1 traffic for global address $3 port $4 to inside address $6 port $7.",
         cisco="ip nat inside source static $1 $6 $7 $3 $4",
         huawei="nat server protocol $1 global $3 $4 inside $6 $7"),
    rule("nat outbound", "Translate outbound traffic matched by ACL $1 to address group $3.",
         cisco="ip nat inside source list $1 pool <pool_name_of_$3> overload",
         huawei="# Huawei uses nat-policy\nnat-policy\n rule name <rule_name>\n"
                "  source-address acl $1\n  action source-nat address-group <group_name_of_$3>"),
    rule("nat global-policy", "Enter the global NAT policy view.",
         huawei="# Huawei configures this under nat-policy"),
    rule("action snat easy-ip", "Translate source addresses to the egress interface address.",
         huawei="action source-nat easy-ip"),
    rule("action snat address-group", "Translate source addresses using address group $1.",
         huawei="action source-nat address-group $1"),
    rule("action dnat ip-address", "Translate destination addresses to inside address $1 port $3.",
         huawei="nat server protocol <tcp/udp> global <global_ip> <global_port> inside $1 $3"),
    rule("action snat no-nat", "Skip source NAT for matching traffic.",
         huawei="action no-nat"),
    rule("action dnat no-nat", "Skip destination NAT for matching traffic.",
         huawei="# Huawei uses action no-nat"),
    rule("counting enable", "Count hits on the NAT rule."),
]

STP = [
    rule("stp mode", "Set the spanning tree mode to ${mode}.",
         cisco=_cisco_stp_mode, huawei="stp mode ${mode}",
         regex=r"^stp\s+mode\s+(?P<mode>mstp|rstp|stp)$"),
    rule("stp priority", "Set the global bridge priority to ${prio}.",
         cisco="spanning-tree vlan 1-4094 priority ${prio}", huawei="stp priority ${prio}",
         regex=r"^stp\s+priority\s+(?P<prio>\d+)$"),
    rule("stp root", "Make this device the ${which} root bridge for all VLANs.",
         cisco="spanning-tree vlan 1-4094 root ${which}", huawei="stp root ${which}",
         regex=r"^stp\s+root\s+(?P<which>primary|secondary)$"),
    rule("stp region-configuration", "Enter MST region configuration.",
         cisco="spanning-tree mst configuration", huawei="stp region-configuration"),
    rule("region-name", "Set the MST region name to ${name}.",
         cisco="name ${name}", huawei="region-name ${name}",
         regex=r"^region-name\s+(?P<name>.+)$"),
    rule("revision-level", "Set the MST revision number to ${rev}.",
         cisco="revision ${rev}", huawei="revision-level ${rev}",
         regex=r"^revision-level\s+(?P<rev>\d+)$"),
    rule("instance", "Map VLANs ${vlist} to MST instance ${inst}.",
         cisco="instance ${inst} vlan ${vlist}", huawei="instance ${inst} vlan ${vlist}",
         regex=r"^instance\s+(?P<inst>\d+)\s+vlan\s+(?P<vlist>.+)$"),
    rule("active region-configuration", "Apply the MST region configuration.",
         cisco="exit", huawei="active region-configuration"),
    rule("stp instance", "Make this device the ${which} root bridge of instance ${inst}.",
         cisco="spanning-tree mst ${inst} root ${which}", huawei="stp instance ${inst} root ${which}",
         regex=r"^stp\s+instance\s+(?P<inst>\d+)\s+root\s+(?P<which>primary|secondary)$"),
    rule("stp instance", "Set the priority of instance ${inst} to ${prio}.",
         cisco="spanning-tree mst ${inst} priority ${prio}", huawei="stp instance ${inst} priority ${prio}",
         regex=r"^stp\s+instance\s+(?P<inst>\d+)\s+priority\s+(?P<prio>\d+)$"),
    rule("stp edged-port enable", "Make the interface an edge port (Cisco PortFast).",
         cisco="spanning-tree portfast", huawei="stp edged-port enable"),
    rule("stp bpdu-protection", "Enable BPDU protection (Cisco BPDU Guard).",
         cisco="spanning-tree bpduguard enable", huawei="stp bpdu-protection"),
]

STACKING = [
    rule("chassis convert mode irf", "Switch the device from standalone to IRF mode. The device reboots; "
         "the member ID must already be set.",
         cisco="# Cisco StackWise comes up automatically once cabled",
         huawei="# Huawei iStack/CSS is enabled with stack enable or automatically"),
    rule("irf-mode enable", "Switch the device to IRF mode (newer models). Takes effect after a reboot.",
         cisco="# Cisco StackWise comes up automatically once cabled",
         huawei="# Huawei iStack/CSS is enabled with stack enable or automatically"),
    rule("irf member", "Renumber member ${member} to ${new}. The device reboots to apply it.",
         cisco="switch ${member} renumber ${new}", huawei="stack member-id ${member} renumber ${new}",
         regex=r"^irf\s+member\s+(?P<member>\d+)\s+renumber\s+(?P<new>\d+)$"),
    rule("irf member", "Set the priority of member ${member} to ${prio}. The highest priority becomes master.",
         cisco="switch ${member} priority ${prio}", huawei="stack slot ${member} priority ${prio}",
         regex=r"^irf\s+member\s+(?P<member>\d+)\s+priority\s+(?P<prio>\d+)$"),
    rule("irf member", "Set the member ID to ${member}.",
         cisco="switch ${member} provision <model>", huawei="# Huawei assigns member IDs automatically",
         regex=r"^irf\s+member\s+(?P<member>\d+)$"),
    rule("irf domain", "Set the IRF domain ID to $1. Every member must share it.",
         cisco="switch virtual domain $1", huawei="# Huawei CSS uses css cluster-id $1"),
    rule("irf priority", "Preset this device's IRF priority to $1.",
         cisco="switch <member-id> priority $1", huawei="stack priority $1"),
    rule("irf-port", "Enter IRF port $1.",
         cisco="# Cisco StackWise ports are dedicated or set with switch virtual link",
         huawei="interface stack-port $1"),
    rule("port group interface", "Bind physical interface $1 to the current IRF port.",
         cisco="# Cisco StackWise uses dedicated stack cables", huawei="port interface $1 enable"),
    rule("irf-port-configuration active", "Activate the IRF port configuration so the fabric forms or merges.",
         cisco="# No direct equivalent; the stack activates once cabled and configured",
         huawei="# No direct equivalent; the stack activates once cabled and configured"),
    rule("display irf", "Show IRF members, topology and master.",
         cisco="show switch", huawei="display stack"),
    rule("display irf configuration", "Show the IRF domain, member IDs, priorities and port bindings.",
         cisco="show running-config | include switch", huawei="display stack configuration"),
]

H3C_RULES: list[CliRule] = [
    *GENERAL,
    *INTERFACE,
    *DHCP,
    *VLAN,
    *PORT_ISOLATION,
    *LINK_AGGREGATION,
    *ROUTING,
    *VRRP,
    *SECURITY,
    *OBJECT_GROUPS,
    *IPSEC,
    *IKE,
    *HA,
    *NAT,
    *STP,
    *STACKING,
]

"""Huawei VRP commands and their Cisco / H3C equivalents."""
from ..rules import CliRule, rule


def _huawei_to_cisco_vlans(params: list[str]) -> str:
    return " ".join(params).replace(" to ", "-").replace(" ", ",")


def _cisco_vlan(params: list[str], _named: dict[str, str]) -> str:
    return f"vlan {_huawei_to_cisco_vlans(params)}"


def _cisco_trunk_allowed(params: list[str], _named: dict[str, str]) -> str:
    if " ".join(params).lower() == "all":
        return "switchport trunk allowed vlan all"
    return f"switchport trunk allowed vlan {_huawei_to_cisco_vlans(params)}"


def _h3c_lacp_period(params: list[str], _named: dict[str, str]) -> str:
    return f"lacp period {'short' if params and params[0] == 'fast' else 'long'}"


def _h3c_address(direction: str):
    """source-address/destination-address ip mask -> host or subnet form."""
    def convert(params: list[str], _named: dict[str, str]) -> str:
        if not params:
            return f"# Incomplete {direction}-address command"
        ip = params[0]
        mask = params[1] if len(params) > 1 else "32"
        if mask in ("32", "255.255.255.255"):
            return f"{direction}-ip-host {ip}"
        return f"{direction}-ip-subnet {ip} {mask}"
    return convert


def _cisco_nat_server(params: list[str], _named: dict[str, str]) -> str:
    """nat server [name N] protocol P global G [gport] inside I [iport] -> static PAT entry."""
    if "global" not in params or "inside" not in params:
        return "# Incomplete nat server command"

    def after(keyword: str, offset: int = 1) -> str:
        index = params.index(keyword) + offset
        return params[index] if index < len(params) else ""

    protocol = after("protocol") if "protocol" in params else "tcp"
    global_ip = after("global")
    global_port = after("global", 2) if after("global", 2).isdigit() else "any"
    inside_ip = after("inside")
    inside_port = after("inside", 2) if after("inside", 2).isdigit() else global_port
    return f"ip nat inside source static {protocol} {inside_ip} {inside_port} {global_ip} {global_port}"


def _h3c_nat_server(params: list[str], _named: dict[str, str]) -> str:
    return f"nat server {' '.join(params)}"


GENERAL = [
    rule("system-view", "Enter system view (global configuration).",
         cisco="configure terminal", h3c="system-view"),
    rule("sysname", "Set the device hostname to $1.",
         cisco="hostname $1", h3c="sysname $1"),
    rule("display ip interface brief", "Show interface IP addresses and state.",
         cisco="show ip interface brief", h3c="display ip interface brief"),
    rule("display current-configuration", "Show the running configuration.",
         cisco="show running-config", h3c="display current-configuration"),
    rule("save", "Save the current configuration.",
         cisco="copy running-config startup-config", h3c="save"),
]

INTERFACE = [
    rule("interface", "Enter configuration view of interface $1.",
         cisco="interface $1", h3c="interface $1"),
    rule("ip address", "Assign IP address $1 with mask or prefix length $2 to the interface.",
         cisco="ip address $1 $2", h3c="ip address $1 $2"),
    rule("description", "Set the interface or VLAN description to $*.",
         cisco="description $*", h3c="description $*"),
    rule("shutdown", "Disable the interface.",
         cisco="shutdown", h3c="shutdown"),
    rule("undo shutdown", "Enable the interface.",
         cisco="no shutdown", h3c="undo shutdown"),
]

DHCP = [
    rule("dhcp enable", "Enable DHCP globally.",
         cisco="service dhcp", h3c="dhcp enable"),
    rule("ip pool", "Create DHCP address pool $1 and enter its view.",
         cisco="ip dhcp pool $1", h3c="dhcp server ip-pool $1"),
    rule("network", "Allocate addresses from network ${net} with mask ${mask}.",
         cisco="network ${net} ${mask}", h3c="network ${net} mask ${mask}",
         regex=r"^network\s+(?P<net>\S+)\s+mask\s+(?P<mask>\S+)$"),
    rule("gateway-list", "Hand out $* as the gateway.",
         cisco="default-router $*", h3c="gateway-list $*"),
    rule("dns-list", "Hand out $* as DNS servers.",
         cisco="dns-server $*", h3c="dns-list $*"),
    rule("lease day", "Set the lease to $1 days $3 hours $5 minutes.",
         cisco="lease $1 $3 $5", h3c="expired day $1 hour $3 minute $5"),
    rule("excluded-ip-address", "Keep addresses $1 to $2 out of the pool.",
         cisco="ip dhcp excluded-address $1 $2",
         h3c="# Configure inside the dhcp server ip-pool\n forbidden-ip $1 $2"),
    rule("static-bind ip-address", "Bind IP address $1 to MAC address $3.",
         cisco="# Cisco needs a dedicated pool per static binding\n"
               "ip dhcp pool STATIC_$3\n host $1\n client-identifier 01$3",
         h3c="static-bind ip-address $1 mask <mask> hardware-address $3"),
    rule("dhcp select global", "Serve DHCP on this interface from the global address pools.",
         cisco="# Cisco needs no command; an interface without ip helper-address is served locally",
         h3c="dhcp select server"),
    rule("dhcp select relay", "Act as DHCP relay on this interface.",
         cisco="# Configuring ip helper-address on the interface enables relay",
         h3c="dhcp select relay"),
    rule("dhcp relay server-ip", "Relay DHCP requests to server $1.",
         cisco="ip helper-address $1", h3c="dhcp relay server-address $1"),
]

VLAN = [
    rule("vlan batch", "Create VLANs $*.",
         cisco=_cisco_vlan, h3c="vlan $*"),
    rule("vlan", "Create VLAN $1 and enter its view.",
         cisco="vlan $1", h3c="vlan $1"),
    rule("port link-type access", "Set the interface link type to access.",
         cisco="switchport mode access", h3c="port link-type access"),
    rule("port default vlan", "Assign the access interface to VLAN $1.",
         cisco="switchport access vlan $1", h3c="port access vlan $1"),
    rule("port link-type trunk", "Set the interface link type to trunk.",
         cisco="switchport mode trunk", h3c="port link-type trunk"),
    rule("port trunk allow-pass vlan", "Allow VLANs $* on the trunk.",
         cisco=_cisco_trunk_allowed, h3c="port trunk permit vlan $*"),
    rule("port trunk pvid vlan", "Set the trunk PVID to VLAN $1.",
         cisco="switchport trunk native vlan $1", h3c="port trunk pvid vlan $1"),
]

PORT_ISOLATION = [
    rule("port-isolate enable group", "Isolate this interface from other ports of group $1.",
         cisco="switchport protected\n# Protected ports only isolate within one switch; use private VLANs beyond that",
         h3c="port-isolate enable group $1"),
    rule("port-isolate mode", "Set the isolation mode to $1; l2 isolates layer 2 only, all isolates layers 2 and 3.",
         cisco="# Cisco has no equivalent; private VLAN design sets the scope",
         h3c="# H3C isolates layer 2 and forwards layer 3 by default"),
    rule("port-isolate exclude vlan", "Do not apply port isolation in VLAN $1.",
         cisco="# Cisco private VLANs use community VLANs for this",
         h3c="# H3C configures community VLANs inside the isolation group, the reverse approach\n"
             "port-isolate group <group_id>\n community-vlan vlan $1"),
    rule("am isolate", "Block traffic from this interface to interface $1 (one way).",
         cisco="# No direct equivalent; needs VLAN ACLs",
         h3c="# No direct equivalent"),
]

LINK_AGGREGATION = [
    rule("interface Eth-Trunk", "Create and enter Eth-Trunk interface $1.",
         cisco="interface Port-channel$1", h3c="interface Bridge-Aggregation$1"),
    rule("eth-trunk", "Add this interface to Eth-Trunk $1.",
         cisco="channel-group $1 mode active", h3c="port link-aggregation group $1"),
    rule("mode lacp-static", "Run the Eth-Trunk in static LACP mode.",
         cisco="# Configure on the member interfaces\n channel-group <id> mode active",
         h3c="# Configure under the Bridge-Aggregation interface\n link-aggregation mode dynamic"),
    rule("mode manual load-balance", "Run the Eth-Trunk in manual load-balancing mode (static aggregation).",
         cisco="# Configure on the member interfaces\n channel-group <id> mode on",
         h3c="# Configure under the Bridge-Aggregation interface\n link-aggregation mode static"),
    rule("load-balance", "Set the Eth-Trunk load-balancing method to $1.",
         cisco="port-channel load-balance $1", h3c="link-aggregation global load-sharing mode $1"),
    rule("lacp system-priority", "Set the LACP system priority to $1.",
         cisco="lacp system-priority $1", h3c="lacp system-priority $1"),
    rule("lacp priority", "Set the LACP port priority of this interface to $1.",
         cisco="lacp port-priority $1", h3c="link-aggregation port-priority $1"),
    rule("lacp preempt enable", "Enable LACP preemption on the Eth-Trunk.",
         cisco="# Cisco preempts by default", h3c="# H3C preempts by default"),
    rule("lacp preempt delay", "Delay LACP preemption by $1 seconds.",
         cisco="# No direct equivalent", h3c="# No direct equivalent"),
    rule("lacp timeout", "Set the LACP timeout; fast is 3 seconds, slow is 90 seconds.",
         cisco="# No direct equivalent", h3c=_h3c_lacp_period),
]

ROUTING = [
    rule("ip route-static", "Add a static route to $1 $2 via next hop $3.",
         cisco="ip route $1 $2 $3", h3c="ip route-static $1 $2 $3"),
    rule("ospf", "Start OSPF process $1.",
         cisco="router ospf $1", h3c="ospf $1"),
    rule("area", "Enter OSPF area $1.",
         cisco="# Configure in the OSPF process\n network ... area $1", h3c="area $1"),
    rule("network", "Advertise network ${net} (wildcard ${wildcard}) in the current OSPF area.",
         cisco="network ${net} ${wildcard} area <area_id>", h3c="network ${net} ${wildcard}",
         regex=r"^network\s+(?P<net>\S+)\s+(?P<wildcard>\S+)$"),
    rule("import-route static", "Redistribute static routes into OSPF.",
         cisco="redistribute static subnets", h3c="import-route static"),
    rule("ospf dr-priority",
         "Set the interface DR priority to $1 (0-255, default 1). Higher values are preferred; 0 never "
         "becomes DR or BDR.",
         cisco="ip ospf priority $1", h3c="ospf dr-priority $1"),
]

VRRP = [
    rule("vrrp vrid", "Set virtual IP ${vip} for VRRP group ${vrid}.",
         cisco="vrrp ${vrid} ip ${vip}", h3c="vrrp vrid ${vrid} virtual-ip ${vip}",
         regex=r"^vrrp\s+vrid\s+(?P<vrid>\d+)\s+virtual-ip\s+(?P<vip>\S+)$"),
    rule("vrrp vrid", "Set the priority of VRRP group ${vrid} to ${prio}.",
         cisco="vrrp ${vrid} priority ${prio}", h3c="vrrp vrid ${vrid} priority ${prio}",
         regex=r"^vrrp\s+vrid\s+(?P<vrid>\d+)\s+priority\s+(?P<prio>\d+)$"),
    rule("vrrp vrid", "Let VRRP group ${vrid} preempt after ${delay} seconds.",
         cisco="vrrp ${vrid} preempt delay minimum ${delay}",
         h3c="vrrp vrid ${vrid} preempt-mode delay ${delay}",
         regex=r"^vrrp\s+vrid\s+(?P<vrid>\d+)\s+preempt-mode\s+timer\s+delay\s+(?P<delay>\d+)$"),
]

SECURITY = [
    rule("firewall zone name", "Create security zone $1 and enter its view.",
         h3c="security-zone name $1"),
    rule("set priority", "Set the priority of the current security zone to $1.",
         h3c="# H3C security zones have no priority"),
    rule("add interface", "Add interface $1 to the current security zone.",
         h3c="import interface $1"),
    rule("firewall interzone", "Enter the interzone view from zone $1 to zone $2.",
         h3c="zone-pair security source $1 destination $2"),
    rule("security-policy", "Enter the security policy view.",
         h3c="security-policy ip"),
    rule("rule name", "Create security or NAT policy rule $1.",
         h3c="rule name $1"),
    rule("source-zone", "Match source security zone $1.",
         h3c="source-zone $1"),
    rule("destination-zone", "Match destination security zone $1.",
         h3c="destination-zone $1"),
    rule("source-address address-set", "Match source address set $1.",
         h3c="source-ip object-group-name $1"),
    rule("source-address range", "Match source addresses $1 to $2.",
         h3c="source-ip-range $1 $2"),
    rule("source-address", "Match source address $1 with mask $2.",
         cisco="# Define the match in an ACL\naccess-list <acl_number> permit ip $1 $2 any",
         h3c=_h3c_address("source")),
    rule("destination-address address-set", "Match destination address set $1.",
         h3c="destination-ip object-group-name $1"),
    rule("destination-address range", "Match destination addresses $1 to $2.",
         h3c="destination-ip-range $1 $2"),
    rule("destination-address", "Match destination address $1 with mask $2.",
         cisco="# Define the match in an ACL\naccess-list <acl_number> permit ip any $1 $2",
         h3c=_h3c_address("destination")),
    rule("service service-set", "Match service set $1.",
         h3c="service object-group-name $1"),
    rule("time-range", "Apply the rule only during time range $1.",
         h3c="time-range $1"),
    rule("action permit", "Permit matching traffic.",
         h3c="action pass"),
    rule("action deny", "Drop matching traffic.",
         h3c="action drop"),
]

OBJECT_GROUPS = [
    rule("ip address-set", "Create address set $1.",
         cisco="object-group network $1", h3c="object-group ip address $1"),
    rule("address", "Add ${ip} with mask ${mask} to the address set.",
         cisco="${ip} ${mask}", h3c="network subnet ${ip} ${mask}",
         regex=r"^address\s+(?:\d+\s+)?(?P<ip>[\d.]+)\s+mask\s+(?P<mask>\S+)$"),
    rule("address", "Add addresses ${start} to ${end} to the address set.",
         cisco="range ${start} ${end}", h3c="network range ${start} ${end}",
         regex=r"^address\s+(?:\d+\s+)?range\s+(?P<start>\S+)\s+(?P<end>\S+)$"),
    rule("ip service-set", "Create service set $1.",
         cisco="object-group service $1", h3c="object-group service $1"),
    rule("service protocol", "Add a $1 service to the service set.",
         cisco="service $1", h3c="service $1"),
    rule("domain-set name", "Create domain set $1.",
         h3c="# H3C keeps domains as members of an address group\n"
             "object-group ip address $1\n network host name <domain>"),
    rule("add domain", "Add domain $1 to the domain set.",
         h3c="network host name $1"),
]

IPSEC = [
    rule("ipsec proposal", "Create IPsec proposal $1, which holds the IPsec security parameters.",
         cisco="crypto ipsec transform-set $1", h3c="ipsec transform-set $1"),
    rule("transform", "Use security protocol $1 (esp, ah or ah-esp).",
         cisco="# Cisco names the protocol in the transform set, e.g. esp-aes", h3c="protocol $1"),
    rule("encapsulation-mode", "Use $1 encapsulation (tunnel, transport or auto).",
         cisco="# Cisco sets the mode in the transform set; tunnel is the default",
         h3c="encapsulation-mode $1"),
    rule("esp encryption-algorithm", "Set the ESP encryption algorithm to $1.",
         cisco="# Set in the transform set, e.g. esp-aes", h3c="esp encryption-algorithm $1"),
    rule("esp authentication-algorithm", "Set the ESP authentication algorithm to $1.",
         cisco="# Set in the transform set, e.g. esp-sha-hmac", h3c="esp authentication-algorithm $1"),
    rule("ah authentication-algorithm", "Set the AH authentication algorithm to $1.",
         cisco="# Set in the transform set, e.g. ah-sha-hmac", h3c="ah authentication-algorithm $1"),
    rule("ike keychain", "Create IKE keychain $1 to hold pre-shared keys.",
         cisco="# Cisco configures keys directly\ncrypto isakmp key <key> address <address>",
         h3c="ike keychain $1"),
    rule("pre-shared-key key simple", "Store plain-text pre-shared key $1 in the keychain.",
         cisco="crypto isakmp key $1 address <address>", h3c="pre-shared-key key simple $1"),
    rule("ike peer", "Create IKE peer $1.",
         cisco="crypto isakmp profile $1", h3c="ike profile $1"),
    rule("remote-address", "Set the peer address to $1.",
         cisco="# Set with set peer in the crypto map",
         h3c="# Set with remote-address in the ipsec policy"),
    rule("pre-shared-key keychain", "Use IKE keychain $1 for this peer.",
         cisco="keyring <keyring_name>", h3c="keychain $1"),
    rule("ipsec policy", "Create IPsec policy $1 with sequence number $2 in $3 mode.",
         cisco="crypto map $1 $2 ipsec-isakmp\n# This is the ISAKMP equivalent; Cisco configures manual mode differently",
         h3c="ipsec policy $1 $2 $3"),
    rule("security acl", "Protect the traffic matched by ACL $1.",
         cisco="match address $1", h3c="security acl $1"),
    rule("ike-peer", "Use IKE peer $1 for this policy.",
         cisco="set isakmp-profile $1", h3c="ike-profile $1"),
    rule("proposal", "Use IPsec proposal $1 for this policy.",
         cisco="set transform-set $1", h3c="transform-set $1"),
    rule("tunnel local", "Set the local tunnel address to $1 in a manual policy.",
         cisco="# Determined by the interface the crypto map is applied to", h3c="local-address $1"),
    rule("tunnel remote", "Set the peer tunnel address to $1 in a manual policy.",
         cisco="set peer $1", h3c="remote-address $1"),
    rule("sa spi inbound", "Set the inbound $1 SA SPI to $2 in a manual policy.",
         cisco="set security-association spi inbound $1 $2", h3c="sa spi inbound $1 $2"),
    rule("sa spi outbound", "Set the outbound $1 SA SPI to $2 in a manual policy.",
         cisco="set security-association spi outbound $1 $2", h3c="sa spi outbound $1 $2"),
    rule("sa string-key inbound", "Set the inbound $1 SA key to $2 in a manual policy.",
         cisco="# Set the key within the security association", h3c="sa string-key inbound $1 simple $2"),
    rule("sa string-key outbound", "Set the outbound $1 SA key to $2 in a manual policy.",
         cisco="# Set the key within the security association", h3c="sa string-key outbound $1 simple $2"),
]

IKE = [
    rule("ike proposal", "Create IKE proposal $1.",
         cisco="crypto isakmp policy $1", h3c="ike proposal $1"),
    rule("encryption-algorithm", "Set the IKE encryption algorithm to $1.",
         cisco="encryption $1", h3c="encryption-algorithm $1"),
    rule("dh group", "Set the Diffie-Hellman group to $1.",
         cisco="group $1", h3c="dh group $1"),
    rule("authentication-algorithm", "Set the IKE hash algorithm to $1.",
         cisco="hash $1", h3c="authentication-algorithm $1"),
    rule("authentication-method", "Set the IKE authentication method to $1.",
         cisco="authentication $1", h3c="authentication-method $1"),
    rule("integrity-algorithm", "Set the IKEv2 integrity algorithm to $1.",
         cisco="# Cisco IKEv2 proposal: integrity $1", h3c="# H3C IKEv2 proposal: integrity $1"),
    rule("prf", "Set the IKEv2 pseudo-random function to $1.",
         cisco="# Cisco IKEv2 proposal: prf $1", h3c="# H3C IKEv2 proposal: prf $1"),
]

HA = [
    rule("hrp enable", "Enable hot standby (HRP) globally.",
         h3c="# H3C configures the whole feature under remote-backup group"),
    rule("hrp interface", "Use $1 as the heartbeat interface with peer address $3.",
         h3c="remote-backup group\n data-channel interface $1"),
    rule("hrp track interface", "Lower this device's priority when interface $1 fails.",
         h3c="track <id> interface $1\nremote-backup group\n track <id>"),
    rule("hrp track vlan", "Lower this device's priority when every interface of VLAN $1 is down.",
         h3c="track <id> vlan $1\nremote-backup group\n track <id>"),
    rule("hrp authentication-key", "Authenticate HRP packets with key $1."),
    rule("hrp auto-sync config", "Back up commands other than static and policy routes automatically.",
         h3c="configuration auto-sync enable"),
    rule("hrp auto-sync static-route", "Back up static routes automatically."),
    rule("hrp auto-sync connection-status", "Back up session state automatically.",
         h3c="hot-backup enable"),
    rule("hrp preempt enable", "Enable preemption.",
         h3c="# H3C preempts by default; delay-time sets the delay"),
    rule("hrp preempt delay", "Delay preemption by $1 seconds.",
         h3c="delay-time $1"),
    rule("hrp device", "Set the device role to $1 (active or standby).",
         h3c="device-role <primary/secondary>"),
    rule("hrp escape enable",
         "Send heartbeats over service interfaces when the heartbeat link fails, avoiding dual active."),
]

GRE = [
    rule("interface Tunnel", "Create and enter tunnel interface $1.",
         cisco="interface Tunnel$1", h3c="interface Tunnel$1 mode gre"),
    rule("tunnel-protocol gre", "Use GRE as the tunnel protocol.",
         cisco="tunnel mode gre ip", h3c="# H3C sets 'mode gre' when the interface is created"),
    rule("source", "Set the tunnel source address or interface to $1.",
         cisco="tunnel source $1", h3c="source $1"),
    rule("destination", "Set the tunnel destination address to $1.",
         cisco="tunnel destination $1", h3c="destination $1"),
    rule("gre key", "Set the GRE key to $1.",
         cisco="tunnel key $1", h3c="gre key $1"),
    rule("keepalive", "Enable GRE keepalives to track tunnel state.",
         cisco="keepalive", h3c="keepalive"),
]

NAT = [
    rule("nat address-group", "Create NAT address group $1.",
         cisco="ip nat pool $1 <start_ip> <end_ip> netmask <netmask>",
         h3c="nat address-group <group_id> name $1"),
    rule("section", "Add addresses $2 to $3 to the address group as section $1.",
         cisco="# Cisco defines the range on the ip nat pool command",
         h3c="address $2 $3",
         regex=r"^section\s+\d+\s+\S+\s+\S+$"),
    rule("section", "Add addresses $1 to $2 to the address group.",
         cisco="# Cisco defines the range on the ip nat pool command",
         h3c="address $1 $2"),
    rule("mode pat", "Translate many private addresses to one public address by port (PAT).",
         cisco="# Add overload to the ip nat inside source command",
         h3c="# H3C uses PAT for address groups in nat global-policy by default"),
    rule("mode no-pat", "Translate addresses one to one without changing ports.",
         cisco="# Omit overload from the ip nat inside source command",
         h3c="# H3C sets no-pat on the nat outbound or global-policy action"),
    rule("route enable", "Install blackhole routes for the pool addresses to prevent routing loops.",
         cisco="# Add ip route <pool_net> <pool_mask> Null0 if needed",
         h3c="# H3C installs blackhole routes by default"),
    rule("nat-policy", "Enter the NAT policy view.",
         cisco="# Cisco uses an access list with ip nat inside source list",
         h3c="nat global-policy"),
    rule("action source-nat easy-ip", "Translate source addresses to the egress interface address (PAT).",
         cisco="ip nat inside source list <acl_number> interface <interface_name> overload",
         h3c="action snat easy-ip"),
    rule("action source-nat address-group", "Translate source addresses using address group $1.",
         cisco="ip nat inside source list <acl_number> pool $1 overload",
         h3c="action snat address-group <group_id_of_pool_$1>"),
    rule("action no-nat", "Do not translate matching traffic.",
         cisco="# Deny the traffic in the NAT access list",
         h3c="action snat no-nat"),
    rule("rule move", "Move NAT rule $*. Rule order sets match priority.",
         cisco="# Cisco ACL entries match in order; renumber or re-add them",
         h3c="rule move $*"),
    rule("nat server", "Map a public address and port to an inside server address and port.",
         cisco=_cisco_nat_server, h3c=_h3c_nat_server),
]

STACKING = [
    rule("stack enable", "Enable stacking once the stack cables are connected.",
         cisco="# Cisco StackWise comes up automatically once cabled", h3c="irf-mode enable"),
    rule("stack member-id", "Renumber stack member ${member} to ${new}. The device reboots to apply it.",
         cisco="switch ${member} renumber ${new}", h3c="irf member ${member} renumber ${new}",
         regex=r"^stack\s+member-id\s+(?P<member>\d+)\s+renumber\s+(?P<new>\d+)$"),
    rule("stack slot", "Set the priority of stack member ${slot} to ${prio}.",
         cisco="switch ${slot} priority ${prio}", h3c="irf member ${slot} priority ${prio}",
         regex=r"^stack\s+slot\s+(?P<slot>\d+)\s+priority\s+(?P<prio>\d+)$"),
    rule("stack slot", "Enter the view of stack member ${slot}.",
         cisco="# Cisco configures members with global commands", h3c="irf member ${slot}",
         regex=r"^stack\s+slot\s+(?P<slot>\d+)$"),
    rule("priority", "Set the member priority to $1 (1-255). The highest priority becomes master.",
         cisco="# Cisco uses switch <id> priority $1 in global mode", h3c="priority $1"),
    rule("renumber", "Renumber this stack member to $1. The device reboots to apply it.",
         cisco="# Cisco uses switch <old-id> renumber $1 in global mode", h3c="renumber $1"),
    rule("stack priority", "Set this device's stack priority to $1 (1-255).",
         cisco="switch <member-id> priority $1", h3c="irf priority $1"),
    rule("interface stack-port", "Enter stack port $1.",
         cisco="# Cisco StackWise uses dedicated stack ports", h3c="irf-port $1"),
    rule("port interface", "Bind physical interface $1 to the current stack port.",
         cisco="# Cisco StackWise uses dedicated stack cables", h3c="port group interface $1"),
    rule("stack domain", "Set the stack domain ID to $1.",
         cisco="stackwise-virtual domain $1", h3c="irf domain $1"),
    rule("mad detect mode bfd", "Detect stack splits with BFD.",
         cisco="stackwise-virtual dual-active detection", h3c="mad detect method bfd"),
    rule("display stack", "Show stack members, roles, MAC address, priority and state.",
         cisco="show switch", h3c="display irf"),
    rule("display stack topology", "Show the stack topology and link state.",
         cisco="show switch stack-ports", h3c="display irf topology"),
    rule("display stack configuration", "Show member IDs, priorities and stack port bindings.",
         cisco="show running-config | include switch", h3c="display irf configuration"),
    rule("css member-id", "Set this device's CSS member ID to $1.",
         cisco="switch $1 provision <model>", h3c="irf member $1"),
    rule("css priority", "Set this device's CSS priority to $1.",
         cisco="switch <member-id> priority $1", h3c="irf priority $1"),
]

HUAWEI_RULES: list[CliRule] = [
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
    *GRE,
    *NAT,
    *STACKING,
]

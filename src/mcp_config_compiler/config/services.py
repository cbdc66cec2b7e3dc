"""Network service configs: DHCP, routing, VRRP, SSH, wireless and GRE."""
from dataclasses import dataclass, field
from typing import Optional


# --- DHCP server ---

@dataclass
class DHCPStaticBinding:
    ip_address: str = ""
    mac_address: str = ""


@dataclass
class DHCPPool:
    pool_name: str = ""
    network: str = ""
    subnet_mask: str = ""
    gateway: str = ""
    dns_server: str = ""
    option43: str = ""  # AC address for AP discovery
    exclude_start: str = ""
    exclude_end: str = ""
    lease_days: str = ""
    lease_hours: str = ""
    lease_minutes: str = ""
    lease_seconds: str = ""
    static_bindings: list[DHCPStaticBinding] = field(default_factory=list)


@dataclass
class DHCPConfig:
    enabled: bool = False
    pools: list[DHCPPool] = field(default_factory=list)


# --- DHCP relay ---

@dataclass
class DHCPOption82Config:
    """H3C per-interface Option 82 settings."""
    enabled: bool = False
    strategy: str = "replace"  # drop, keep, replace
    circuit_id_format: str = "normal"  # normal, verbose, string
    circuit_id_string: str = ""
    circuit_id_verbose_node_identifier: str = ""  # mac, sysname, user-defined
    circuit_id_verbose_node_identifier_string: str = ""
    circuit_id_format_type: str = ""  # ascii, hex
    remote_id_format: str = "normal"  # normal, string, sysname
    remote_id_string: str = ""
    remote_id_format_type: str = ""


@dataclass
class DHCPRelaySecurityConfig:
    """H3C global relay security."""
    client_info_recording: bool = False
    client_info_refresh: bool = False
    client_info_refresh_type: str = "auto"  # auto, interval
    client_info_refresh_interval: str = ""
    mac_check: bool = False
    mac_check_aging_time: str = ""


@dataclass
class HuaweiOption82Information:
    enabled: bool = False
    strategy: str = "replace"


@dataclass
class HuaweiOption82Insert:
    vss_control: bool = False
    link_selection: bool = False
    server_id_override: bool = False


@dataclass
class HuaweiOption82Config:
    information: HuaweiOption82Information = field(default_factory=HuaweiOption82Information)
    insert: HuaweiOption82Insert = field(default_factory=HuaweiOption82Insert)


@dataclass
class HuaweiRelayOptions:
    source_ip_address: str = ""
    gateway: str = ""
    option82: HuaweiOption82Config = field(default_factory=HuaweiOption82Config)


@dataclass
class RelayServer:
    ip: str = ""
    vpn_instance: str = ""
    id: str = ""


@dataclass
class DHCPRelayInterface:
    interface_name: str = ""
    server_addresses: list[RelayServer] = field(default_factory=list)
    option82: DHCPOption82Config = field(default_factory=DHCPOption82Config)
    huawei_options: Optional[HuaweiRelayOptions] = None


@dataclass
class HuaweiRelayGlobals:
    server_match_check: bool = True
    reply_forward_all: bool = False
    trust_option82: bool = True


@dataclass
class DHCPRelayConfig:
    enabled: bool = False
    security: DHCPRelaySecurityConfig = field(default_factory=DHCPRelaySecurityConfig)
    dscp: str = ""
    interfaces: list[DHCPRelayInterface] = field(default_factory=list)
    huawei: HuaweiRelayGlobals = field(default_factory=HuaweiRelayGlobals)


# --- DHCP snooping ---

@dataclass
class DHCPSnoopingInterface:
    interface_name: str = ""
    trust: bool = False
    binding_record: bool = False  # H3C


@dataclass
class SnoopingBindingDatabase:
    enabled: bool = False
    filename: str = ""
    update_interval: str = ""


@dataclass
class H3CSnoopingOptions:
    binding_database: SnoopingBindingDatabase = field(default_factory=SnoopingBindingDatabase)


@dataclass
class TrustedInterface:
    name: str = ""
    id: str = ""


@dataclass
class UserBindAutosave:
    enabled: bool = False
    filename: str = ""
    write_delay: str = ""


@dataclass
class HuaweiSnoopingOptions:
    enabled_on_vlans: str = ""
    trusted_interfaces: list[TrustedInterface] = field(default_factory=list)
    user_bind_autosave: UserBindAutosave = field(default_factory=UserBindAutosave)


@dataclass
class DHCPSnoopingConfig:
    enabled: bool = False
    interfaces: list[DHCPSnoopingInterface] = field(default_factory=list)
    h3c: H3CSnoopingOptions = field(default_factory=H3CSnoopingOptions)
    huawei: HuaweiSnoopingOptions = field(default_factory=HuaweiSnoopingOptions)


# --- Routing ---

@dataclass
class StaticRoute:
    network: str = ""
    subnet_mask: str = ""
    next_hop: str = ""
    admin_distance: str = ""
    priority: str = ""  # older editor key for admin_distance

    @property
    def distance(self) -> str:
        return self.admin_distance or self.priority


@dataclass
class OSPFNetwork:
    network: str = ""
    wildcard_mask: str = ""


@dataclass
class OSPFArea:
    area_id: str = "0"
    area_type: str = "standard"  # standard, stub, nssa
    no_summary: bool = False
    default_cost: str = ""
    networks: list[OSPFNetwork] = field(default_factory=list)

    @property
    def is_backbone(self) -> bool:
        return self.area_id in ("0", "0.0.0.0")


@dataclass
class OSPFInterfaceConfig:
    interface_name: str = ""
    priority: str = ""
    id: str = ""


@dataclass
class OSPFConfig:
    enabled: bool = False
    process_id: str = "1"
    router_id: str = ""
    areas: list[OSPFArea] = field(default_factory=list)
    redistribute_static: bool = False
    redistribute_connected: bool = False
    default_route: bool = False
    interface_configs: list[OSPFInterfaceConfig] = field(default_factory=list)


@dataclass
class RoutingConfig:
    static_routes: list[StaticRoute] = field(default_factory=list)
    ospf: OSPFConfig = field(default_factory=OSPFConfig)


# --- VRRP ---

@dataclass
class VRRPGroup:
    group_id: str = ""
    virtual_ip: str = ""
    priority: str = "100"
    preempt: bool = True
    preempt_delay: str = ""
    auth_type: str = "none"  # none, simple, md5
    auth_key: str = ""
    advertisement_interval: str = ""
    description: str = ""
    id: str = ""


@dataclass
class VRRPInterfaceConfig:
    interface_name: str = ""
    groups: list[VRRPGroup] = field(default_factory=list)
    id: str = ""


@dataclass
class VRRPConfig:
    enabled: bool = False
    interfaces: list[VRRPInterfaceConfig] = field(default_factory=list)


# --- SSH ---

@dataclass
class SSHUser:
    username: str = ""
    password: str = ""
    auth_type: str = "password"  # password, public-key
    password_error: str = ""
    id: str = ""

    @property
    def usable(self) -> bool:
        """Users without a name or password, or with a rejected password, are skipped."""
        return bool(self.username and self.password and not self.password_error)


@dataclass
class SSHConfig:
    enabled: bool = False
    public_key_type: str = "rsa"
    users: list[SSHUser] = field(default_factory=list)
    vty_lines: str = "0 4"
    authentication_mode: str = "scheme"  # scheme, password
    protocol_inbound: str = "ssh"  # ssh, telnet, all
    domain_name: str = ""
    source_interface: str = ""


# --- Wireless ---

@dataclass
class RadioConfig:
    enabled: bool = False
    channel: str = ""
    power: str = ""


@dataclass
class VAPBinding:
    vap_profile_name: str = ""
    radio: str = "all"  # 0, 1, all


@dataclass
class APGroup:
    group_name: str = ""
    description: str = ""
    radio_2g: RadioConfig = field(default_factory=RadioConfig, metadata={"key": "radio2G"})
    radio_5g: RadioConfig = field(default_factory=RadioConfig, metadata={"key": "radio5G"})
    service_templates: list[str] = field(default_factory=list)  # H3C
    vap_bindings: list[VAPBinding] = field(default_factory=list)  # Huawei
    vlan_id: str = ""
    country_code: str = ""


@dataclass
class WirelessServiceTemplate:
    """H3C service template (SSID + security)."""
    template_name: str = ""
    ssid: str = ""
    description: str = ""
    default_vlan: str = ""
    ssid_hide: bool = False
    forward_type: str = "centralized"
    max_clients: str = ""
    auth_mode: str = "static-psk"  # static-psk, static-wep
    auth_location: str = "local-ac"
    security_mode: str = "wpa2"  # wpa, wpa2, wpa-wpa2
    psk_password: str = ""
    psk_type: str = "passphrase"  # passphrase, rawkey
    wep_key_id: str = ""
    wep_key_type: str = ""
    wep_encryption: str = ""
    wep_password: str = ""
    enabled: bool = True


@dataclass
class SecurityProfile:
    profile_name: str = ""
    security_type: str = "wpa2-psk"
    psk: str = ""


@dataclass
class SSIDProfile:
    profile_name: str = ""
    ssid: str = ""


@dataclass
class VAPProfile:
    profile_name: str = ""
    security_profile: str = ""
    ssid_profile: str = ""
    vlan_id: str = ""
    forward_mode: str = ""  # direct-forward, tunnel


@dataclass
class APDevice:
    ap_name: str = ""
    model: str = ""
    serial_number: str = ""
    mac_address: str = ""
    group_name: str = ""
    description: str = ""


@dataclass
class ACConfig:
    ac_source_interface: str = ""
    country_code: str = ""
    ap_auth_mode: str = ""  # mac, sn


@dataclass
class WirelessConfig:
    enabled: bool = False
    ac_config: ACConfig = field(default_factory=ACConfig)
    security_profiles: list[SecurityProfile] = field(default_factory=list)
    ssid_profiles: list[SSIDProfile] = field(default_factory=list)
    vap_profiles: list[VAPProfile] = field(default_factory=list)
    ap_groups: list[APGroup] = field(default_factory=list)
    ap_devices: list[APDevice] = field(default_factory=list)
    service_templates: list[WirelessServiceTemplate] = field(default_factory=list)


# --- GRE ---

@dataclass
class GREKeepalive:
    enabled: bool = False
    period: str = ""
    retry_times: str = ""


@dataclass
class GRETunnel:
    tunnel_number: str = ""
    description: str = ""
    ip_address: str = ""
    mask: str = ""
    ip_address_unnumbered_interface: str = ""
    source_type: str = "address"  # address, interface
    source_value: str = ""
    destination_address: str = ""
    mtu: str = ""
    keepalive: GREKeepalive = field(default_factory=GREKeepalive)
    security_zone: str = ""  # Huawei firewalls
    gre_key: str = ""
    gre_checksum: bool = False  # H3C
    df_bit_enable: bool = False  # H3C
    id: str = ""


@dataclass
class GREVPNConfig:
    enabled: bool = False
    tunnels: list[GRETunnel] = field(default_factory=list)

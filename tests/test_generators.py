"""Tests for per-feature CLI generators."""
import pytest

from mcp_config_compiler.compiler import FEATURES, Fragment, generate_config
from mcp_config_compiler.compiler.generators import (
    generate_dhcp,
    generate_link_aggregation,
    generate_link_mode,
    generate_vrrp,
)
from mcp_config_compiler.config import DeviceType, LinkConfig, InterfaceMode, TopologyParser, Vendor
from mcp_config_compiler.config.services import (
    DHCPConfig,
    DHCPPool,
    DHCPStaticBinding,
    VRRPConfig,
    VRRPGroup,
    VRRPInterfaceConfig,
)
from mcp_config_compiler.config.switching import (
    AggregationGroup,
    LinkAggregationConfig,
    LinkAggregationMember,
)


def vrrp_config(**group_fields):
    group = VRRPGroup(group_id="1", virtual_ip="192.168.1.1", **group_fields)
    return VRRPConfig(enabled=True, interfaces=[
        VRRPInterfaceConfig(interface_name="Vlan-interface10", groups=[group]),
    ])


def dhcp_config(**pool_fields):
    pool = DHCPPool(pool_name="POOL1", network="192.168.10.0", subnet_mask="255.255.255.0",
                    gateway="192.168.10.1", **pool_fields)
    return DHCPConfig(enabled=True, pools=[pool])


ENABLED_CONFIG = {
    "vlan": {"enabled": True, "vlanInterfaces": [
        {"vlanId": "10", "ipAddress": "192.168.10.1", "subnetMask": "255.255.255.0",
         "packetFilterInboundAclId": "acl-1", "ipsecPolicyId": "pol-1"},
    ]},
    "interfaceIP": {"enabled": True, "interfaces": [
        {"interfaceName": "GigabitEthernet1/0/1", "ipAddress": "10.0.0.1", "subnetMask": "255.255.255.0"},
    ]},
    "linkAggregation": {"enabled": True, "groups": [
        {"groupId": "1", "members": [{"name": "GigabitEthernet1/0/3"}], "trunkAllowedVlans": "10,20-22,bad"},
    ]},
    "portIsolation": {"enabled": True, "excludedVlans": "10", "groups": [
        {"groupId": "1", "interfaces": ["GigabitEthernet1/0/4", "GigabitEthernet1/0/5"]},
    ]},
    "stp": {"enabled": True, "mode": "pvst", "priority": "4096", "pvstVlans": [
        {"vlanList": "10,20", "priority": "8192"},
    ]},
    "stacking": {"enabled": True, "members": [{"memberId": "1", "priority": "32"}]},
    "mlag": {"enabled": True},
    "dhcp": {"enabled": True, "pools": [
        {"poolName": "POOL10", "network": "192.168.10.0", "subnetMask": "255.255.255.0", "gateway": "192.168.10.1"},
    ]},
    "dhcpRelay": {"enabled": True, "interfaces": [{"interfaceName": "Vlan-interface10"}]},
    "dhcpSnooping": {"enabled": True, "interfaces": [{"interfaceName": "GigabitEthernet1/0/2"}]},
    "routing": {
        "staticRoutes": [{"network": "0.0.0.0", "subnetMask": "0.0.0.0", "nextHop": "10.0.0.254"}],
        "ospf": {"enabled": True, "routerId": "1.1.1.1", "areas": [
            {"areaId": "0", "networks": [{"network": "10.0.0.0", "wildcardMask": "0.0.0.255"}]},
        ]},
    },
    "vrrp": {"enabled": True, "interfaces": [
        {"interfaceName": "Vlan-interface10", "groups": [{"groupId": "1", "virtualIp": "192.168.10.254"}]},
    ]},
    "ssh": {"enabled": True, "users": [{"username": "admin", "password": "Secret#123"}]},
    "gre": {"enabled": True, "tunnels": [
        {"tunnelNumber": "1", "ipAddress": "172.16.0.1", "mask": "255.255.255.252",
         "sourceValue": "1.1.1.1", "destinationAddress": "2.2.2.2"},
    ]},
    "wireless": {"enabled": True},
    "timeRanges": [{"name": "WORK", "periodic": {
        "enabled": True, "startTime": "08:00", "endTime": "18:00", "days": {"monday": True},
    }}],
    "acl": {"enabled": True, "acls": [
        {"id": "acl-1", "number": "3000", "rules": [{"protocol": "ip", "sourceIsAny": True}]},
    ]},
    "security": {
        "zonesEnabled": True,
        "policiesEnabled": True,
        "zones": [{"name": "trust", "members": [{"interfaceName": "GigabitEthernet1/0/1"}]}],
        "policies": [{"name": "R1", "sourceZone": "trust", "destinationZone": "untrust"}],
    },
    "objectGroups": {"addressGroupsEnabled": True, "addressGroups": [
        {"name": "SERVERS", "members": [{"address": "10.0.0.10"}]},
    ]},
    "ipsec": {
        "enabled": True,
        "transformSets": [{"id": "ts-1", "name": "TS1"}],
        "policies": [{"id": "pol-1", "name": "VPN", "seqNumber": "10", "aclId": "acl-1",
                      "transformSetIds": ["ts-1"]}],
    },
    "nat": {
        "enabled": True,
        "addressPool": {"enabled": True, "pools": [
            {"groupId": "1", "startAddress": "1.1.1.10", "endAddress": "1.1.1.20"},
        ]},
        "huawei": {"addressPools": [
            {"groupName": "POOL1", "sections": [{"startAddress": "1.1.1.10", "endAddress": "1.1.1.20"}]},
        ]},
    },
    "ha": {
        "enabled": True,
        "controlChannel": {"localIp": "10.0.0.1", "remoteIp": "10.0.0.2"},
        "huawei": {"heartbeatInterfaces": [{"interfaceName": "GigabitEthernet1/0/7", "remoteIp": "10.10.0.2"}]},
    },
}


class TestVRRP:
    """Tests for generate_vrrp."""

    def test_h3c_group(self):
        """H3C renders vrid lines and a zero preempt delay."""
        frag = generate_vrrp(Vendor.H3C, DeviceType.L3_SWITCH, vrrp_config(priority="110"))

        lines = frag.cli.splitlines()
        assert lines[0] == "interface Vlan-interface10"
        assert " vrrp vrid 1 virtual-ip 192.168.1.1" in lines
        assert " vrrp vrid 1 priority 110" in lines
        assert " vrrp vrid 1 preempt-mode delay 0" in lines
        assert lines[-1] == "quit"
        assert "undo" not in frag.cli

    def test_huawei_preempt_timer(self):
        """Huawei preempt delay uses the timer keyword."""
        frag = generate_vrrp(Vendor.HUAWEI, DeviceType.L3_SWITCH, vrrp_config(preempt_delay="5"))

        assert " vrrp vrid 1 preempt-mode timer delay 5" in frag.cli.splitlines()

    def test_cisco_preempt_off(self):
        """Cisco with preemption off disables it explicitly."""
        frag = generate_vrrp(Vendor.CISCO, DeviceType.L3_SWITCH, vrrp_config(preempt=False))

        lines = frag.cli.splitlines()
        assert " vrrp 1 ip 192.168.1.1" in lines
        assert " no vrrp 1 preempt" in lines
        assert lines[-2:] == [" no shutdown", "exit"]

    def test_incomplete_groups_skipped(self):
        """Groups without a virtual IP render nothing."""
        config = VRRPConfig(enabled=True, interfaces=[
            VRRPInterfaceConfig(interface_name="Vlanif10", groups=[VRRPGroup(group_id="1")]),
        ])

        frag = generate_vrrp(Vendor.HUAWEI, DeviceType.L3_SWITCH, config)

        assert frag.is_empty

    def test_disabled(self):
        """Disabled VRRP gives an empty fragment."""
        frag = generate_vrrp(Vendor.H3C, DeviceType.L3_SWITCH, VRRPConfig())

        assert frag.cli == ""

    def test_generic_unsupported(self):
        """Generic vendor gets a single comment line."""
        frag = generate_vrrp(Vendor.GENERIC, DeviceType.L3_SWITCH, vrrp_config())

        assert frag.cli == "# VRRP for Generic is not supported."


class TestDHCP:
    """Tests for generate_dhcp."""

    def test_h3c_pool(self):
        """H3C pool uses mask form and uppercase option 43 hex."""
        frag = generate_dhcp(Vendor.H3C, DeviceType.L3_SWITCH, dhcp_config(option43="192.168.1.10"))

        lines = frag.cli.splitlines()
        assert lines[0] == "dhcp enable"
        assert "dhcp server ip-pool POOL1" in lines
        assert " network 192.168.10.0 mask 255.255.255.0" in lines
        assert " gateway-list 192.168.10.1" in lines
        assert " option 43 hex 8007000001C0A8010A" in lines
        assert lines[-1] == "quit"

    def test_cisco_pool(self):
        """Cisco pool uses lowercase option 43 hex and exits."""
        frag = generate_dhcp(Vendor.CISCO, DeviceType.ROUTER, dhcp_config(option43="192.168.1.10"))

        lines = frag.cli.splitlines()
        assert lines[0] == "service dhcp"
        assert "ip dhcp pool POOL1" in lines
        assert " default-router 192.168.10.1" in lines
        assert " option 43 hex f104c0a8010a" in lines

    def test_huawei_option43_ascii(self):
        """Huawei sends the AC address as an ASCII sub-option."""
        frag = generate_dhcp(Vendor.HUAWEI, DeviceType.L3_SWITCH, dhcp_config(option43="192.168.1.10"))

        assert " option 43 sub-option 3 ascii 192.168.1.10" in frag.cli.splitlines()

    def test_lease_all_zero_omitted(self):
        """An all-zero lease is not rendered."""
        frag = generate_dhcp(Vendor.H3C, DeviceType.L3_SWITCH, dhcp_config(lease_days="0"))

        assert "expired" not in frag.cli

    def test_lease_rendered(self):
        """A lease renders days, hours and minutes."""
        frag = generate_dhcp(Vendor.H3C, DeviceType.L3_SWITCH, dhcp_config(lease_days="1", lease_hours="2"))

        assert " expired day 1 hour 2 minute 0" in frag.cli.splitlines()

    def test_static_binding_h3c(self):
        """H3C static bindings use the dashed MAC form."""
        config = dhcp_config(static_bindings=[
            DHCPStaticBinding(ip_address="192.168.10.50", mac_address="00:11:22:33:44:55"),
        ])

        frag = generate_dhcp(Vendor.H3C, DeviceType.L3_SWITCH, config)

        assert (
            " static-bind ip-address 192.168.10.50 mask 255.255.255.0 hardware-address 0011-2233-4455"
            in frag.cli.splitlines()
        )

    def test_static_binding_cisco(self):
        """Cisco static bindings become their own host pool."""
        config = dhcp_config(static_bindings=[
            DHCPStaticBinding(ip_address="192.168.10.50", mac_address="00:11:22:33:44:55"),
        ])

        frag = generate_dhcp(Vendor.CISCO, DeviceType.ROUTER, config)

        lines = frag.cli.splitlines()
        assert "ip dhcp pool STATIC_001122334455" in lines
        assert " client-identifier 0100.1122.3344.55" in lines

    def test_no_pools(self):
        """Enabled without pools is empty."""
        frag = generate_dhcp(Vendor.H3C, DeviceType.L3_SWITCH, DHCPConfig(enabled=True))

        assert frag.is_empty


class TestLinkAggregation:
    """Tests for generate_link_aggregation."""

    def make_config(self, **group_fields):
        group = AggregationGroup(
            group_id="1",
            members=[LinkAggregationMember(name="GigabitEthernet1/0/1"),
                     LinkAggregationMember(name="GigabitEthernet1/0/2")],
            **group_fields,
        )
        return LinkAggregationConfig(enabled=True, groups=[group])

    def test_h3c_bridge_aggregation(self):
        """H3C L2 groups are Bridge-Aggregation with member bindings."""
        frag = generate_link_aggregation(Vendor.H3C, DeviceType.L3_SWITCH, self.make_config(mode="dynamic"))

        lines = frag.cli.splitlines()
        assert "interface Bridge-Aggregation1" in lines
        assert " link-aggregation mode dynamic" in lines
        assert lines.count(" port link-aggregation group 1") == 2

    def test_h3c_route_aggregation(self):
        """H3C L3 groups are Route-Aggregation."""
        frag = generate_link_aggregation(Vendor.H3C, DeviceType.ROUTER, self.make_config(interface_mode="l3"))

        assert "interface Route-Aggregation1" in frag.cli.splitlines()

    def test_huawei_eth_trunk(self):
        """Huawei groups are Eth-Trunk with trunk allow-pass ranges."""
        frag = generate_link_aggregation(
            Vendor.HUAWEI, DeviceType.L3_SWITCH,
            self.make_config(mode="lacp-static", interface_mode="trunk", trunk_allowed_vlans="10,20-30"),
        )

        lines = frag.cli.splitlines()
        assert "interface Eth-Trunk1" in lines
        assert " mode lacp-static" in lines
        assert " port trunk allow-pass vlan 10 20 to 30" in lines
        assert lines.count(" eth-trunk 1") == 2

    def test_cisco_port_channel(self):
        """Cisco members join with channel-group."""
        frag = generate_link_aggregation(Vendor.CISCO, DeviceType.L3_SWITCH, self.make_config(mode="active"))

        lines = frag.cli.splitlines()
        assert "interface Port-channel1" in lines
        assert lines.count(" channel-group 1 mode active") == 2

    def test_group_without_members_skipped(self):
        """Groups with no members render nothing."""
        config = LinkAggregationConfig(enabled=True, groups=[AggregationGroup(group_id="1")])

        frag = generate_link_aggregation(Vendor.H3C, DeviceType.L3_SWITCH, config)

        assert frag.is_empty


class TestLinkMode:
    """Tests for generate_link_mode."""

    def test_h3c_access(self):
        """H3C access port uses a single line."""
        cli = generate_link_mode("GigabitEthernet1/0/1", Vendor.H3C,
                                 LinkConfig(mode=InterfaceMode.ACCESS, access_vlan="10"))

        assert cli.splitlines() == ["interface GigabitEthernet1/0/1", " port access vlan 10", "quit"]

    def test_huawei_trunk_default_allowed(self):
        """An empty allowed list permits every VLAN."""
        cli = generate_link_mode("GigabitEthernet0/0/1", Vendor.HUAWEI, LinkConfig(mode=InterfaceMode.TRUNK))

        assert " port trunk allow-pass vlan 1 to 4094" in cli.splitlines()

    def test_cisco_trunk(self):
        """Cisco trunk lists native and allowed VLANs."""
        cli = generate_link_mode(
            "GigabitEthernet0/1", Vendor.CISCO,
            LinkConfig(mode=InterfaceMode.TRUNK, trunk_native_vlan="99", trunk_allowed_vlans="10-12,20"),
        )

        assert cli.splitlines() == [
            "interface GigabitEthernet0/1",
            " switchport mode trunk",
            " switchport trunk native vlan 99",
            " switchport trunk allowed vlan 10-12,20",
            "exit",
        ]

    def test_port_range(self):
        """A port range repeats the block for each port."""
        cli = generate_link_mode(
            "GigabitEthernet1/0/1", Vendor.H3C,
            LinkConfig(mode=InterfaceMode.ACCESS, access_vlan="10", apply_to_port_range="2-3"),
        )

        assert [line for line in cli.splitlines() if line.startswith("interface")] == [
            "interface GigabitEthernet1/0/2",
            "interface GigabitEthernet1/0/3",
        ]

    def test_unconfigured(self):
        """Unconfigured links render nothing."""
        assert generate_link_mode("GigabitEthernet1/0/1", Vendor.H3C, LinkConfig()) == ""


class TestFeatureTotality:
    """Every feature renders for every vendor."""

    @pytest.mark.parametrize("vendor", list(Vendor))
    @pytest.mark.parametrize("feature", FEATURES)
    def test_default_node(self, vendor, feature):
        """Features of an unconfigured node return a Fragment."""
        node = TopologyParser().parse_node({"id": "n1", "vendor": vendor.value})

        frag = generate_config(node, feature)

        assert isinstance(frag, Fragment)

    @pytest.mark.parametrize("device_type", ["L3 Switch", "Firewall"])
    @pytest.mark.parametrize("vendor", list(Vendor))
    @pytest.mark.parametrize("feature", FEATURES)
    def test_enabled_node(self, device_type, vendor, feature):
        """Features of a fully configured node return a Fragment."""
        node = TopologyParser().parse_node({
            "id": "n1", "vendor": vendor.value, "type": device_type, "config": ENABLED_CONFIG,
        })

        frag = generate_config(node, feature)

        assert isinstance(frag, Fragment)

    def test_unknown_feature(self):
        """Unknown features give a comment."""
        node = TopologyParser().parse_node({"id": "n1", "vendor": "H3C"})

        frag = generate_config(node, "Teleport")

        assert frag.cli == "# Feature 'Teleport' not implemented for local generation."

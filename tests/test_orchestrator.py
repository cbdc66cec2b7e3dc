"""Tests for full device script assembly."""
from pathlib import Path

import pytest

from mcp_config_compiler.compiler import SECTIONS, Fragment, generate_all_cli_commands
from mcp_config_compiler.compiler import orchestrator
from mcp_config_compiler.compiler.orchestrator import Section
from mcp_config_compiler.config import TopologyInventory, TopologyParser


@pytest.fixture
def parser():
    return TopologyParser()


@pytest.fixture
def h3c_topology():
    """H3C core switch with SVIs, DHCP, VRRP, a LAG and three links."""
    return {
        "nodes": [{
            "id": "core-1",
            "name": "CORE-1",
            "vendor": "H3C",
            "type": "L3 Switch",
            "ports": [
                {"id": "p1", "name": "GigabitEthernet1/0/1"},
                {"id": "p2", "name": "GigabitEthernet1/0/2"},
                {"id": "p3", "name": "GigabitEthernet1/0/3"},
            ],
            "config": {
                "vlan": {"enabled": True, "vlanInterfaces": [
                    {"vlanId": "10", "ipAddress": "192.168.10.1", "subnetMask": "255.255.255.0"},
                    {"vlanId": "11", "ipAddress": "192.168.11.1", "subnetMask": "255.255.255.0"},
                    {"vlanId": "12", "ipAddress": "192.168.12.1", "subnetMask": "255.255.255.0"},
                ]},
                "dhcp": {"enabled": True, "pools": [
                    {"poolName": "POOL10", "network": "192.168.10.0", "subnetMask": "255.255.255.0",
                     "gateway": "192.168.10.1"},
                ]},
                "vrrp": {"enabled": True, "interfaces": [
                    {"interfaceName": "Vlan-interface10", "groups": [
                        {"groupId": "1", "virtualIp": "192.168.10.254", "priority": "110"},
                    ]},
                ]},
                "linkAggregation": {"enabled": True, "groups": [
                    {"groupId": "1", "mode": "dynamic",
                     "members": [{"name": "GigabitEthernet1/0/3"}]},
                ]},
            },
        }],
        "connections": [
            {"from": {"nodeId": "core-1", "portId": "p1"}, "to": {"nodeId": "acc-1", "portId": "p1"},
             "config": {"mode": "trunk", "trunkAllowedVlans": "20,30-31"}},
            {"from": {"nodeId": "acc-2", "portId": "p1"}, "to": {"nodeId": "core-1", "portId": "p2"},
             "config": {"mode": "access", "accessVlan": "20"}},
            {"from": {"nodeId": "core-1", "portId": "p3"}, "to": {"nodeId": "acc-3", "portId": "p1"},
             "config": {"mode": "access", "accessVlan": "30"}},
        ],
    }


class TestGenerateAllCliCommands:
    """Tests for generate_all_cli_commands."""

    def test_preamble(self, parser, h3c_topology):
        """H3C scripts enter system view and set the sysname."""
        nodes, connections = parser.parse_topology(h3c_topology)

        script = generate_all_cli_commands(nodes[0], connections)

        assert script.splitlines()[:2] == ["system-view", "sysname CORE-1"]

    def test_vlan_database_runs(self, parser, h3c_topology):
        """VLANs from SVIs and links are declared once as runs."""
        nodes, connections = parser.parse_topology(h3c_topology)

        script = generate_all_cli_commands(nodes[0], connections)

        lines = script.splitlines()
        start = lines.index("! VLAN Database")
        assert lines[start + 2:start + 5] == ["vlan 10 to 12", "vlan 20", "vlan 30 to 31"]

    def test_aggregated_port_has_no_link_mode(self, parser, h3c_topology):
        """A LAG member port gets no access/trunk block of its own."""
        nodes, connections = parser.parse_topology(h3c_topology)

        script = generate_all_cli_commands(nodes[0], connections)

        link_modes = script.split("! Interface Link Modes Configuration")[1]
        assert "interface GigabitEthernet1/0/1" in link_modes
        assert "interface GigabitEthernet1/0/2" in link_modes
        assert "port access vlan 30" not in link_modes

    def test_port_range_skips_aggregated_port(self, parser):
        """A port range expanding over a LAG member leaves that member out."""
        nodes, connections = parser.parse_topology({
            "nodes": [{
                "id": "s1",
                "vendor": "H3C",
                "ports": [{"id": "p1", "name": "GigabitEthernet1/0/1"}],
                "config": {"linkAggregation": {"enabled": True, "groups": [
                    {"groupId": "1", "members": [{"name": "GigabitEthernet1/0/3"}]},
                ]}},
            }],
            "connections": [{"from": {"nodeId": "s1", "portId": "p1"}, "to": {"nodeId": "s2", "portId": "p1"},
                             "config": {"mode": "access", "accessVlan": "20", "applyToPortRange": "1-4"}}],
        })

        script = generate_all_cli_commands(nodes[0], connections)

        link_modes = script.split("! Interface Link Modes Configuration")[1]
        assert "interface GigabitEthernet1/0/3" not in link_modes
        for port in ("1", "2", "4"):
            assert f"interface GigabitEthernet1/0/{port}" in link_modes

    def test_acl_before_vlan_interfaces(self, parser):
        """ACLs are defined before the SVI that filters with them."""
        node = parser.parse_node({
            "id": "s1",
            "vendor": "H3C",
            "config": {
                "acl": {"enabled": True, "acls": [
                    {"id": "acl-1", "number": "3000", "rules": [{"sourceIsAny": True, "protocol": "ip"}]},
                ]},
                "vlan": {"enabled": True, "vlanInterfaces": [
                    {"vlanId": "10", "ipAddress": "192.168.10.1", "subnetMask": "255.255.255.0",
                     "packetFilterInboundAclId": "acl-1"},
                ]},
            },
        })

        script = generate_all_cli_commands(node, [])

        assert script.index("! ACL Configuration") < script.index("! VLAN Interfaces Configuration")
        assert script.index("acl number 3000") < script.index(" packet-filter 3000 inbound")

    @pytest.mark.parametrize("feature,key", [
        ("Link Aggregation", "linkAggregation"),
        ("VLAN Interfaces", "vlan"),
        ("Physical Interfaces", "interfaceIP"),
    ])
    def test_disabled_feature_has_no_section(self, parser, feature, key):
        """Populated but disabled features produce no section."""
        populated = {
            "linkAggregation": {"enabled": False, "groups": [
                {"groupId": "1", "members": [{"name": "GigabitEthernet1/0/3"}]},
            ]},
            "vlan": {"enabled": False, "vlanInterfaces": [
                {"vlanId": "10", "ipAddress": "192.168.10.1", "subnetMask": "255.255.255.0"},
            ]},
            "interfaceIP": {"enabled": False, "interfaces": [
                {"interfaceName": "GigabitEthernet1/0/1", "ipAddress": "10.0.0.1", "subnetMask": "255.255.255.0"},
            ]},
        }
        node = parser.parse_node({"id": "s1", "vendor": "H3C", "config": {key: populated[key]}})

        script = generate_all_cli_commands(node, [])

        assert f"! {feature} Configuration" not in script

    def test_section_order(self, parser, h3c_topology):
        """Sections appear in dependency order."""
        nodes, connections = parser.parse_topology(h3c_topology)

        script = generate_all_cli_commands(nodes[0], connections)

        order = [
            script.index("! VLAN Database"),
            script.index("! DHCP Server Configuration"),
            script.index("! VLAN Interfaces Configuration"),
            script.index("! Link Aggregation Configuration"),
            script.index("! Interface Link Modes Configuration"),
            script.index("! VRRP Configuration"),
        ]
        assert order == sorted(order)

    def test_vrrp_lines(self, parser, h3c_topology):
        """The VRRP section carries the group's lines."""
        nodes, connections = parser.parse_topology(h3c_topology)

        script = generate_all_cli_commands(nodes[0], connections)

        lines = script.splitlines()
        assert " vrrp vrid 1 virtual-ip 192.168.10.254" in lines
        assert " vrrp vrid 1 priority 110" in lines
        assert " vrrp vrid 1 preempt-mode delay 0" in lines

    def test_idempotent(self, parser, h3c_topology):
        """Compiling twice gives the same script."""
        nodes, connections = parser.parse_topology(h3c_topology)

        first = generate_all_cli_commands(nodes[0], connections)
        second = generate_all_cli_commands(nodes[0], connections)

        assert first == second

    def test_no_node(self):
        """No node compiles to an empty script."""
        assert generate_all_cli_commands(None, []) == ""

    def test_disabled_sections_omitted(self, parser):
        """A bare node has only its preamble."""
        node = parser.parse_node({"id": "r1", "name": "R1", "vendor": "Cisco", "type": "Router"})

        assert generate_all_cli_commands(node, []) == "configure terminal\nhostname R1"

    def test_huawei_vlan_batch(self, parser):
        """Huawei declares link VLANs with vlan batch."""
        nodes, connections = parser.parse_topology({
            "nodes": [{"id": "s1", "vendor": "Huawei",
                       "ports": [{"id": "p1", "name": "GigabitEthernet0/0/1"}]}],
            "connections": [{"from": {"nodeId": "s1", "portId": "p1"}, "to": {"nodeId": "s2", "portId": "p1"},
                             "config": {"mode": "trunk", "trunkAllowedVlans": "10,20"}}],
        })

        script = generate_all_cli_commands(nodes[0], connections)

        assert "vlan batch 10 20" in script.splitlines()
        assert " port trunk allow-pass vlan 10 20" in script.splitlines()

    def test_failed_section_becomes_comment(self, parser, monkeypatch):
        """A section that raises is replaced by a comment."""
        def broken(node, connections):
            raise RuntimeError("boom")

        monkeypatch.setattr(orchestrator, "SECTIONS", [Section("Broken", lambda n: True, broken)])
        node = parser.parse_node({"id": "s1", "name": "S1", "vendor": "H3C"})

        script = generate_all_cli_commands(node, [])

        assert "# Broken generation failed: boom" in script

    def test_section_titles_unique(self):
        """Every section has its own header."""
        titles = [section.title for section in SECTIONS]

        assert len(titles) == len(set(titles))

    def test_sections_return_fragments(self, parser):
        """Enabled sections render to Fragments."""
        node = parser.parse_node({"id": "s1", "vendor": "H3C"})

        for section in SECTIONS:
            assert isinstance(section.render(node, []), Fragment)


class TestExampleTopology:
    """The shipped example topology compiles cleanly."""

    def test_every_node_compiles(self):
        """No section of any example node fails."""
        path = Path(__file__).resolve().parent.parent / "configs" / "topology.example.yaml"
        inv = TopologyInventory(str(path))

        for node in inv.get_all_nodes():
            script = generate_all_cli_commands(node, inv.get_node_connections(node.id))
            assert script
            assert "generation failed" not in script

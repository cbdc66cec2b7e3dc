"""Tests for VLAN database aggregation."""
from mcp_config_compiler.compiler import collect_vlan_ids, is_aggregated_port, render_vlan_database
from mcp_config_compiler.config import TopologyParser, Vendor


def make_node(vendor="H3C", config=None):
    return TopologyParser().parse_node({
        "id": "sw1",
        "name": "SW1",
        "vendor": vendor,
        "type": "L3 Switch",
        "ports": [
            {"id": "p1", "name": "GigabitEthernet1/0/1"},
            {"id": "p2", "name": "GigabitEthernet1/0/2"},
        ],
        "config": config or {},
    })


def make_connections(items):
    return TopologyParser().parse_connections(items)


class TestCollectVlanIds:
    """Tests for collect_vlan_ids."""

    def test_svi_and_links(self):
        """Ids come from SVIs and links touching the node."""
        node = make_node(config={
            "vlan": {"enabled": True, "vlanInterfaces": [{"vlanId": "10"}]},
        })
        connections = make_connections([
            {"from": {"nodeId": "sw1", "portId": "p1"}, "to": {"nodeId": "sw2", "portId": "p1"},
             "config": {"mode": "trunk", "trunkNativeVlan": "30", "trunkAllowedVlans": "20,31"}},
            {"from": {"nodeId": "sw3", "portId": "p1"}, "to": {"nodeId": "sw4", "portId": "p1"},
             "config": {"mode": "access", "accessVlan": "99"}},
        ])

        ids = collect_vlan_ids(node, connections)

        assert ids == [10, 20, 30, 31]

    def test_aggregation_group_vlans(self):
        """Enabled aggregation groups contribute their VLANs."""
        node = make_node(config={
            "linkAggregation": {"enabled": True, "groups": [
                {"groupId": "1", "interfaceMode": "access", "accessVlan": "50"},
            ]},
        })

        assert collect_vlan_ids(node, []) == [50]

    def test_disabled_aggregation_ignored(self):
        """Disabled aggregation contributes nothing."""
        node = make_node(config={
            "linkAggregation": {"enabled": False, "groups": [
                {"groupId": "1", "interfaceMode": "access", "accessVlan": "50"},
            ]},
        })

        assert collect_vlan_ids(node, []) == []

    def test_non_numeric_ids_ignored(self):
        """Non-numeric SVI ids are skipped."""
        node = make_node(config={"vlan": {"enabled": True, "vlanInterfaces": [{"vlanId": "abc"}]}})

        assert collect_vlan_ids(node, []) == []


class TestRenderVlanDatabase:
    """Tests for render_vlan_database."""

    def test_h3c_runs(self):
        """H3C declares contiguous runs with 'to'."""
        text = render_vlan_database(Vendor.H3C, [10, 11, 12, 20, 30, 31])

        assert text.splitlines() == ["vlan 10 to 12", "vlan 20", "vlan 30 to 31"]

    def test_huawei_batch(self):
        """Huawei declares all ids in one batch."""
        text = render_vlan_database(Vendor.HUAWEI, [10, 20])

        assert text == "vlan batch 10 20"

    def test_cisco_names(self):
        """Cisco declares each VLAN with its name."""
        text = render_vlan_database(Vendor.CISCO, [10, 20], {10: "USERS"})

        assert text.splitlines() == ["vlan 10", " name USERS", "exit", "vlan 20", "exit"]

    def test_h3c_descriptions(self):
        """H3C adds description blocks after the declarations."""
        text = render_vlan_database(Vendor.H3C, [10], {10: "USERS"})

        assert text.splitlines() == ["vlan 10", "", "vlan 10", " description USERS", "quit"]

    def test_empty_and_generic(self):
        """No ids or a generic vendor render nothing."""
        assert render_vlan_database(Vendor.H3C, []) == ""
        assert render_vlan_database(Vendor.GENERIC, [10]) == ""


class TestAggregatedPort:
    """Tests for is_aggregated_port."""

    def test_member_port(self):
        """Members of an enabled group are aggregated."""
        node = make_node(config={
            "linkAggregation": {"enabled": True, "groups": [
                {"groupId": "1", "members": [{"name": "GigabitEthernet1/0/1"}]},
            ]},
        })

        assert is_aggregated_port(node, "GigabitEthernet1/0/1")
        assert not is_aggregated_port(node, "GigabitEthernet1/0/2")

    def test_legacy_single_group_shape(self):
        """The single-group shape is accepted."""
        node = make_node(config={
            "linkAggregation": {"enabled": True, "groupId": "1",
                                "members": [{"name": "GigabitEthernet1/0/2"}]},
        })

        assert is_aggregated_port(node, "GigabitEthernet1/0/2")

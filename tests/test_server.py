"""Tests for the MCP tool handlers."""
import json

import pytest
from pydantic import AnyUrl

from mcp_config_compiler import server
from mcp_config_compiler.compiler import FEATURES
from mcp_config_compiler.config import TopologyInventory

TOPOLOGY = """
nodes:
  - id: core-1
    name: CORE-1
    vendor: H3C
    ports:
      - {id: p1, name: GigabitEthernet1/0/1}
    config:
      vrrp:
        enabled: true
        interfaces:
          - interfaceName: Vlan-interface10
            groups:
              - {groupId: "1", virtualIp: 192.168.10.254, priority: "110"}
  - id: acc-1
    vendor: Huawei
    ports:
      - {id: p1, name: GigabitEthernet0/0/1}
connections:
  - from: {nodeId: core-1, portId: p1}
    to: {nodeId: acc-1, portId: p1}
    config: {mode: access, accessVlan: "10"}
"""


@pytest.fixture
def inventory(tmp_path, monkeypatch):
    """Point the server at a temporary topology."""
    path = tmp_path / "topology.yaml"
    path.write_text(TOPOLOGY)
    inv = TopologyInventory(str(path))
    monkeypatch.setattr(server, "inventory", inv)
    return inv


def payload(result):
    assert len(result) == 1
    return json.loads(result[0].text)


class TestTools:
    """Tests for tool listing and dispatch."""

    @pytest.mark.asyncio
    async def test_list_tools(self):
        """All tools are advertised."""
        tools = await server.list_tools()

        assert {t.name for t in tools} == {
            "list_devices", "list_features", "compile_device", "preview_feature",
            "compile_node", "translate_command", "explain_command",
        }

    @pytest.mark.asyncio
    async def test_list_features(self):
        """Feature names are listed without a topology."""
        result = await server.call_tool("list_features", {})

        assert payload(result)["features"] == FEATURES

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        """Unknown tools are reported."""
        result = await server.call_tool("reboot", {})

        assert result[0].text == "Unknown tool: reboot"

    @pytest.mark.asyncio
    async def test_list_devices(self, inventory):
        """Devices carry vendor and type."""
        result = await server.call_tool("list_devices", {})

        devices = payload(result)["devices"]
        assert [d["id"] for d in devices] == ["core-1", "acc-1"]
        assert devices[0]["vendor"] == "H3C"
        assert devices[1]["name"] == "acc-1"

    @pytest.mark.asyncio
    async def test_list_devices_by_vendor(self, inventory):
        """A vendor argument keeps only that vendor's nodes."""
        result = await server.call_tool("list_devices", {"vendor": "huawei"})

        assert [d["id"] for d in payload(result)["devices"]] == ["acc-1"]

    @pytest.mark.asyncio
    async def test_list_devices_unknown_vendor(self, inventory):
        """Unknown vendors come back as an error."""
        result = await server.call_tool("list_devices", {"vendor": "Juniper"})

        assert result[0].text == "Error: Unknown vendor: Juniper"

    @pytest.mark.asyncio
    async def test_compile_device(self, inventory):
        """A device compiles with its connections."""
        result = await server.call_tool("compile_device", {"device_id": "core-1"})

        data = payload(result)
        lines = data["cli"].splitlines()
        assert data["vendor"] == "H3C"
        assert lines[:2] == ["system-view", "sysname CORE-1"]
        assert "vlan 10" in lines
        assert " port access vlan 10" in lines
        assert " vrrp vrid 1 priority 110" in lines

    @pytest.mark.asyncio
    async def test_compile_unknown_device(self, inventory):
        """Errors come back as text."""
        result = await server.call_tool("compile_device", {"device_id": "nope"})

        assert result[0].text.startswith("Error:")
        assert "Unknown device" in result[0].text

    @pytest.mark.asyncio
    async def test_preview_feature(self, inventory):
        """A single feature renders with its explanation."""
        result = await server.call_tool("preview_feature", {"device_id": "core-1", "feature": "VRRP"})

        data = payload(result)
        assert data["feature"] == "VRRP"
        assert " vrrp vrid 1 virtual-ip 192.168.10.254" in data["cli"].splitlines()
        assert data["explanation"]

    @pytest.mark.asyncio
    async def test_preview_unknown_feature(self, inventory):
        """Unknown features are an error."""
        result = await server.call_tool("preview_feature", {"device_id": "core-1", "feature": "Teleport"})

        assert result[0].text.startswith("Error: Unknown feature: Teleport")

    @pytest.mark.asyncio
    async def test_compile_node_inline(self):
        """Inline nodes compile without a topology file."""
        result = await server.call_tool("compile_node", {
            "node": {"id": "r1", "name": "R1", "vendor": "Cisco", "type": "Router"},
        })

        assert payload(result)["cli"] == "configure terminal\nhostname R1"

    @pytest.mark.asyncio
    async def test_compile_node_invalid(self):
        """Parse errors come back as text."""
        result = await server.call_tool("compile_node", {"node": {"id": "r1", "vendor": "Juniper"}})

        assert result[0].text.startswith("Error:")

    @pytest.mark.asyncio
    async def test_translate_command(self):
        """Commands translate between dialects."""
        result = await server.call_tool("translate_command", {
            "command": "dhcp server ip-pool POOL1",
            "source_vendor": "H3C",
            "target_vendor": "Huawei",
        })

        data = payload(result)
        assert data["cli"] == "ip pool POOL1"
        assert data["target_vendor"] == "Huawei"

    @pytest.mark.asyncio
    async def test_translate_unknown_vendor(self):
        """Unknown vendors are an error."""
        result = await server.call_tool("translate_command", {
            "command": "sysname X",
            "source_vendor": "H3C",
            "target_vendor": "Juniper",
        })

        assert result[0].text == "Error: Unknown vendor: Juniper"

    @pytest.mark.asyncio
    async def test_explain_command(self):
        """Each line is explained."""
        result = await server.call_tool("explain_command", {
            "command": "sysname CORE-1\nfrobnicate",
            "vendor": "h3c",
        })

        explanations = payload(result)["explanations"]
        assert explanations[0] == {"command": "sysname CORE-1", "explanation": "Set the device hostname to CORE-1."}
        assert explanations[1]["explanation"] == '- No explanation found for "frobnicate"'


class TestResources:
    """Tests for compiled-script resources."""

    @pytest.mark.asyncio
    async def test_list_resources(self, inventory):
        """Each node has a CLI resource."""
        resources = await server.list_resources()

        assert [str(r.uri) for r in resources] == ["topology://core-1/cli", "topology://acc-1/cli"]

    @pytest.mark.asyncio
    async def test_read_resource(self, inventory):
        """Reading a resource returns the compiled script."""
        text = await server.read_resource(AnyUrl("topology://acc-1/cli"))

        assert text.splitlines()[0] == "system-view"
        assert "vlan batch 10" in text.splitlines()

    @pytest.mark.asyncio
    async def test_read_unknown_resource(self, inventory):
        """Other URIs are reported as unknown."""
        text = await server.read_resource(AnyUrl("topology://acc-1/config"))

        assert "Unknown resource" in json.loads(text)["error"]

"""MCP server for the multi-vendor config compiler.

Compiles topology nodes into Cisco/Huawei/H3C CLI scripts and translates
single commands between those dialects. Nothing here talks to a device.

Tools exposed:
- list_devices: List the nodes of the loaded topology
- list_features: List feature names accepted by preview_feature
- compile_device: Full CLI script for a topology node
- preview_feature: One feature of a node, with its explanation
- compile_node: Full CLI script for an inline node + connections
- translate_command: Translate commands from one vendor dialect to another
- explain_command: Explain what a command does

Resources:
- topology://<device_id>/cli: compiled script of a node
"""
import asyncio
import json
import logging
import os
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    TextContent,
    Tool,
    Resource,
)
from pydantic import AnyUrl

from .compiler import FEATURES, generate_all_cli_commands, generate_config
from .config import TopologyInventory, TopologyParser, Vendor
from .translator import RuleTranslator
from .utils.logging_config import setup_logging, timed_section

logger = logging.getLogger(__name__)

RESOURCE_SCHEME = "topology://"
DIALECT_NAMES = [Vendor.CISCO.value, Vendor.HUAWEI.value, Vendor.H3C.value]

# Created on first use so translation works without a topology file
inventory: Optional[TopologyInventory] = None
translator = RuleTranslator()
parser = TopologyParser()


def get_inventory() -> TopologyInventory:
    """Get or create the topology inventory."""
    global inventory
    if inventory is None:
        config_path = os.environ.get("CLIFORGE_TOPOLOGY")
        inventory = TopologyInventory(config_path)
    return inventory


def _vendor(value: str) -> Vendor:
    for vendor in Vendor:
        if vendor.value.lower() == str(value).strip().lower():
            return vendor
    raise ValueError(f"Unknown vendor: {value}")


def _json(payload: Any) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(payload, indent=2))]


# Create MCP server
server = Server("cliforge")


# === TOOLS ===

@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="list_devices",
            description="List the nodes of the loaded topology with vendor and device type",
            inputSchema={
                "type": "object",
                "properties": {
                    "vendor": {
                        "type": "string",
                        "description": "Only list nodes of this vendor (e.g., 'Huawei')"
                    }
                },
                "required": []
            }
        ),
        Tool(
            name="list_features",
            description="List the feature names that preview_feature accepts",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="compile_device",
            description="Compile the complete CLI configuration script for a topology node",
            inputSchema={
                "type": "object",
                "properties": {
                    "device_id": {
                        "type": "string",
                        "description": "Node id or name (e.g., 'core-1')"
                    }
                },
                "required": ["device_id"]
            }
        ),
        Tool(
            name="preview_feature",
            description="Render a single feature of a node, with an explanation of each command",
            inputSchema={
                "type": "object",
                "properties": {
                    "device_id": {
                        "type": "string",
                        "description": "Node id or name"
                    },
                    "feature": {
                        "type": "string",
                        "description": "Feature name",
                        "enum": FEATURES
                    }
                },
                "required": ["device_id", "feature"]
            }
        ),
        Tool(
            name="compile_node",
            description=(
                "Compile a node given inline (same shape as a topology file entry). "
                "Connections are optional and drive access/trunk modes and VLAN collection."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "node": {
                        "type": "object",
                        "description": "Node object with id, name, vendor, type, ports and config"
                    },
                    "connections": {
                        "type": "array",
                        "description": "Topology connections",
                        "items": {"type": "object"}
                    }
                },
                "required": ["node"]
            }
        ),
        Tool(
            name="translate_command",
            description=(
                "Translate commands from one vendor dialect to another. "
                "Multi-line input is translated line by line; untranslatable lines become comments."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "command": {
                        "type": "string",
                        "description": "One command or a whole script"
                    },
                    "source_vendor": {
                        "type": "string",
                        "enum": DIALECT_NAMES
                    },
                    "target_vendor": {
                        "type": "string",
                        "enum": DIALECT_NAMES
                    }
                },
                "required": ["command", "source_vendor", "target_vendor"]
            }
        ),
        Tool(
            name="explain_command",
            description="Explain what a command does in the given vendor dialect",
            inputSchema={
                "type": "object",
                "properties": {
                    "command": {
                        "type": "string",
                        "description": "Command line"
                    },
                    "vendor": {
                        "type": "string",
                        "enum": DIALECT_NAMES
                    }
                },
                "required": ["command", "vendor"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    device_id = arguments.get("device_id", "N/A")

    async with timed_section(f"tool:{name}", device_id=device_id):
        try:
            if name == "list_devices":
                return await handle_list_devices(get_inventory(), arguments.get("vendor"))

            elif name == "list_features":
                return _json({"features": FEATURES})

            elif name == "compile_device":
                return await handle_compile_device(get_inventory(), arguments["device_id"])

            elif name == "preview_feature":
                return await handle_preview_feature(
                    get_inventory(),
                    arguments["device_id"],
                    arguments["feature"]
                )

            elif name == "compile_node":
                return await handle_compile_node(
                    arguments["node"],
                    arguments.get("connections")
                )

            elif name == "translate_command":
                return await handle_translate_command(
                    arguments["command"],
                    arguments["source_vendor"],
                    arguments["target_vendor"]
                )

            elif name == "explain_command":
                return await handle_explain_command(arguments["command"], arguments["vendor"])

            else:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]

        except Exception as e:
            logger.exception(f"Tool {name} failed")
            return [TextContent(type="text", text=f"Error: {str(e)}")]


# === TOOL HANDLERS ===

async def handle_list_devices(inv: TopologyInventory, vendor: Optional[str] = None) -> list[TextContent]:
    """List the topology's nodes, optionally only those of one vendor."""
    nodes = inv.get_nodes_by_vendor(_vendor(vendor).value) if vendor else inv.get_all_nodes()
    devices = []
    for node in nodes:
        devices.append({
            "id": node.id,
            "name": node.name or node.id,
            "vendor": node.vendor.value,
            "type": node.device_type.value,
            "ports": len(node.ports),
        })
    return _json({"devices": devices})


async def handle_compile_device(inv: TopologyInventory, device_id: str) -> list[TextContent]:
    """Compile a topology node."""
    node = inv.get_node(device_id)
    script = generate_all_cli_commands(node, inv.get_node_connections(node.id))
    return _json({
        "device_id": node.id,
        "vendor": node.vendor.value,
        "cli": script,
    })


async def handle_preview_feature(inv: TopologyInventory, device_id: str, feature: str) -> list[TextContent]:
    """Render one feature of a topology node."""
    if feature not in FEATURES:
        raise ValueError(f"Unknown feature: {feature}. Available: {', '.join(FEATURES)}")
    node = inv.get_node(device_id)
    fragment = generate_config(node, feature)
    return _json({
        "device_id": node.id,
        "feature": feature,
        **fragment.to_dict(),
    })


async def handle_compile_node(node_data: dict, connections_data: Optional[list]) -> list[TextContent]:
    """Compile an inline node."""
    node = parser.parse_node(node_data)
    connections = parser.parse_connections(connections_data)
    script = generate_all_cli_commands(node, connections)
    return _json({
        "device_id": node.id,
        "vendor": node.vendor.value,
        "cli": script,
    })


async def handle_translate_command(command: str, source: str, target: str) -> list[TextContent]:
    """Translate a command or script between dialects."""
    fragment = translator.translate_script(command, _vendor(source), _vendor(target))
    return _json({
        "source_vendor": _vendor(source).value,
        "target_vendor": _vendor(target).value,
        **fragment.to_dict(),
    })


async def handle_explain_command(command: str, vendor: str) -> list[TextContent]:
    """Explain each line of a command or script."""
    dialect = _vendor(vendor)
    lines = [line.strip() for line in command.splitlines() if line.strip()]
    return _json({
        "vendor": dialect.value,
        "explanations": [
            {"command": line, "explanation": translator.explain(line, dialect)}
            for line in lines
        ],
    })


# === RESOURCES ===

@server.list_resources()
async def list_resources() -> list[Resource]:
    """List available resources."""
    inv = get_inventory()
    resources = []

    for node in inv.get_all_nodes():
        resources.append(Resource(
            uri=AnyUrl(f"{RESOURCE_SCHEME}{node.id}/cli"),
            name=f"{node.name or node.id} CLI Script",
            description=f"Compiled {node.vendor.value} configuration for {node.id}",
            mimeType="text/plain",
        ))

    return resources


@server.read_resource()
async def read_resource(uri: AnyUrl) -> str:
    """Read a resource."""
    # Parse URI: topology://device_id/cli
    uri_str = str(uri)
    if uri_str.startswith(RESOURCE_SCHEME):
        parts = uri_str[len(RESOURCE_SCHEME):].split("/")
        if len(parts) >= 2 and parts[1] == "cli":
            inv = get_inventory()
            node = inv.get_node(parts[0])
            return generate_all_cli_commands(node, inv.get_node_connections(node.id))

    return json.dumps({"error": f"Unknown resource: {uri}"})


def main():
    """Run the MCP server."""
    setup_logging()

    async def run():
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options()
            )

    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

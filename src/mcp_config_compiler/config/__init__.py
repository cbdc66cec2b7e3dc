"""Topology data model and loaders."""
from .schema import (
    Vendor,
    DeviceType,
    InterfaceMode,
    Port,
    Endpoint,
    LinkConfig,
    Connection,
    NodeConfig,
    Node,
)
from .parser import TopologyParser, ParseError
from .inventory import TopologyInventory

__all__ = [
    "Vendor",
    "DeviceType",
    "InterfaceMode",
    "Port",
    "Endpoint",
    "LinkConfig",
    "Connection",
    "NodeConfig",
    "Node",
    "TopologyParser",
    "ParseError",
    "TopologyInventory",
]

"""Topology inventory loaded from a YAML or JSON file."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .parser import TopologyParser
from .schema import Connection, Node

logger = logging.getLogger(__name__)


class TopologyInventory:
    """Nodes and connections of one saved topology.

    ```yaml
    defaults:
      vendor: H3C
      type: L3 Switch
    nodes:
      - id: core-1
        name: CORE-1
        ports: [{id: p1, name: GigabitEthernet1/0/1}]
        config: {...}
    connections:
      - from: {nodeId: core-1, portId: p1}
        to: {nodeId: acc-1, portId: p1}
        config: {mode: trunk, trunkAllowedVlans: "10,20"}
    ```
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or self._find_config()
        self._config: dict = {}
        self._nodes: dict[str, Node] = {}
        self._connections: Optional[list[Connection]] = None
        self._parser = TopologyParser()
        self._load_config()

    def _find_config(self) -> str:
        """Find the topology file."""
        search_paths = []
        env_path = os.environ.get("CLIFORGE_TOPOLOGY")
        if env_path:
            search_paths.append(Path(env_path).expanduser())
        search_paths.extend([
            Path.cwd() / "configs" / "topology.yaml",
            Path.cwd() / "topology.yaml",
            Path.home() / ".config" / "cliforge" / "topology.yaml",
            Path("/etc/cliforge/topology.yaml"),
        ])

        for path in search_paths:
            if path.exists():
                return str(path)

        raise FileNotFoundError(
            "Could not find topology.yaml. Create one in ./configs/topology.yaml "
            "or point CLIFORGE_TOPOLOGY at a topology file"
        )

    def _load_config(self) -> None:
        """Load the topology document and apply node defaults."""
        with open(self.config_path) as f:
            if self.config_path.endswith(".json"):
                self._config = json.load(f)
            else:
                self._config = yaml.safe_load(f) or {}

        defaults = self._config.get("defaults", {}) or {}
        for node in self._config.get("nodes", []) or []:
            if not isinstance(node, dict):
                continue
            for key, value in defaults.items():
                if key not in node:
                    node[key] = value

        logger.debug(
            f"Loaded topology {self.config_path}: "
            f"{len(self.get_device_ids())} nodes"
        )

    def get_device_ids(self) -> list[str]:
        """Get all node IDs."""
        return [
            str(node.get("id"))
            for node in self._config.get("nodes", []) or []
            if isinstance(node, dict) and "id" in node
        ]

    def get_node_config(self, device_id: str) -> dict[str, Any]:
        """Get the raw node dict by id or name."""
        for node in self._config.get("nodes", []) or []:
            if not isinstance(node, dict):
                continue
            if str(node.get("id")) == device_id or node.get("name") == device_id:
                return node
        raise KeyError(f"Unknown device: {device_id}")

    def get_node(self, device_id: str) -> Node:
        """Get (and cache) the parsed node."""
        raw = self.get_node_config(device_id)
        node_id = str(raw.get("id"))
        if node_id not in self._nodes:
            self._nodes[node_id] = self._parser.parse_node(raw)
        return self._nodes[node_id]

    def get_all_nodes(self) -> list[Node]:
        """Get all parsed nodes in file order."""
        return [self.get_node(device_id) for device_id in self.get_device_ids()]

    def get_nodes_by_vendor(self, vendor: str) -> list[Node]:
        """Get nodes filtered by vendor name (case-insensitive)."""
        return [
            node for node in self.get_all_nodes()
            if node.vendor.value.lower() == vendor.lower()
        ]

    def get_connections(self) -> list[Connection]:
        """Get all parsed topology edges."""
        if self._connections is None:
            self._connections = self._parser.parse_connections(self._config.get("connections"))
        return self._connections

    def get_node_connections(self, device_id: str) -> list[Connection]:
        """Get the edges touching a node."""
        node = self.get_node(device_id)
        return [conn for conn in self.get_connections() if conn.touches(node.id)]

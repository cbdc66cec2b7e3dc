"""Parser for topology input.

Converts editor JSON/YAML dicts (camelCase keys) into the typed Node and
Connection dataclasses. Unknown keys such as canvas coordinates or cached
cli/explanation strings are ignored.
"""
import dataclasses
import logging
from enum import Enum
from typing import Any, Optional, Union, get_args, get_origin, get_type_hints

from .schema import Connection, Node, Vendor
from .switching import LinkAggregationConfig
from .security import NATPortMappingRule

logger = logging.getLogger(__name__)

# Where each vendor's variant of a vendor-keyed config lives:
# '' means the config's own top-level fields, otherwise a sub-tree key.
VARIANT_SOURCES = {
    Vendor.H3C: "",
    Vendor.HUAWEI: "huawei",
}


class ParseError(Exception):
    """Error parsing topology input."""
    pass


def camel_case(name: str) -> str:
    """Convert a snake_case field name to the editor's camelCase key."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _legacy_link_aggregation(data: dict[str, Any]) -> dict[str, Any]:
    """Lift the single-group editor shape into a one-element group list."""
    if "groups" in data or not ("groupId" in data or "members" in data):
        return data
    return {
        "enabled": data.get("enabled", False),
        "groups": [{k: v for k, v in data.items() if k != "enabled"}],
    }


def _normalize_mapping_type(data: dict[str, Any]) -> dict[str, Any]:
    """Accept enum-style names (LOAD_BALANCING) for port mapping types."""
    raw = data.get("mappingType")
    if not isinstance(raw, str):
        return data
    return {**data, "mappingType": raw.strip().lower().replace("_", "-")}


_PREPROCESSORS = {
    LinkAggregationConfig: _legacy_link_aggregation,
    NATPortMappingRule: _normalize_mapping_type,
}


class TopologyParser:
    """Parse nodes and connections from dict/YAML/JSON format."""

    def parse_node(self, data: dict[str, Any]) -> Node:
        """
        Parse one device node.

        Args:
            data: Node dict with id, name, vendor, type, ports and config

        Returns:
            Node object

        Raises:
            ParseError: If the node is structurally invalid or names an
                unknown vendor/device type
        """
        if not isinstance(data, dict):
            raise ParseError(f"Node must be an object, got {type(data).__name__}")

        vendor = self._convert(Vendor, data.get("vendor", Vendor.GENERIC.value), None, "node.vendor")
        node = self._build(Node, data, vendor, f"node[{data.get('id', '?')}]")
        logger.debug(f"Parsed node {node.id} ({node.vendor.value})")
        return node

    def parse_connection(self, data: dict[str, Any]) -> Connection:
        """Parse one topology edge."""
        if not isinstance(data, dict):
            raise ParseError(f"Connection must be an object, got {type(data).__name__}")
        return self._build(Connection, data, None, f"connection[{data.get('id', '?')}]")

    def parse_connections(self, items: Optional[list[Any]]) -> list[Connection]:
        """Parse a list of topology edges (None means no edges)."""
        if items is None:
            return []
        if not isinstance(items, list):
            raise ParseError("connections must be a list")
        return [self.parse_connection(item) for item in items]

    def parse_topology(self, data: dict[str, Any]) -> tuple[list[Node], list[Connection]]:
        """
        Parse a whole topology document.

        Args:
            data: Dict with 'nodes' and optional 'connections'

        Returns:
            Tuple of (nodes, connections)
        """
        if not isinstance(data, dict):
            raise ParseError("Topology must be an object")
        nodes_raw = data.get("nodes") or []
        if not isinstance(nodes_raw, list):
            raise ParseError("nodes must be a list")

        nodes = [self.parse_node(n) for n in nodes_raw]
        connections = self.parse_connections(data.get("connections"))
        return nodes, connections

    # --- generic dataclass construction ---

    def _build(self, cls: type, data: Any, vendor: Optional[Vendor], path: str) -> Any:
        """Build a dataclass instance from a dict, field by field."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ParseError(f"{path}: expected an object, got {type(data).__name__}")

        preprocess = _PREPROCESSORS.get(cls)
        if preprocess:
            data = preprocess(data)

        hints = get_type_hints(cls)
        kwargs = {}
        for f in dataclasses.fields(cls):
            if f.metadata.get("vendor_variant"):
                kwargs[f.name] = self._build_variant(hints[f.name], data, vendor, f"{path}.{f.name}")
                continue

            found, raw = self._lookup(data, f)
            if not found:
                if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                    raise ParseError(f"{path}: missing required field '{camel_case(f.name)}'")
                continue
            kwargs[f.name] = self._convert(hints[f.name], raw, vendor, f"{path}.{f.name}")

        return cls(**kwargs)

    def _build_variant(
        self,
        tp: Any,
        data: dict[str, Any],
        vendor: Optional[Vendor],
        path: str,
    ) -> Any:
        """Pick and build the variant class matching the node's vendor."""
        if vendor not in VARIANT_SOURCES:
            return None

        candidates = [arg for arg in get_args(tp) if arg is not type(None)]
        cls = next((c for c in candidates if c.__name__.startswith(vendor.value)), None)
        if cls is None:
            return None

        source = VARIANT_SOURCES[vendor]
        subtree = data.get(source) if source else data
        return self._build(cls, subtree or {}, vendor, f"{path}.{vendor.value}")

    @staticmethod
    def _lookup(data: dict[str, Any], f: dataclasses.Field) -> tuple[bool, Any]:
        keys = []
        if "key" in f.metadata:
            keys.append(f.metadata["key"])
        keys.extend([camel_case(f.name), f.name])
        for key in keys:
            if key in data:
                return True, data[key]
        return False, None

    def _convert(self, tp: Any, raw: Any, vendor: Optional[Vendor], path: str) -> Any:
        origin = get_origin(tp)

        if origin is Union:
            if raw is None:
                return None
            inner = [arg for arg in get_args(tp) if arg is not type(None)]
            return self._convert(inner[0], raw, vendor, path)

        if origin is list:
            if raw is None:
                return []
            if not isinstance(raw, list):
                raise ParseError(f"{path}: expected a list, got {type(raw).__name__}")
            (item_type,) = get_args(tp)
            return [
                self._convert(item_type, item, vendor, f"{path}[{i}]")
                for i, item in enumerate(raw)
            ]

        if dataclasses.is_dataclass(tp):
            return self._build(tp, raw, vendor, path)

        if isinstance(tp, type) and issubclass(tp, Enum):
            return self._enum(tp, raw, path)

        if tp is bool:
            if isinstance(raw, str):
                return raw.strip().lower() in ("true", "yes", "on", "1")
            return bool(raw)

        if tp is str:
            if raw is None:
                return ""
            if isinstance(raw, float) and raw.is_integer():
                return str(int(raw))
            return str(raw)

        return raw

    @staticmethod
    def _enum(enum_cls: type, raw: Any, path: str) -> Any:
        if isinstance(raw, enum_cls):
            return raw
        text = str(raw).strip()
        for member in enum_cls:
            if text.lower() in (member.value.lower(), member.name.lower()):
                return member
        label = "vendor" if enum_cls is Vendor else enum_cls.__name__
        raise ParseError(f"{path}: unknown {label} '{raw}'")

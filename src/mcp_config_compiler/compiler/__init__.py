"""Multi-vendor configuration compiler.

Usage:
    from mcp_config_compiler.compiler import generate_all_cli_commands

    script = generate_all_cli_commands(node, connections)
"""
from .fragment import Fragment, CliBuilder, unsupported
from .aggregation import collect_vlan_ids, render_vlan_database, is_aggregated_port
from .orchestrator import (
    FEATURES,
    SECTIONS,
    generate_config,
    generate_all_cli_commands,
)

__all__ = [
    "Fragment",
    "CliBuilder",
    "unsupported",
    "collect_vlan_ids",
    "render_vlan_database",
    "is_aggregated_port",
    "FEATURES",
    "SECTIONS",
    "generate_config",
    "generate_all_cli_commands",
]

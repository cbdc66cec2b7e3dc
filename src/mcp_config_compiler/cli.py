#!/usr/bin/env python3
"""Command-line front end for the config compiler.

Usage:
    cliforge [--topology FILE] compile [--device ID | --vendor VENDOR] [--output FILE]
    cliforge [--topology FILE] preview --device ID --feature NAME
    cliforge translate --from VENDOR --to VENDOR [LINE | --file FILE]
    cliforge features

Environment variables:
    CLIFORGE_TOPOLOGY       Topology file used when --topology is not given
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .compiler import FEATURES, generate_all_cli_commands, generate_config
from .config import ParseError, TopologyInventory, Vendor
from .translator import RuleTranslator
from .utils.logging_config import global_stats

logger = logging.getLogger(__name__)

DIALECTS = [Vendor.CISCO, Vendor.HUAWEI, Vendor.H3C]


def parse_vendor(value: str) -> Vendor:
    """Resolve a vendor name case-insensitively (argparse type)."""
    for vendor in DIALECTS:
        if vendor.value.lower() == value.strip().lower():
            return vendor
    choices = ", ".join(v.value for v in DIALECTS)
    raise argparse.ArgumentTypeError(f"unknown vendor '{value}' (choose from {choices})")


def _write(text: str, output: Optional[Path]) -> None:
    if output is None:
        print(text)
        return
    output.write_text(text + "\n")
    logger.info(f"Wrote {len(text.splitlines())} lines to {output}")


def cmd_compile(args: argparse.Namespace) -> int:
    inv = TopologyInventory(args.topology)
    if args.device:
        nodes = [inv.get_node(args.device)]
    elif args.vendor:
        nodes = inv.get_nodes_by_vendor(args.vendor.value)
        if not nodes:
            print(f"No {args.vendor.value} devices in topology", file=sys.stderr)
            return 1
    else:
        nodes = inv.get_all_nodes()

    scripts = []
    for node in nodes:
        script = generate_all_cli_commands(node, inv.get_node_connections(node.id))
        if len(nodes) > 1:
            script = f"# ===== {node.name or node.id} ({node.vendor.value}) =====\n{script}"
        scripts.append(script)

    _write("\n\n".join(scripts), args.output)
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    if args.feature not in FEATURES:
        print(f"Unknown feature: {args.feature}", file=sys.stderr)
        return 1
    inv = TopologyInventory(args.topology)
    fragment = generate_config(inv.get_node(args.device), args.feature)
    print(fragment.cli)
    if args.explain and fragment.explanation:
        print()
        print(fragment.explanation)
    return 0


def cmd_translate(args: argparse.Namespace) -> int:
    if args.file:
        text = args.file.read_text()
    elif args.line:
        text = " ".join(args.line)
    else:
        text = sys.stdin.read()

    fragment = RuleTranslator().translate_script(text, args.source, args.target)
    print(fragment.cli)
    if args.explain and fragment.explanation:
        print()
        print(fragment.explanation)
    return 0


def cmd_features(args: argparse.Namespace) -> int:
    for name in FEATURES:
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cliforge",
        description="Compile topology nodes into vendor CLI scripts and translate commands between dialects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Compile every node of ./configs/topology.yaml
    cliforge compile

    # Compile one node into a file
    cliforge --topology lab.yaml compile --device core-1 --output core-1.cfg

    # Compile only the Huawei nodes
    cliforge compile --vendor huawei

    # Show only the VRRP part of a node, with explanations
    cliforge preview --device core-1 --feature VRRP --explain

    # Translate a line from H3C to Huawei
    cliforge translate --from H3C --to Huawei "dhcp server ip-pool POOL1"

    # Translate a saved script
    cliforge translate --from Cisco --to H3C --file running.cfg

Environment:
    CLIFORGE_TOPOLOGY    Topology file (default search: ./configs/topology.yaml)
""",
    )
    parser.add_argument(
        "--topology",
        type=str,
        default=None,
        help="Topology file (YAML or JSON)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--timings",
        action="store_true",
        help="Print compile and translate timings to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_compile = sub.add_parser("compile", help="Compile full device scripts")
    p_compile.add_argument("--device", type=str, help="Only compile this node (id or name)")
    p_compile.add_argument("--vendor", type=parse_vendor, help="Only compile nodes of this vendor")
    p_compile.add_argument("--output", type=Path, help="Write to a file instead of stdout")
    p_compile.set_defaults(func=cmd_compile)

    p_preview = sub.add_parser("preview", help="Render a single feature of a node")
    p_preview.add_argument("--device", type=str, required=True, help="Node id or name")
    p_preview.add_argument("--feature", type=str, required=True, help="Feature name (see 'features'; quote names with spaces)")
    p_preview.add_argument("--explain", action="store_true", help="Also print the explanation")
    p_preview.set_defaults(func=cmd_preview)

    p_translate = sub.add_parser("translate", help="Translate commands between vendor dialects")
    p_translate.add_argument("--from", dest="source", type=parse_vendor, required=True, help="Source vendor")
    p_translate.add_argument("--to", dest="target", type=parse_vendor, required=True, help="Target vendor")
    p_translate.add_argument("--file", type=Path, help="Script file to translate")
    p_translate.add_argument("--explain", action="store_true", help="Also print what each line does")
    p_translate.add_argument("line", nargs="*", help="Command line (stdin when neither LINE nor --file is given)")
    p_translate.set_defaults(func=cmd_translate)

    p_features = sub.add_parser("features", help="List feature names accepted by 'preview'")
    p_features.set_defaults(func=cmd_features)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the cliforge command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-5s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        code = args.func(args)
        if args.timings:
            print(global_stats.summary(), file=sys.stderr)
        return code
    except KeyError as e:
        print(f"Error: {e.args[0] if e.args else e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ParseError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Command-level translation between vendor dialects.

Usage:
    from mcp_config_compiler.translator import RuleTranslator

    translator = RuleTranslator()
    print(translator.explain("port trunk permit vlan 10 to 20", Vendor.H3C))
"""
from .rules import (
    CliRule,
    TemplateConversion,
    FunctionConversion,
    NotSupported,
    RuleMatch,
    rule,
    substitute,
)
from .engine import RuleTranslator
from .tables import RULE_TABLES

__all__ = [
    "CliRule",
    "TemplateConversion",
    "FunctionConversion",
    "NotSupported",
    "RuleMatch",
    "rule",
    "substitute",
    "RuleTranslator",
    "RULE_TABLES",
]

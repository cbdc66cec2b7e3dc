"""Per-dialect rule tables, keyed by source vendor."""
from ...config.schema import Vendor
from ..rules import CliRule
from .cisco import CISCO_RULES
from .h3c import H3C_RULES
from .huawei import HUAWEI_RULES

RULE_TABLES: dict[Vendor, list[CliRule]] = {
    Vendor.CISCO: CISCO_RULES,
    Vendor.HUAWEI: HUAWEI_RULES,
    Vendor.H3C: H3C_RULES,
}

__all__ = ["RULE_TABLES", "CISCO_RULES", "H3C_RULES", "HUAWEI_RULES"]

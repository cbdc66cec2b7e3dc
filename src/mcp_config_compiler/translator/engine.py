"""Rule table interpreter.

Usage:
    from mcp_config_compiler.translator import RuleTranslator
    from mcp_config_compiler.config import Vendor

    translator = RuleTranslator()
    translator.translate_or_comment("dhcp server ip-pool POOL1", Vendor.H3C, Vendor.HUAWEI)
    # -> "ip pool POOL1"
"""
import logging
from typing import Mapping, Optional, Sequence, Union

from ..compiler.fragment import Fragment
from ..config.schema import Vendor
from ..utils.logging_config import timed
from .rules import CliRule, NotSupported, RuleMatch, substitute
from .tables import RULE_TABLES

logger = logging.getLogger(__name__)

COMMENT_MARKERS = ("#", "!")


class RuleTranslator:
    """Translate and explain single command lines between vendor dialects."""

    def __init__(self, tables: Optional[Mapping[Vendor, Sequence[CliRule]]] = None):
        tables = RULE_TABLES if tables is None else tables
        self._tables = {vendor: list(rules) for vendor, rules in tables.items()}

    def find_rule(self, vendor: Vendor, line: str) -> Optional[RuleMatch]:
        """
        Find the rule of a source dialect that applies to a line.

        The longest matching pattern wins; between equally long patterns
        the one declared first wins.

        Args:
            vendor: Source dialect
            line: Command line (surrounding whitespace is ignored)

        Returns:
            The match, or None when no rule applies
        """
        line = line.strip()
        best: Optional[RuleMatch] = None
        for candidate in self._tables.get(vendor, []):
            found = candidate.match(line)
            if found is None:
                continue
            if best is None or len(candidate.pattern) > len(best.rule.pattern):
                best = found
        return best

    def translate(self, line: str, source: Vendor, target: Vendor) -> Union[str, NotSupported]:
        """
        Translate one command line.

        Returns:
            The target-dialect text (possibly several lines), or NotSupported
            when no rule matches or the rule has no conversion for target
        """
        line = line.strip()
        if source == target:
            return line
        found = self.find_rule(source, line)
        if found is None:
            logger.debug(f"No {source.value} rule for {line!r}")
            return NotSupported(line, target)
        conversion = found.rule.conversion_for(target)
        if conversion is None:
            return NotSupported(line, target, matched=True)
        return conversion.render(found.params, found.named)

    def translate_or_comment(self, line: str, source: Vendor, target: Vendor) -> str:
        """Like translate(), but unsupported lines become a comment."""
        result = self.translate(line, source, target)
        if isinstance(result, NotSupported):
            return result.comment()
        return result

    def explain(self, line: str, vendor: Vendor) -> str:
        """English explanation of a line in the given dialect."""
        line = line.strip()
        found = self.find_rule(vendor, line)
        if found is None:
            return f'- No explanation found for "{line}"'
        return substitute(found.rule.explanation, found.params, found.named)

    @timed("translate_script")
    def translate_script(self, text: str, source: Vendor, target: Vendor) -> Fragment:
        """
        Translate a script line by line.

        Blank lines and comment lines pass through unchanged. The
        explanation lists each translated line with what it does.

        Returns:
            Fragment of the translated script and its explanation
        """
        cli: list[str] = []
        notes: list[str] = []
        for raw in text.splitlines():
            line = raw.strip()
            if not line or line.startswith(COMMENT_MARKERS):
                cli.append(raw.rstrip())
                continue
            indent = raw[: len(raw) - len(raw.lstrip())]
            translated = self.translate_or_comment(line, source, target)
            cli.extend(indent + part for part in translated.split("\n"))
            notes.append(f"`{line}`: {self.explain(line, source)}")
        return Fragment("\n".join(cli).strip("\n"), "\n".join(notes))

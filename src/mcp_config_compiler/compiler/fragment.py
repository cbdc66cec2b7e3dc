"""Generator output: the Fragment contract and the line builder."""
from dataclasses import dataclass
from typing import Optional, Union

from ..config.schema import Vendor


@dataclass(frozen=True)
class Fragment:
    """CLI text plus a human-readable explanation of it."""
    cli: str = ""
    explanation: str = ""

    @classmethod
    def empty(cls, reason: str = "") -> "Fragment":
        """Fragment for a disabled or unconfigured feature."""
        return cls("", reason)

    @property
    def is_empty(self) -> bool:
        return not self.cli.strip()

    def to_dict(self) -> dict[str, str]:
        return {"cli": self.cli, "explanation": self.explanation}


def vendor_name(vendor: Union[Vendor, str]) -> str:
    return vendor.value if isinstance(vendor, Vendor) else str(vendor)


def unsupported(feature: str, vendor: Union[Vendor, str]) -> Fragment:
    """Comment fragment for a vendor that has no rendering of a feature."""
    name = vendor_name(vendor)
    return Fragment(
        f"# {feature} for {name} is not supported.",
        f"{feature} has no {name} equivalent; nothing to apply.",
    )


class CliBuilder:
    """Ordered CLI lines with optional per-line explanations.

    Lines are kept as a list and joined once in build(), so indentation
    and ordering can be checked without string surgery.
    """

    def __init__(self):
        self._lines: list[str] = []
        self._notes: list[str] = []

    def add(self, line: str, explain: Optional[str] = None) -> "CliBuilder":
        """Append a line; explain is recorded as '`line`: text'."""
        self._lines.append(line)
        if explain:
            self._notes.append(f"`{line.strip()}`: {explain}")
        return self

    def blank(self) -> "CliBuilder":
        """Append one separator line (never two in a row, never leading)."""
        if self._lines and self._lines[-1] != "":
            self._lines.append("")
        return self

    def comment(self, text: str, marker: str = "#") -> "CliBuilder":
        self._lines.append(f"{marker} {text}" if text else marker)
        return self

    def note(self, text: str) -> "CliBuilder":
        """Record an explanation with no line of its own."""
        if text:
            self._notes.append(text)
        return self

    def extend(self, other: "CliBuilder") -> "CliBuilder":
        self._lines.extend(other._lines)
        self._notes.extend(other._notes)
        return self

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def text(self) -> str:
        """Joined CLI with leading/trailing blank lines dropped."""
        lines = list(self._lines)
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()
        return "\n".join(lines)

    def build(self, summary: str = "") -> Fragment:
        """Return the Fragment; summary leads the explanation when given."""
        notes = [summary] if summary else []
        notes.extend(self._notes)
        return Fragment(self.text(), "\n".join(notes))


def join_blocks(*blocks: str, sep: str = "\n\n") -> str:
    """Join non-empty text blocks."""
    return sep.join(block.strip("\n") for block in blocks if block and block.strip())

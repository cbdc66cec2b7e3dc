"""Declarative single-command translation rules.

A CliRule pairs a source-dialect command pattern with an English
explanation and one conversion per target vendor. Conversions are either
a template (TemplateConversion) or a pure function (FunctionConversion).

Template placeholders:
    $*        every parameter after the pattern, space separated
    $1..$n    positional parameters
    ${name}   named groups captured by the rule's regex
"""
import re
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Union

from ..config.schema import Vendor

ConversionFn = Callable[[list[str], dict[str, str]], str]


def substitute(template: str, params: list[str], named: Optional[Mapping[str, str]] = None) -> str:
    """
    Fill a template's placeholders.

    $* goes first, then $n from the highest index down so that $10 is not
    eaten by $1, then ${name}. Placeholders with no value are left as is.
    """
    out = template.replace("$*", " ".join(params))
    for index in range(len(params), 0, -1):
        out = out.replace(f"${index}", params[index - 1])
    for name, value in (named or {}).items():
        out = out.replace("${" + name + "}", value)
    return out


@dataclass(frozen=True)
class TemplateConversion:
    """Conversion given as a template string."""
    template: str

    def render(self, params: list[str], named: Mapping[str, str]) -> str:
        return substitute(self.template, params, named)


@dataclass(frozen=True)
class FunctionConversion:
    """Conversion computed by a pure function of (params, named)."""
    fn: ConversionFn

    def render(self, params: list[str], named: Mapping[str, str]) -> str:
        return self.fn(list(params), dict(named))


Conversion = Union[TemplateConversion, FunctionConversion]


@dataclass(frozen=True)
class NotSupported:
    """A line that has no rendering in the target dialect.

    matched tells whether a rule recognised the line at all; when it did,
    the rule simply has no conversion for the target vendor.
    """
    line: str
    target: Vendor
    matched: bool = False

    def comment(self) -> str:
        if self.matched:
            return f'# No direct conversion for "{self.line}" to {self.target.value}'
        return f'# No conversion found for "{self.line}"'


@dataclass(frozen=True)
class RuleMatch:
    """A rule applied to one command line."""
    rule: "CliRule"
    params: list[str]
    named: dict[str, str] = field(default_factory=dict)


def _as_conversion(value: Union[str, ConversionFn, Conversion]) -> Conversion:
    if isinstance(value, (TemplateConversion, FunctionConversion)):
        return value
    if isinstance(value, str):
        return TemplateConversion(value)
    if callable(value):
        return FunctionConversion(value)
    raise TypeError(f"Unsupported conversion: {value!r}")


@dataclass(frozen=True)
class CliRule:
    """
    One translatable command of a source dialect.

    Attributes:
        pattern: Command prefix the line must start with
        explanation: English explanation template
        conversions: Target vendor -> template string, function or Conversion
        regex: Optional pattern the whole line must also match; named groups
            become ${name} parameters
        param_names: Named groups of regex, in declaration order. Derived
            from regex when omitted.
    """
    pattern: str
    explanation: str
    conversions: Mapping[Vendor, Conversion] = field(default_factory=dict)
    regex: Optional[str] = None
    param_names: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "conversions", {vendor: _as_conversion(conv) for vendor, conv in self.conversions.items()}
        )
        if self.regex is None:
            if self.param_names:
                raise ValueError(f"Rule '{self.pattern}': param_names given without a regex")
            return
        groups = tuple(name for name, _ in sorted(self._compiled.groupindex.items(), key=lambda kv: kv[1]))
        if not self.param_names:
            object.__setattr__(self, "param_names", groups)
        elif tuple(self.param_names) != groups:
            raise ValueError(
                f"Rule '{self.pattern}': param_names {list(self.param_names)} "
                f"do not match regex groups {list(groups)}"
            )

    @property
    def _compiled(self) -> re.Pattern:
        return re.compile(self.regex)

    def match(self, line: str) -> Optional[RuleMatch]:
        """
        Apply the rule to a trimmed command line.

        The line must start with the pattern, followed by the end of the
        line, whitespace, or a digit (so "interface Tunnel" matches
        "interface Tunnel1"). A regex, when present, must also match.
        """
        if not line.startswith(self.pattern):
            return None
        rest = line[len(self.pattern):]
        if rest and not (rest[0].isspace() or rest[0].isdigit()):
            return None

        named: dict[str, str] = {}
        if self.regex is not None:
            found = self._compiled.search(line)
            if found is None:
                return None
            named = {name: value or "" for name, value in found.groupdict().items()}
        return RuleMatch(self, rest.split(), named)

    def conversion_for(self, vendor: Vendor) -> Optional[Conversion]:
        return self.conversions.get(vendor)


def rule(
    pattern: str,
    explanation: str,
    *,
    cisco: Union[str, ConversionFn, None] = None,
    huawei: Union[str, ConversionFn, None] = None,
    h3c: Union[str, ConversionFn, None] = None,
    regex: Optional[str] = None,
) -> CliRule:
    """Shorthand for declaring a rule with per-vendor conversions."""
    targets = {Vendor.CISCO: cisco, Vendor.HUAWEI: huawei, Vendor.H3C: h3c}
    conversions = {vendor: conv for vendor, conv in targets.items() if conv is not None}
    return CliRule(pattern, explanation, conversions, regex=regex)

"""Rules package."""

from collections.abc import Callable
from dataclasses import dataclass

from dotenv_lint.rules.base import Finding, Rule
from dotenv_lint.rules.incorrect_delimiter import IncorrectDelimiterRule
from dotenv_lint.rules.key_without_value import KeyWithoutValueRule
from dotenv_lint.rules.leading_character import LeadingCharacterRule
from dotenv_lint.rules.lowercase_key import LowercaseKeyRule
from dotenv_lint.rules.space_character import SpaceCharacterRule
from dotenv_lint.rules.trailing_whitespace import TrailingWhitespaceRule

__all__ = [
    "Finding",
    "Rule",
    "RuleInfo",
    "build_rules",
    "default_rules",
    "known_rule_names",
    "list_rule_info",
]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing and selection."""

    name: str
    class_name: str
    description: str
    default_enabled: bool


@dataclass(frozen=True, slots=True)
class _RuleSpec:
    name: str
    factory: Callable[[], Rule]
    class_name: str
    description: str
    default_enabled: bool


def default_rules() -> list[Rule]:
    """Return the default rule set."""
    return build_rules()


def build_rules(
    *,
    enabled_rule_names: list[str] | None = None,
    skipped_rule_names: list[str] | None = None,
) -> list[Rule]:
    """Build rule instances applying enable/skip filters."""
    specs = _ordered_rule_specs()
    registry = {spec.name: spec for spec in specs}
    skipped = set(skipped_rule_names or [])
    requested = set(enabled_rule_names or []) | skipped

    unknown = [name for name in requested if name not in registry]
    if unknown:
        joined = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown rule names: {joined}")

    if enabled_rule_names is None:
        selected = [spec.name for spec in specs if spec.default_enabled]
    else:
        selected = _dedupe(enabled_rule_names)

    return [registry[name].factory() for name in selected if name not in skipped]


def list_rule_info() -> list[RuleInfo]:
    """Return metadata for all known rules."""
    return [
        RuleInfo(
            name=spec.name,
            class_name=spec.class_name,
            description=spec.description,
            default_enabled=spec.default_enabled,
        )
        for spec in _ordered_rule_specs()
    ]


def known_rule_names() -> set[str]:
    return {spec.name for spec in _ordered_rule_specs()}


def _ordered_rule_specs() -> list[_RuleSpec]:
    return [
        _spec(LeadingCharacterRule),
        _spec(KeyWithoutValueRule),
        _spec(IncorrectDelimiterRule),
        _spec(LowercaseKeyRule),
        _spec(SpaceCharacterRule),
        _spec(TrailingWhitespaceRule),
    ]


def _spec(rule_cls: type[Rule], *, default_enabled: bool = True) -> _RuleSpec:
    return _RuleSpec(
        name=rule_cls.name,
        factory=rule_cls,
        class_name=rule_cls.__name__,
        description=(rule_cls.__doc__ or "").strip(),
        default_enabled=default_enabled,
    )


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
    return output

"""Rule reporting translation calls whose key is not a string literal."""

from __future__ import annotations

from typing import Any

from i18n_keycheck.config_error import ConfigError
from i18n_keycheck.estree import Node, callee_name, first_argument, is_string_literal
from i18n_keycheck.guard_matcher import COMPARISON_MODES, is_guarded
from i18n_keycheck.load_config import STRING_LITERAL_RULE, rule_options
from i18n_keycheck.rule_context import RuleContext

NON_LITERAL_MESSAGE = "Translation keys must be string literals"


class TranslationKeyStringLiteral:
    """Flags dynamic keys, optionally allowing ones guarded by ``t.has``."""

    rule_id = STRING_LITERAL_RULE

    def __init__(self, options: dict[str, Any], translation: dict[str, Any]) -> None:
        """Initialize the rule from its options and the translation settings."""
        self.functions = frozenset(translation.get("functions") or ())
        self.allow_guarded = bool(options.get("allowTHasProtectedConditionals"))
        self.comparison = options.get("guardComparison") or "text"
        if self.comparison not in COMPARISON_MODES:
            msg = (
                f"{self.rule_id}: guardComparison must be one of "
                f"{', '.join(COMPARISON_MODES)}, got {self.comparison!r}"
            )
            raise ConfigError(msg)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> TranslationKeyStringLiteral:
        """Create the rule from the loaded configuration."""
        return cls(
            rule_options(config, STRING_LITERAL_RULE), config.get("translation", {})
        )

    def check_call(self, call: Node, ancestors: list[Node], context: RuleContext) -> None:
        """Report the call unless its key is a literal or a guarded expression."""
        if callee_name(call) not in self.functions:
            return
        if is_string_literal(first_argument(call)):
            return
        if self.allow_guarded and is_guarded(call, ancestors, context.source, self.comparison):
            return
        context.report(self.rule_id, call, NON_LITERAL_MESSAGE)

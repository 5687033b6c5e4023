"""Rule reporting literal translation keys missing from the translation files."""

from __future__ import annotations

import logging
from typing import Any

from i18n_keycheck.config_error import ConfigError
from i18n_keycheck.estree import Node, callee_name, first_argument, literal_string
from i18n_keycheck.find_translation_context import find_translation_context
from i18n_keycheck.load_config import UNDEFINED_KEYS_RULE, rule_options
from i18n_keycheck.normalize_reference import normalize_reference
from i18n_keycheck.producer_idioms import build_producer_idioms
from i18n_keycheck.rule_context import RuleContext
from i18n_keycheck.translation_bundle import TranslationBundle

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    'Translation key "{key}" in namespace "{namespace}" is used here but missing '
    "in the translations file."
)
SCOPE_RESOLUTION_MODES = ("lexical", "ancestors")


class NoUndefinedTranslationKeys:
    """Checks that every literal key resolves in its effective namespace."""

    rule_id = UNDEFINED_KEYS_RULE

    def __init__(
        self,
        bundle: TranslationBundle,
        options: dict[str, Any],
        translation: dict[str, Any],
    ) -> None:
        """Initialize the rule with loaded translations and its settings."""
        self.bundle = bundle
        self.default_namespace = options.get("defaultNamespace") or "default"
        self.scope_resolution = options.get("scopeResolution") or "lexical"
        if self.scope_resolution not in SCOPE_RESOLUTION_MODES:
            msg = (
                f"{self.rule_id}: scopeResolution must be one of "
                f"{', '.join(SCOPE_RESOLUTION_MODES)}, got {self.scope_resolution!r}"
            )
            raise ConfigError(msg)

        self.functions = frozenset(translation.get("functions") or ())
        self.idioms = build_producer_idioms(
            translation.get("hook_producers") or (),
            translation.get("accessor_producers") or (),
        )
        self.namespace_separator = translation.get("namespace_separator", ":")
        self.plural_separator = translation.get("plural_separator", "_")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> NoUndefinedTranslationKeys:
        """Create the rule, reading the translation files it needs from disk."""
        options = rule_options(config, UNDEFINED_KEYS_RULE)
        mapping_file = options.get("namespaceTranslationMappingFile")
        if not mapping_file:
            msg = f"{UNDEFINED_KEYS_RULE}: namespaceTranslationMappingFile is required"
            raise ConfigError(msg)
        bundle = TranslationBundle.load(str(mapping_file))
        return cls(bundle, options, config.get("translation", {}))

    def check_call(self, call: Node, ancestors: list[Node], context: RuleContext) -> None:
        """Report the call if its literal key does not resolve."""
        if callee_name(call) not in self.functions:
            return
        raw_key = literal_string(first_argument(call))
        if raw_key is None:
            return

        scopes = context.scopes if self.scope_resolution == "lexical" else None
        site = find_translation_context(call, ancestors, self.idioms, scopes)
        reference = normalize_reference(
            raw_key,
            site.prefix,
            site.namespace,
            self.default_namespace,
            self.namespace_separator,
        )

        found = self.bundle.lookup(reference.namespace, reference.key, self.plural_separator)
        if found is None:
            logger.debug("Missing %s:%s in %s", reference.namespace, reference.key, context.file)
            context.report(
                self.rule_id,
                call,
                MISSING_KEY_MESSAGE.format(key=reference.key, namespace=reference.namespace),
            )

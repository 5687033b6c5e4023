"""Tests for the ``t.has(key) ? t(key) : fallback`` guard matcher."""

from collections.abc import Callable

import pytest

from i18n_keycheck.guard_matcher import GuardPair, canonical_form, guard_pair, is_guarded


def _guarded(find_call: Callable, source: str, comparison: str = "text") -> bool:
    call, ancestors, _ = find_call(source)
    return is_guarded(call, ancestors, source, comparison)


@pytest.mark.parametrize("comparison", ["text", "structure"])
@pytest.mark.parametrize(
    "source",
    [
        "const label = t.has(item.labelKey) ? t(item.labelKey) : item.labelKey;",
        """const label = t.has(item.labelKey)
            ? t(item.labelKey)
            : item.labelKey;""",
        """const label = t.has(  item.labelKey  )
            ? t(  item.labelKey  )
            : item.labelKey;""",
        "const label = t.has(data.items[0].key) ? t(data.items[0].key) : fallback;",
        "const label = t.has(key) ? t(key) : key;",
        """const label = t.has(
            item.labelKey
          ) ? t(
            item.labelKey
          ) : item.labelKey;""",
        "const label = t.has(key) ? wrap(t(key)) : key;",
    ],
)
def test_guarded_calls(find_call: Callable, source: str, comparison: str) -> None:
    """A call in the consequent of a matching has-check is guarded."""
    assert _guarded(find_call, source, comparison)


@pytest.mark.parametrize("comparison", ["text", "structure"])
@pytest.mark.parametrize(
    "source",
    [
        "t(item.labelKey)",
        "const label = t.has(item.labelKey) ? t(item.otherKey) : fallback;",
        "const label = t.has(keyA) ? t(keyB) : fallback;",
        "const label = t.has(key) ? key : t(key);",
        "const label = other.has(key) ? t(key) : key;",
        "const label = t['has'](key) ? t(key) : key;",
        "const label = t.exists(key) ? t(key) : key;",
        "if (t.has(key)) { t(key); }",
    ],
)
def test_unguarded_calls(find_call: Callable, source: str, comparison: str) -> None:
    """Mismatched keys, other branches, aliases and statements are not guards."""
    assert not _guarded(find_call, source, comparison)


def test_outer_conditional_guards_nested_call(find_call: Callable) -> None:
    """A guard further out still applies when the call is in its consequent."""
    source = "const x = t.has(key) ? (flag ? t(key) : null) : null;"
    assert _guarded(find_call, source)


def test_structure_mode_ignores_quote_style(find_call: Callable) -> None:
    """Structural comparison sees through formatting the text mode keeps."""
    quoted = "const x = t.has(prefix + 'a') ? t(prefix + \"a\") : null;"
    assert not _guarded(find_call, quoted, "text")
    assert _guarded(find_call, quoted, "structure")


def test_guard_uses_the_called_alias(find_call: Callable) -> None:
    """The has-check must be made on the same function that is called."""
    source = "const x = translate.has(key) ? translate(key) : key;"
    call, ancestors, _ = find_call(source, name="translate")
    assert is_guarded(call, ancestors, source)


def test_call_without_arguments_is_not_guarded(find_call: Callable) -> None:
    """There is nothing to compare when the call has no argument."""
    assert not _guarded(find_call, "const x = t.has(key) ? t() : key;")


def test_canonical_form_drops_positions(find_call: Callable) -> None:
    """Positions and raw text do not take part in the canonical form."""
    first, _, _ = find_call("t( 'a' )")
    second, _, _ = find_call("\n\nt(\"a\")")
    assert first["range"] != second["range"]
    assert canonical_form(first) == canonical_form(second)
    assert '"range"' not in canonical_form(first)


def test_guard_pair(find_call: Callable) -> None:
    """guard_pair normalizes both sides and rejects unknown modes."""
    source = "t(a,   b)"
    call, _, _ = find_call(source)
    checked, used = call["arguments"]
    assert guard_pair(checked, used, source, "text") == GuardPair("a", "b")
    assert not guard_pair(checked, used, source, "text").matches
    assert guard_pair(checked, checked, source, "structure").matches
    with pytest.raises(ValueError, match="Unknown guard comparison mode"):
        guard_pair(checked, used, source, "fuzzy")


def test_canonical_form_of_deep_expression() -> None:
    """Deeply nested nodes serialize without recursion."""
    node: dict = {"type": "Literal", "value": "a", "raw": "'a'", "range": [0, 3]}
    for _ in range(5000):
        right = {"type": "Literal", "value": "b", "raw": "'b'"}
        node = {"type": "BinaryExpression", "operator": "+", "left": node, "right": right}
    form = canonical_form(node)
    assert form.startswith('{"left":{"left":')
    assert "raw" not in form

"""Identifier case conversion and pluralization.

Every helper here is a pure, total function over ``str``: the empty string
maps to the empty string and no input raises.  The same functions back the
``ModuleSpec`` derived names and the Jinja2 filters registered by
:class:`~modgen.templates.TemplateRenderer`.

Examples::

    to_pascal_case("order_item")  -> "OrderItem"
    to_camel_case("order-item")   -> "orderItem"
    to_snake_case("OrderItem")    -> "order_item"
    to_kebab_case("orderItem")    -> "order-item"
    pluralize("category")         -> "categories"
"""

from __future__ import annotations

_VOWELS = frozenset("aeiou")


def split_words(value: str) -> list[str]:
    """Split an identifier into word fragments.

    Hyphens are folded to underscores, the result is split on ``_`` and each
    chunk is split again in front of every uppercase letter that is not the
    chunk's first character.  Empty chunks are dropped; the original casing
    of every fragment is kept.
    """
    words: list[str] = []
    for chunk in value.replace("-", "_").split("_"):
        current = ""
        for index, char in enumerate(chunk):
            if char.isupper() and index > 0:
                words.append(current)
                current = ""
            current += char
        if current:
            words.append(current)
    return words


def to_pascal_case(value: str) -> str:
    """Convert ``order_item`` / ``order-item`` / ``orderItem`` to ``OrderItem``."""
    return "".join(word.capitalize() for word in split_words(value))


def to_camel_case(value: str) -> str:
    """Convert ``order_item`` to ``orderItem``."""
    pascal = to_pascal_case(value)
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]


def to_snake_case(value: str) -> str:
    """Convert ``OrderItem`` or ``order-item`` to ``order_item``."""
    return "_".join(word.lower() for word in split_words(value))


def to_kebab_case(value: str) -> str:
    """Convert ``OrderItem`` or ``order_item`` to ``order-item``."""
    return "-".join(word.lower() for word in split_words(value))


def pluralize(word: str) -> str:
    """Return a heuristic English plural of *word*.

    Only three rules are applied, there is no irregular-plural table::

        pluralize("class")    -> "classes"
        pluralize("category") -> "categories"
        pluralize("day")      -> "days"
        pluralize("order")    -> "orders"
    """
    if word.endswith(("s", "x", "ch", "sh")):
        return word + "es"
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return word[:-1] + "ies"
    return word + "s"

"""Lark-based parser for a single compound selector.

A compound is everything between two combinators, e.g. ``a.link[href]``
or ``li:nth-child(2n+1)``.  The grammar lives in ``compound.lark``; the
transformer below turns the parse tree into a :class:`Segment`.
"""

from __future__ import annotations

from pathlib import Path
from typing import cast

from lark import Lark, Token, Transformer, UnexpectedInput

from cssxpath.errors import InvalidSelector
from cssxpath.model.segment import AttributeSelector, Pseudo, Segment

__all__ = ["parse_compound"]

GRAMMAR_PATH = Path(__file__).parent / "compound.lark"

_parser = Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


class CompoundTransformer(Transformer):  # type: ignore[type-arg]
    """Turn a compound parse tree into ``(kind, value)`` parts."""

    def tag(self, items: list[Token]) -> tuple[str, str]:
        return ("tag", str(items[0]))

    def id_selector(self, items: list[Token]) -> tuple[str, str]:
        return ("id", str(items[0]))

    def class_selector(self, items: list[Token]) -> tuple[str, str]:
        return ("class", str(items[0]))

    def attr_value(self, items: list[Token]) -> str:
        raw = str(items[0])
        if raw[:1] in ("'", '"'):
            return raw[1:-1]
        return raw

    def attribute(self, items: list[object]) -> tuple[str, AttributeSelector]:
        name = str(items[0])
        if len(items) == 1:
            return ("attribute", AttributeSelector(name=name))
        operator = str(items[1])
        value = str(items[2])
        case_insensitive = len(items) > 3 and str(items[3]).lower() == "i"
        return (
            "attribute",
            AttributeSelector(
                name=name,
                operator=operator,
                value=value,
                case_insensitive=case_insensitive,
            ),
        )

    def paren_arg(self, items: list[object]) -> str:
        # Rebuild the raw text; nested arguments arrive already joined.
        return "(" + "".join(str(item) for item in items) + ")"

    def pseudo_element(self, items: list[object]) -> tuple[str, Pseudo]:
        return ("pseudo", _build_pseudo(items, is_element=True))

    def pseudo_class(self, items: list[object]) -> tuple[str, Pseudo]:
        return ("pseudo", _build_pseudo(items, is_element=False))

    def compound(self, items: list[tuple[str, object]]) -> list[tuple[str, object]]:
        return list(items)

    def start(self, items: list[object]) -> list[tuple[str, object]]:
        return items[0]  # type: ignore[return-value]


def _build_pseudo(items: list[object], *, is_element: bool) -> Pseudo:
    name = str(items[0]).lower()
    argument = ""
    if len(items) > 1:
        argument = str(items[1])[1:-1].strip()
    return Pseudo(name=name, argument=argument, is_element=is_element)


def _assemble(text: str, parts: list[tuple[str, object]]) -> Segment:
    """Build a Segment from parsed parts, applying pseudo precedence."""
    tag = "*"
    element_id: str | None = None
    classes: list[str] = []
    attributes: list[AttributeSelector] = []
    elements: list[Pseudo] = []
    pseudo_classes: list[Pseudo] = []

    for kind, value in parts:
        if kind == "tag":
            tag = str(value)
        elif kind == "id":
            if element_id is not None:
                raise InvalidSelector(
                    f"Compound selector {text!r} has more than one id",
                    expression=text,
                )
            element_id = str(value)
        elif kind == "class":
            classes.append(str(value))
        elif kind == "attribute":
            attributes.append(value)  # type: ignore[arg-type]
        elif kind == "pseudo":
            found = cast(Pseudo, value)
            (elements if found.is_element else pseudo_classes).append(found)

    if len(elements) > 1:
        raise InvalidSelector(
            f"Compound selector {text!r} has more than one pseudo-element",
            expression=text,
        )

    # A pseudo-element wins the primary slot; pseudo-classes still compile.
    if elements:
        pseudo: Pseudo | None = elements[0]
        extra = tuple(pseudo_classes)
    elif pseudo_classes:
        pseudo = pseudo_classes[0]
        extra = tuple(pseudo_classes[1:])
    else:
        pseudo = None
        extra = ()

    return Segment(
        tag=tag,
        id=element_id,
        classes=tuple(classes),
        attributes=tuple(attributes),
        pseudo=pseudo,
        extra_pseudos=extra,
    )


def parse_compound(text: str) -> Segment:
    """Parse one compound selector into a Segment with no combinator.

    Raises:
        InvalidSelector: if the text is not a well-formed compound, e.g. an
            unterminated ``[`` or a stray character.
    """
    text = text.strip()
    try:
        tree = _parser.parse(text)
    except UnexpectedInput as e:
        raise InvalidSelector(
            f"Invalid selector {text!r} at position {e.pos_in_stream}",
            expression=text,
            position=e.pos_in_stream,
            cause=e,
        ) from e
    parts = CompoundTransformer().transform(tree)
    return _assemble(text, parts)

"""Fixed-predicate pseudo-classes: form and UI state, node and element types.

These approximate HTML semantics with attribute and inline-style checks;
a static document has no real focus, hover or visited state.
"""

from __future__ import annotations

from cssxpath.compiler.pseudo.base import PseudoRegistry

_STYLE_HIDDEN = (
    'contains(@style, "display:none")',
    'contains(@style, "display: none")',
    'contains(@style, "visibility:hidden")',
    'contains(@style, "visibility: hidden")',
)

FORM_STATE = {
    "enabled": '[not(@disabled="disabled") and not(@disabled) and not(@type="hidden")]',
    "disabled": '[@disabled="disabled" or @disabled]',
    "checked": '[@checked="checked" or @checked]',
    "selected": '[@selected="selected" or @selected]',
    "required": '[@required="required" or @required]',
    "optional": '[not(@required="required") and not(@required)]',
    "read-only": '[@readonly="readonly" or @readonly]',
    "read-write": '[not(@readonly="readonly") and not(@readonly)]',
    "in-range": "[@min and @max and @value and number(@value) >= number(@min) and number(@value) <= number(@max)]",
    "out-of-range": "[@min and @max and @value and (number(@value) < number(@min) or number(@value) > number(@max))]",
    "indeterminate": '[@indeterminate="indeterminate"]',
    "placeholder-shown": '[@placeholder and (not(@value) or @value="")]',
    "default": "[@default]",
    "valid": '[@valid="valid"]',
    "invalid": '[@invalid="invalid"]',
    "autofill": '[contains(@style, "background-color") or contains(@style, "background")]',
    "user-invalid": '[@aria-invalid="true"]',
    "user-valid": '[not(@aria-invalid="true") or @aria-invalid="false"]',
}

UI_STATE = {
    "focus": "[@focus]",
    "focus-within": "[descendant::*[@focus] or ancestor::*[@focus]]",
    "focus-visible": "[@focus and @tabindex]",
    "hover": "[@hover]",
    "active": "[@active]",
    "target": '[@name=substring-after(., "#") and substring-after(., "#")!=""]',
    "target-within": '[descendant::*[@name=substring-after(., "#") and substring-after(., "#")!=""]]',
    "visible": "[not(@hidden) and " + " and ".join(f"not({c})" for c in _STYLE_HIDDEN) + "]",
    "hidden": "[@hidden or " + " or ".join(_STYLE_HIDDEN) + ' or @type="hidden"]',
}

NODE_TYPES = {
    "text": "[self::text()]",
    "comment": "[self::comment()]",
    "element": "[@*]",
    "text-node": "[self::text()]",
    "comment-node": "[self::comment()]",
    "cdata": "[self::cdata-section()]",
    "processing-instruction": "[self::processing-instruction()]",
    "whitespace": '[self::text() and normalize-space(.)=""]',
    "non-whitespace": '[self::text() and normalize-space(.)!=""]',
}

ELEMENT_GROUPS = {
    "header": "[self::h1 or self::h2 or self::h3 or self::h4 or self::h5 or self::h6]",
    "input": "[self::input or self::textarea or self::select or self::button]",
    "button": '[self::button or self::input[@type="button" or @type="submit" or @type="reset"]]',
    "link": "[self::a and @href]",
    "any-link": "[self::a[@href] or self::area[@href]]",
    "local-link": '[self::a and @href and starts-with(@href, "#")]',
    "visited": "[self::a]",
    "image": "[self::img]",
    "table-row": "[self::tr]",
    "table-cell": "[self::td or self::th]",
    "table-header": "[self::th]",
    "list-item": "[self::li]",
    "list": "[self::ul or self::ol]",
}

INPUT_TYPES = (
    "checkbox", "radio", "password", "file", "email", "url", "number", "tel",
    "search", "date", "time", "datetime", "datetime-local", "month", "week",
    "color", "range", "submit", "reset",
)

# Pseudo-classes that simply test the element name.
ELEMENT_NAMES = (
    "video", "audio", "canvas", "svg", "script", "style", "meta", "base",
    "head", "body", "title", "figure", "figcaption", "details", "summary",
    "dialog", "menu", "table", "tr", "td", "th", "thead", "tbody", "tfoot",
    "ul", "ol", "li", "dl", "dt", "dd", "form", "label", "fieldset", "legend",
    "section", "article", "aside", "nav", "main", "footer",
)

DIRECTIONS = ("ltr", "rtl", "auto")


def register(registry: PseudoRegistry) -> None:
    for table in (FORM_STATE, UI_STATE, NODE_TYPES, ELEMENT_GROUPS):
        for name, predicate in table.items():
            registry.register_static(name, predicate)
    for input_type in INPUT_TYPES:
        registry.register_static(input_type, f'[@type="{input_type}"]')
    for element in ELEMENT_NAMES:
        registry.register_static(element, f"[self::{element}]")
    for direction in DIRECTIONS:
        registry.register_static(f"dir-{direction}", f'[@dir="{direction}"]')

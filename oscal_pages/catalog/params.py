# CUI // SP-CTI
"""Organization-defined parameter (ODP) descriptors and placeholder substitution.

Prose in a catalog refers to parameters with inline tokens::

    {{ insert: param, ac-01_odp.01 }}
    {{ param, ac-1_prm_1 }}

Each parameter of a control resolves to one display descriptor:

    selection   <em><strong>[Selection (one-or-more): Monthly; Quarterly]</strong></em>
    values      2024-01-01; 30 days            (bolded when substituted)
    assignment  [Assignment: organization-defined personnel]

Descriptor text may itself contain tokens (a choice that embeds another
ODP), so substitution recurses. The recursion depth is capped; alt-identifier
aliases make cycles possible in real catalogs and a capped chain simply
renders the remaining tokens literally.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from oscal_pages.catalog.models import field_list
from oscal_pages.catalog.sanitize import safe_inline_html
from oscal_pages.catalog.scalars import normalize_scalar_display

logger = logging.getLogger(__name__)

MODE_SELECTION = "selection"
MODE_VALUES = "values"
MODE_ASSIGNMENT = "assignment"
PARAM_MODES = (MODE_SELECTION, MODE_VALUES, MODE_ASSIGNMENT)

MAX_SUBSTITUTION_DEPTH = 4

PLACEHOLDER_RE = re.compile(
    r"\{\{\s*(?:insert:\s*)?param\s*,\s*([^\s\}]+)\s*\}\}", re.IGNORECASE
)
_PRESTYLED_RE = re.compile(r"^\s*<em>\s*<strong>.*</strong>\s*</em>\s*$", re.IGNORECASE)


def em_strong(text: str) -> str:
    return "<em><strong>" + text + "</strong></em>"


@dataclass(frozen=True)
class ParamDescriptor:
    """Display form of a single parameter."""

    mode: str
    text: str


def _choice_texts(select) -> List[str]:
    choices = select.get("choice", [])
    if not isinstance(choices, list):
        choices = [choices]
    out = []
    for choice in choices:
        if isinstance(choice, str):
            out.append(choice.strip())
        elif isinstance(choice, dict):
            for key in ("label", "prose", "value"):
                if choice.get(key) is not None:
                    out.append(str(choice[key]).strip())
                    break
    return [c for c in out if c]


def _assignment_description(param) -> str:
    descriptions = []
    for constraint in field_list(param, "constraints"):
        if isinstance(constraint, dict) and constraint.get("description") is not None:
            d = str(constraint["description"]).strip()
            if d:
                descriptions.append(d)
    if descriptions:
        return "; ".join(descriptions)

    label = param.get("label")
    if isinstance(label, str) and label.strip():
        return label.strip()

    for prop in field_list(param, "props"):
        if isinstance(prop, dict) and prop.get("name") == "label" and prop.get("value") is not None:
            value = str(prop["value"]).strip()
            if value:
                return value

    param_id = param.get("id")
    return str(param_id) if param_id else ""


def format_param_display(param: dict) -> Optional[ParamDescriptor]:
    """Build the display descriptor for one parameter.

    Selection wins over values, values over assignment. Guidelines prose is
    never used for display.
    """
    if not isinstance(param, dict):
        return None

    select = param.get("select")
    if isinstance(select, dict):
        choices = _choice_texts(select)
        if choices:
            how_many = select.get("how-many")
            suffix = ""
            if isinstance(how_many, str) and how_many.strip():
                suffix = " (" + how_many.strip() + ")"
            text = "[Selection" + suffix + ": " + "; ".join(choices) + "]"
            return ParamDescriptor(MODE_SELECTION, em_strong(text))

    values = param.get("values")
    if isinstance(values, list):
        context = str(param.get("id", ""))
        rendered = [normalize_scalar_display(v, context) for v in values]
        rendered = [v for v in rendered if v]
        if rendered:
            return ParamDescriptor(MODE_VALUES, "; ".join(rendered))

    return ParamDescriptor(MODE_ASSIGNMENT, "[Assignment: " + _assignment_description(param) + "]")


def param_keys(param: dict) -> List[str]:
    """Lower-cased lookup keys: the param id plus any alt-identifier props."""
    keys = []
    if param.get("id"):
        keys.append(str(param["id"]).lower())
    for prop in field_list(param, "props"):
        if isinstance(prop, dict) and prop.get("name") == "alt-identifier" and prop.get("value") is not None:
            keys.append(str(prop["value"]).lower())
    return keys


def build_param_substitutions(params) -> Dict[str, ParamDescriptor]:
    """Map every parameter key of a control to its display descriptor.

    Parameters whose descriptor text would be empty are left out. Duplicate
    keys keep the last descriptor seen.
    """
    subs: Dict[str, ParamDescriptor] = {}
    for param in params or []:
        descriptor = format_param_display(param)
        if descriptor is None or descriptor.text == "":
            continue
        for key in param_keys(param):
            subs[key] = descriptor
    return subs


def substitute_param_placeholders(text: str, subs: Dict[str, ParamDescriptor], depth: int = 0) -> str:
    """Replace parameter tokens in ``text``, resolving nested tokens first.

    With no descriptors at all the text is returned untouched. Unknown ids
    render as a visible ``[Parameter: id]`` token. Past
    ``MAX_SUBSTITUTION_DEPTH`` the text is sanitized and returned without
    further substitution.
    """
    if not text or not subs:
        return text
    if depth > MAX_SUBSTITUTION_DEPTH:
        logger.debug("Parameter substitution depth cap reached; leaving %r unresolved", text[:80])
        return str(safe_inline_html(text))

    def _replace(match):
        param_id = match.group(1)
        descriptor = subs.get(param_id.lower())
        if descriptor is None:
            return safe_inline_html(em_strong("[Parameter: " + param_id + "]"))

        resolved = substitute_param_placeholders(descriptor.text, subs, depth + 1)
        if descriptor.mode == MODE_VALUES:
            return safe_inline_html("<strong>" + resolved + "</strong>")
        if _PRESTYLED_RE.match(resolved):
            return safe_inline_html(resolved)
        return safe_inline_html(em_strong(resolved))

    return PLACEHOLDER_RE.sub(_replace, text)


def render_inline(text: str, subs: Dict[str, ParamDescriptor]) -> str:
    """Substitute parameters, then sanitize: the path every prose field takes."""
    if not text:
        return ""
    return str(safe_inline_html(substitute_param_placeholders(text, subs)))

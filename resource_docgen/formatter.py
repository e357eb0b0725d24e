"""
Text helpers that turn resource records into reference-page fragments.

Every function here is pure: same input, same output, no shared state.
"""

from typing import Iterable, List, Optional, Sequence

from resource_docgen.models import (
    FALSE_CLASS,
    TRUE_CLASS,
    PropertyRecord,
    format_default_value,
)

# Extra columns between the longest property name and its type list
PROPERTY_PADDING = 6

# The resource identity property; it is implied by the block header
NAME_PROPERTY = "name"


def largest_property_name(properties: Sequence[PropertyRecord]) -> int:
    """Width of the longest property name, so syntax comments line up."""
    if not properties:
        return 0
    return max(len(p.name) for p in properties)


def friendly_types_list(types: Optional[Iterable[Optional[str]]]) -> str:
    """
    Join accepted type tokens into a single comma separated string.

    ``None`` renders as ``nil`` and the boolean classes render as
    ``true``/``false``; every other token is kept verbatim.
    """
    fixed: List[str] = []
    for token in types or []:
        if token is None:
            fixed.append("nil")
        elif token == TRUE_CLASS:
            fixed.append("true")
        elif token == FALSE_CLASS:
            fixed.append("false")
        else:
            fixed.append(token)
    return ", ".join(fixed)


def bolded_friendly_list(names: Sequence[str]) -> str:
    """
    Wrap each name in literal markup and join them as an English list.

    One item stays as-is, two are joined with "and", three or more are comma
    separated with "and" before the final item.
    """
    items = [f"``{name}``" for name in names]
    if len(items) > 1:
        items[-1] = f"and {items[-1]}"
    return " ".join(items) if len(items) == 2 else ", ".join(items)


def friendly_properties_sentence(names: Sequence[str]) -> Optional[str]:
    """Summary sentence of available properties, or None when there are none."""
    if not names:
        return None
    if len(names) == 1:
        return f"{bolded_friendly_list(names)} is the property available to this resource."
    return f"{bolded_friendly_list(names)} are the properties available to this resource."


def bolded_description(name: str, description: Optional[str]) -> Optional[str]:
    """
    Bold the resource name wherever it appears in its own description.

    Only occurrences followed by a space are matched, so a resource named
    ``user`` does not bold the front of ``username``.
    """
    if description is None:
        return None
    return description.replace(f"{name} ", f"**{name}** ")


def property_comment(prop: PropertyRecord) -> str:
    """Inline comment for a property line of the syntax block."""
    if prop.has_literal_default:
        return f" # default value: {format_default_value(prop.default_value)}"
    if prop.is_name_property:
        return " # default value: 'name' unless specified"
    return ""


def generate_resource_block(
    resource_name: str,
    properties: Sequence[PropertyRecord],
    default_action: Sequence[str],
) -> str:
    """
    Build the example resource block shown in the Syntax section.

    Args:
        resource_name: The resource identifier
        properties: Properties, already in display order
        default_action: The resource's default actions; the first is shown

    Returns:
        str: The indented block, without a trailing newline
    """
    padding_size = max(
        largest_property_name(properties) + PROPERTY_PADDING, len("action") + 1
    )
    first_action = default_action[0] if default_action else "nothing"

    lines = [f"  {resource_name} 'name' do"]
    for p in properties:
        if p.name == NAME_PROPERTY:
            continue
        lines.append(
            f"    {p.name.ljust(padding_size)}"
            f"{friendly_types_list(p.accepted_types)}{property_comment(p)}"
        )
    lines.append(
        f"    {'action'.ljust(padding_size)}# defaults to :{first_action} if not specified"
    )
    lines.append("  end")
    return "\n".join(lines)

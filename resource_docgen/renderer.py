"""
Reference page rendering.

A ResourceDocContext is built once per record and handed to
render_resource_doc, which returns the complete reStructuredText page.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from resource_docgen.config_manager import DocumentationConfig
from resource_docgen.formatter import (
    NAME_PROPERTY,
    bolded_description,
    friendly_properties_sentence,
    friendly_types_list,
    generate_resource_block,
)
from resource_docgen.models import PropertyRecord, ResourceRecord, format_default_value

HEADING_RULE = "=" * 53

NOTHING_ACTION = "nothing"

NOTHING_ACTION_TEXT = (
    "``:nothing``\n"
    "   .. tag resources_common_actions_nothing\n"
    "\n"
    "   Define this resource block to do nothing until notified by another "
    "resource to take action. When this resource is notified, this resource "
    "block is either run immediately or it is queued up to be run at the end "
    "of the {product} run.\n"
    "\n"
    "   .. end_tag"
)


@dataclass(frozen=True)
class ResourceDocContext:
    """Everything the page template needs for a single resource."""

    name: str
    description: Optional[str]
    default_action: str
    actions: Tuple[str, ...]
    properties: Tuple[PropertyRecord, ...]
    resource_block: str
    examples: Optional[str] = None
    introduced: Optional[str] = None
    preview: bool = False

    @property
    def available_property_names(self) -> List[str]:
        return [p.name for p in self.properties if p.name != NAME_PROPERTY]


def build_context(record: ResourceRecord) -> ResourceDocContext:
    """Sort properties once and precompute the syntax block for a record."""
    properties = tuple(sorted(record.properties, key=lambda p: p.name))
    actions = tuple(sorted(a for a in set(record.actions) if a != NOTHING_ACTION))
    return ResourceDocContext(
        name=record.identifier,
        description=record.description,
        default_action=record.first_default_action,
        actions=actions,
        properties=properties,
        resource_block=generate_resource_block(
            record.identifier, properties, record.default_action
        ),
        examples=record.examples,
        introduced=record.introduced_in_version,
        preview=record.is_preview,
    )


def _heading(title: str) -> List[str]:
    return [title, HEADING_RULE]


def _render_title(context: ResourceDocContext, config: DocumentationConfig) -> List[str]:
    return [
        HEADING_RULE,
        f"{context.name} resource",
        HEADING_RULE,
        f"`[edit on GitHub] <{config.edit_url(context.name)}>`__",
        "",
    ]


def _render_syntax(context: ResourceDocContext) -> List[str]:
    lines = _heading("Syntax")
    lines += [
        f"The {context.name} resource has the following syntax:",
        "",
        ".. code-block:: ruby",
        "",
        context.resource_block,
        "",
        "where:",
        "",
        f"* ``{context.name}`` is the resource.",
        "* ``name`` is the name given to the resource block.",
        "* ``action`` identifies which steps the chef-client will take to bring "
        "the node into the desired state.",
    ]
    summary = friendly_properties_sentence(context.available_property_names)
    if summary:
        lines.append(f"* {summary}")
    lines.append("")
    return lines


def _render_actions(context: ResourceDocContext, config: DocumentationConfig) -> List[str]:
    lines = _heading("Actions")
    lines += ["", f"The {context.name} resource has the following actions:", ""]
    for action in context.actions:
        marker = "Default. " if action == context.default_action else ""
        lines += [f"``:{action}``", f"   {marker}Description here.", ""]
    lines += [NOTHING_ACTION_TEXT.format(product=config.product_name), ""]
    return lines


def _property_type_line(prop: PropertyRecord, config: DocumentationConfig) -> str:
    line = f"   **{config.type_label}:** {friendly_types_list(prop.accepted_types)}"
    if prop.default_value is not None:
        line += f" | **Default Value:** ``{format_default_value(prop.default_value)}``"
    if prop.is_deprecated:
        line += " | ``DEPRECATED``"
    if prop.is_name_property:
        line += " | **Default Value:** ``'name'``"
    return line


def _render_properties(
    context: ResourceDocContext, config: DocumentationConfig
) -> List[str]:
    lines = _heading("Properties")
    lines += ["", f"The {context.name} resource has the following properties:", ""]
    for prop in context.properties:
        lines += [f"``{prop.name}``", _property_type_line(prop, config), ""]
        if prop.description:
            lines += [f"   {prop.description}", ""]
        if prop.introduced_in_version:
            lines += [
                f"   New in {config.product_name} {prop.introduced_in_version}.",
                "",
            ]
    return lines


def _render_examples(context: ResourceDocContext) -> List[str]:
    lines = _heading("Examples")
    lines += [
        "",
        "The following examples demonstrate various approaches for using "
        "resources in recipes:",
        "",
        (context.examples or "").strip("\n"),
        "",
    ]
    return lines


def render_resource_doc(
    context: ResourceDocContext, config: DocumentationConfig
) -> str:
    """
    Render the reference page for one resource.

    Sections are emitted in a fixed order: title, description, introduced
    callout, syntax, actions, properties and, when present, examples. Absent
    optional fields drop their section instead of rendering it empty.

    Args:
        context: Per-resource context from build_context
        config: Documentation settings (links, product naming)

    Returns:
        str: The page text, ending in a single newline
    """
    lines = _render_title(context, config)

    description = bolded_description(context.name, context.description)
    if description is not None:
        lines += [description, ""]

    if context.introduced:
        lines += [f"**New in {config.product_name} {context.introduced}.**", ""]

    lines += _render_syntax(context)
    lines += _render_actions(context, config)
    lines += _render_properties(context, config)

    if context.examples:
        lines += _render_examples(context)

    return "\n".join(lines).rstrip("\n") + "\n"

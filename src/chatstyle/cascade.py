"""Cascade resolution: apply a rule set to a markup tree as computed styles.

For every element the categories are merged in a fixed order:

    universal < element < parent-scoped element < classes < id

A later category overwrites an earlier one key by key, and classes are
applied in class-list order, so the last listed class wins among classes.
Author inline styles outrank every category unless the cascade value carries
``!important``, in which case it is forced into the inline style mapping.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.model.node import Element, Node, Props, Text, tree_to_dicts
from chatstyle.model.rules import RuleSet
from chatstyle.placeholders import replace_style_variables
from chatstyle.syslog import SyslogSeverity, log_syslog_message

__all__ = ["CascadeResolver", "IMPORTANT", "merge_declarations", "resolve_styles"]

IMPORTANT = "!important"


def merge_declarations(
    style: dict[str, str],
    declarations: Mapping[str, str],
    inline_style: dict[str, str],
    variables: Mapping[str, str],
) -> None:
    """Merge *declarations* into *style*, honouring inline and important values."""
    for key, value in declarations.items():
        resolved = replace_style_variables(value, variables)
        if IMPORTANT in resolved:
            inline_style[key] = resolved
        elif key not in inline_style:
            style[key] = resolved


class CascadeResolver:
    """Computes per-element styles from a :class:`RuleSet`.

    :meth:`resolve` returns a new tree; the input nodes are left untouched.
    """

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self._settings = settings

    def resolve(self, nodes: list[Node], rules: RuleSet) -> list[Node]:
        variables = rules.variables()
        resolved = [self._resolve_node(n, rules, variables, parent=None) for n in nodes]
        if self._settings.verbose:
            log_syslog_message(
                self._settings,
                SyslogSeverity.DEBUG,
                "CascadeResolver.resolve",
                "70000",
                json.dumps(tree_to_dicts(resolved)),
            )
        return resolved

    def _resolve_node(
        self,
        node: Node,
        rules: RuleSet,
        variables: Mapping[str, str],
        parent: Element | None,
    ) -> Node:
        if isinstance(node, Text):
            return Text(content=node.content, index=node.index)

        props = node.props.copy()
        props.style = self.compute_style(node.tag, props, rules, variables, parent)
        resolved = Element(tag=node.tag, props=props, index=node.index)
        resolved.children = [
            self._resolve_node(child, rules, variables, parent=node) for child in node.children
        ]
        return resolved

    @staticmethod
    def compute_style(
        tag: str,
        props: Props,
        rules: RuleSet,
        variables: Mapping[str, str],
        parent: Element | None = None,
    ) -> dict[str, str]:
        """Return the computed style for one element.

        ``props.inline_style`` receives any ``!important`` declarations.
        """
        style: dict[str, str] = {}
        inline = props.inline_style

        merge_declarations(style, rules.universal, inline, variables)

        element_rule = rules.elements.get(tag)
        if element_rule is not None:
            merge_declarations(style, element_rule.styles, inline, variables)

        # Parent-scoped overrides; nothing in the stylesheet parser fills these yet.
        if parent is not None:
            parent_rule = rules.elements.get(parent.tag)
            if parent_rule is not None and tag in parent_rule.children:
                merge_declarations(style, parent_rule.children[tag].styles, inline, variables)

        for class_name in props.classes:
            block = rules.classes.get(f".{class_name}")
            if block is not None:
                merge_declarations(style, block.styles, inline, variables)

        if props.id:
            block = rules.ids.get(f"#{props.id}")
            if block is not None:
                merge_declarations(style, block.styles, inline, variables)

        return style


def resolve_styles(
    nodes: list[Node], rules: RuleSet, settings: Settings = DEFAULT_SETTINGS
) -> list[Node]:
    """Apply *rules* to *nodes*, returning a styled copy of the tree."""
    return CascadeResolver(settings).resolve(nodes, rules)

"""chatstyle model layer -- public type re-exports."""

from chatstyle.model.diagnostic import Diagnostic, Severity
from chatstyle.model.node import Element, Node, Props, Text, tree_to_dicts
from chatstyle.model.result import ErrorKind, Result, Status
from chatstyle.model.rules import ROOT_FUNCTION, ElementRule, FunctionEntry, RuleSet, StyleBlock

__all__ = [
    # tree
    "Element",
    "Node",
    "Props",
    "Text",
    "tree_to_dicts",
    # rules
    "ROOT_FUNCTION",
    "ElementRule",
    "FunctionEntry",
    "RuleSet",
    "StyleBlock",
    # diagnostic
    "Severity",
    "Diagnostic",
    # result
    "Status",
    "ErrorKind",
    "Result",
]

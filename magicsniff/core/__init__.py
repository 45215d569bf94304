#!/usr/bin/env python3
"""
magicsniff core: patterns, the rule table and the detector
"""

from .detector import detect, detect_all
from .exceptions import InvalidBufferError, MagicSniffError, RuleTableError
from .patterns import NULL_END, NULL_START, Anchor, Pattern, Rule, ends_with, starts_with
from .rule_table import RULE_TABLE, head_reach, rules_for, tail_reach

__all__ = [
    "Anchor",
    "Pattern",
    "Rule",
    "NULL_START",
    "NULL_END",
    "starts_with",
    "ends_with",
    "RULE_TABLE",
    "head_reach",
    "tail_reach",
    "rules_for",
    "detect",
    "detect_all",
    "MagicSniffError",
    "InvalidBufferError",
    "RuleTableError",
]

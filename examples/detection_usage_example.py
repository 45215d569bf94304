#!/usr/bin/env python3
"""
magicsniff Usage Examples

This file demonstrates detection on in-memory buffers, on files, and with a
custom rule table.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import sys

from magicsniff import FileType, detect, detect_all, detect_file
from magicsniff.core import RULE_TABLE, Rule, starts_with


# Example 1: In-memory buffers
# ============================


def example_buffers():
    print("Example 1: Buffers")
    print("-" * 60)

    for buffer in (b"\xff\xd8\xff\xe0", b"BM\x00\x00", b"hello"):
        file_type = detect(buffer)
        label = f"{file_type.name} (.{file_type.extension()})" if file_type else "unknown"
        print(f"  {buffer[:8]!r:24} -> {label}")


# Example 2: Files on disk
# ========================


def example_files(paths):
    print("\nExample 2: Files")
    print("-" * 60)

    for path in paths:
        result = detect_file(path)
        if result.error:
            print(f"  {path}: error: {result.error}")
        else:
            print(f"  {path}: {result.description}")


# Example 3: Extending the table
# ==============================


def example_custom_rules():
    print("\nExample 3: Custom rules")
    print("-" * 60)

    # Rules placed before the built-in table take priority
    rules = (Rule(FileType.ZIP, start=starts_with(b"PK\x07\x08")),) + RULE_TABLE
    buffer = b"PK\x07\x08" + b"\x00" * 12
    print(f"  built-in table: {detect(buffer)}")
    print(f"  extended table: {detect(buffer, rules=rules)}")
    print(f"  all matches:    {detect_all(buffer, rules=rules)}")


if __name__ == "__main__":
    example_buffers()
    example_files(sys.argv[1:] or [sys.executable])
    example_custom_rules()

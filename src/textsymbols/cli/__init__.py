"""
textsymbols Command-Line Interface
==================================

This package provides the **textscan** tool, which runs the text symbols
parser over a file or stdin and prints the symbols it finds. It is a
Click-based application intended for trying out predicates and braced
reads on real text.
"""

__all__ = ["textscan"]

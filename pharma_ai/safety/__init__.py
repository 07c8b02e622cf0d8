"""Safety package.

Holds the fixed user-facing replies and the rule-based interpretation of
provider responses (safety block, answer, fallback). Nothing here performs
I/O or model inference.
"""

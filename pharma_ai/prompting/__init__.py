"""Prompting package.

This package contains the deterministic request-payload construction used by
the core engine. It does not perform validation, model invocation or response
handling.
"""

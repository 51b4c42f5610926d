"""Typed SQL column fields, struct-tag builders and clause helpers for query code generation."""

__version__ = "0.1.0"
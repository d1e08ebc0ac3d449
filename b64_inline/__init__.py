"""Inline local media referenced by HTML files as base64 data URIs."""

__version__ = "0.1.0"

"""
structmeta

Extracts struct and interface declarations from Go source and emits them as
a normalized JSON document for template-driven code generators.
"""

__version__ = "1.0.0"

"""Use-case layer: item-service decorators and error mapping.

Modules here compose ports without performing transport I/O directly.
"""

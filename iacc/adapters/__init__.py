"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (HTTP sources, the
    friends cache, offline mocks) and the adaptors that expose those sources
    as ``ItemService`` objects.

Dependencies:
    Individual submodules depend on ``requests``, filesystem APIs, and domain
    protocol definitions.

Call context:
    Imported by the composition root (for runtime wiring) and by tests (for
    mocks and projection behavior verification).
"""

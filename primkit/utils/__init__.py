"""
Shared building blocks used by the extension modules.

Includes the error hierarchy, injectable random sources, and clock
abstractions for deterministic timing.
"""

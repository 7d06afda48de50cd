"""
Convenience helpers layered on Python primitives.

Numbers, durations, optional values, strings, sequences, binary data and
JSON, plus thin wrappers around settings storage, directories and
background dispatch.
"""

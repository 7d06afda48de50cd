"""
Configuration loading and logging setup.

Provides a strongly typed settings object read from environment variables
and a helper that wires the package logger to stdout and an optional file.
"""

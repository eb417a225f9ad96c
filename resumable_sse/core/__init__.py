"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error class carried inside Failure values
- Settings loaded from the environment
- Protocol constants and defaults

The core module has NO dependencies on other layers (the container imports
the logging adapter lazily).
"""

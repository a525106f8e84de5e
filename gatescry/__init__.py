"""Filesystem tools: directory gates (gate), file inspection (scry) and a blink usage stub."""

__version__ = "0.1.0"
__all__ = ["gate", "scry", "blink"]
"""Byte containers, data templates, memory blocks, partition descriptions and block edits."""

__version__ = "0.1.0"
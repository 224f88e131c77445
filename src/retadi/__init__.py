"""ReTADI Server - Remote Tablet Display Interface."""

__version__ = "0.1.0"

"""MOADA: client and web front end for the anonymous file-exchange service."""

__version__ = "0.1.0"

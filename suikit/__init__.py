"""Toolkit for the Sui blockchain: BCS, signatures, key pairs, JSON-RPC transport and models."""

__version__ = "0.1.0"
"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the historical
datastore HTTP API.
"""

from src.infrastructure import gateways

__all__ = ["gateways"]

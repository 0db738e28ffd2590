"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. These implementations
handle the details of external service communications.
"""

from .historical_datastore_gateway import HistoricalDatastoreGateway

__all__ = ["HistoricalDatastoreGateway"]

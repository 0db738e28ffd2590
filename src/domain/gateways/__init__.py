"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .historical_datastore_gateway import IHistoricalDatastoreGateway

__all__ = ["IHistoricalDatastoreGateway"]

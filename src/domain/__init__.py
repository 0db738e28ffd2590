"""
Domain Layer Package

This package contains the core business logic and rules of the application.
It defines entities, gateways, and services without dependencies on
external frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, gateways, services

__all__ = ["entities", "gateways", "services"]

"""
Adapters Layer - External Interfaces

This package contains adapters for external systems:
- Providers (the Banguat SOAP web service)
"""

__all__ = []

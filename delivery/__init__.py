"""Delivery service groundwork: domain errors, map locations, .env configuration and a health-check server."""

__version__ = "0.1.0"
__all__ = ["app", "config", "errors", "location"]
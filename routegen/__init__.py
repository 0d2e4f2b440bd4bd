"""Generate gin route registrations from an OpenAPI document."""

__version__ = "0.1.0"

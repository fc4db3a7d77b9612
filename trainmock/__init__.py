"""Configurable mock of the isutrain reservation API."""

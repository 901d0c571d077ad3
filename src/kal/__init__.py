"""kal — analyzer registry and configuration validation for API type linters."""

__version__ = "0.1.0"

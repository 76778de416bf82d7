"""Masterdom - marketplace backend for service requests and offers."""

__version__ = "1.0.0"

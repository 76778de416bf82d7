"""Operator command-line interface."""

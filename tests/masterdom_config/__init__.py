"""Tests for the masterdom_config package."""

"""SQLAlchemy persistence (async)."""

"""Utility modules for gitwho."""

"""Observability – logging configuration for applications using the client."""

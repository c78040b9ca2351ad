"""Ingestion, export and batch services."""

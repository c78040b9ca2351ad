"""YAML configuration loading for roster_ingest."""

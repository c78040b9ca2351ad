"""Logging setup and error log buffering for roster_ingest."""

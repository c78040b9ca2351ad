"""Parsing stages of the roster ingestion pipeline.

Tokenizer, format classifier, header resolver, entity scanner, row
enhancer, row filter and structural validators.
"""

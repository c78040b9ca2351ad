"""Readers that turn roster files into text or cell grids."""

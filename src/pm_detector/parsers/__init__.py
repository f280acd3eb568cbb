"""Parsers for the files that carry package manager signals."""

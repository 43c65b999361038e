"""Parsing and formatting of email address header values."""

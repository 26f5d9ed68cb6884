"""Spreadsheet to RSS feed service."""

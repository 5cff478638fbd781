"""Markdown ingestion."""

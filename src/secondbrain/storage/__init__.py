"""JSON-backed entity collections."""

"""Lab site data service."""

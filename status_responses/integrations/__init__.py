"""Optional adapters for web frameworks."""

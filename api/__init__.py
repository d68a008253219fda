"""CraftMyPass REST API."""

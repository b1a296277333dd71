"""HTTP API for the TechStore catalog."""

"""Infrastructure: persistence, security."""

"""Media catalog API."""

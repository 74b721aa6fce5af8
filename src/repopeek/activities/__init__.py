"""Repository inspection activities."""

"""API request/response schemas."""

"""Base layer: logging, error taxonomy, HTTP client pool and record DTOs."""

"""Config – settings and validation errors."""

"""Application layer – pagination use cases."""

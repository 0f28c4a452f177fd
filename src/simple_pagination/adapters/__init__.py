"""Adapters – query executors for concrete data sources."""

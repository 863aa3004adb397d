"""Catalog pipeline: validate, cache, fetch, filter and sort model records."""

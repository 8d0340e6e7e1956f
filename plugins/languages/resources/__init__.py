"""Bundled stopword resources."""

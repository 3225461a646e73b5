"""Shared constant vocabularies."""

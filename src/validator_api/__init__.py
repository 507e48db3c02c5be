"""Validator REST API serving unsigned attestations."""

"""Validation engine: field layout, checksum and the validation pipeline."""

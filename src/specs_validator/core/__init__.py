"""Core enums, field schema and helpers."""

"""datenorm: client time zone aware date normalization for JSON payloads."""

__version__ = "0.1.0"

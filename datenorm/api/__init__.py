"""HTTP layer for datenorm: request validation, response serialization and
client time zone selection."""

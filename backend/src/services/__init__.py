"""Service layer: validation, sanitization and persistence."""

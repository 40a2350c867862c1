"""Track geometry and entity types."""

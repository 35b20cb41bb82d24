"""Execute semantics grouped by instruction family."""

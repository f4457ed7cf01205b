"""Infrastructure layer: file access for word lists."""

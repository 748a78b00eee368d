"""Brief stages, one package per section."""

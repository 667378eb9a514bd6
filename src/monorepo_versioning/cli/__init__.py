"""Command-line interface for monorepo-versioning."""

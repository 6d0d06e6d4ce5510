"""Command-line interface for paf-builder."""

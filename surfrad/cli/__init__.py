"""Command-line interface for inspecting station files."""

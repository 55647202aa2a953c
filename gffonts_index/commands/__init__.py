"""Command implementations for the gffonts_index CLI."""

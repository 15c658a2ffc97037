"""Command line interface for MatchKit."""

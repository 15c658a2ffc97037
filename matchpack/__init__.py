"""Implementation package for MatchKit JSON comparison."""

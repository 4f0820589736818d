"""Command line interface for the 10-20-30 simulator."""

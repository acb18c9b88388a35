"""Command-line tools for gearphase."""

"""Non-interactive command line helpers."""

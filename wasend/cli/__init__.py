"""wasend command line interface."""

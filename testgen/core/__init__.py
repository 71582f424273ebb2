"""Runtime settings and logging setup shared by the CLI."""

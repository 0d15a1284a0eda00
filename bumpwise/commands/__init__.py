"""CLI subcommands for bumpwise."""

"""CLI subcommands for cachecompat."""

"""CLI commands; importing a module registers its commands on the app."""

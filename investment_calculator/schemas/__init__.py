"""Data contracts shared by the calculator core and the CLI."""

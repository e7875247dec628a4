"""Pure calculation logic for the investment calculator."""

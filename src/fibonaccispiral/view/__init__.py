"""Qt widgets and panels of the application."""

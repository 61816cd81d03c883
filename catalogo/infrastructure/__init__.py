"""Infrastructure layer - command line interface."""

"""objkit command-line interface."""

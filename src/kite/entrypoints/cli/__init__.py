"""kite command-line interface."""

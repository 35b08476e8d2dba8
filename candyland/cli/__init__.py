"""Terminal front-end for Candy Land."""

"""Version 1 of the Book Swap API."""

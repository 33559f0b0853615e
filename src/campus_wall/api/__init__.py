"""HTTP edge for the wall core."""

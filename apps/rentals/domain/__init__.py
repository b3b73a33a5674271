"""Pure domain layer of the rentals app (no Django imports)."""

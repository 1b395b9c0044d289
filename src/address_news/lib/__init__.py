"""Pure-logic libraries with no database access."""

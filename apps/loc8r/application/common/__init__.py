"""Application common modules."""

"""Application layer: interpreting and reporting predicates."""

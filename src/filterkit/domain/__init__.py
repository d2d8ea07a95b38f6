"""Domain layer: records, predicates, exceptions. Pure, no I/O."""

"""Record cache application layer."""

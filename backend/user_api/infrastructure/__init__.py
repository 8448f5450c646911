"""Infrastructure Layer — process-level concerns (logging) for the shell."""

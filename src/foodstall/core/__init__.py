"""Core infrastructure: database, errors, logging, auth, sessions and permissions."""

"""Domain layer: events, error taxonomy and collaborator protocols."""

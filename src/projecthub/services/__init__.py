"""Service layer: configuration, token storage and the logic behind each command."""

"""Typer command groups, one per page of the application."""

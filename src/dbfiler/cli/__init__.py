"""Typer command line for dbfiler."""

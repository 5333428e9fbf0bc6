"""Alert service Django project."""

"""Point model and validation of caller input."""

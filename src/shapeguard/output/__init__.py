"""Output layer — Rich/JSON rendering for CLI commands."""

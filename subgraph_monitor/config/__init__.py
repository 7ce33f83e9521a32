"""Monitor configuration."""

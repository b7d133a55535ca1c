"""TAssist - student contact manager for teaching assistants."""

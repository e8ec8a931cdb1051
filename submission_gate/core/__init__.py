"""Core review logic: archive extraction, policy checks and root resolution."""

"""Framework services shared by every step: structured logging."""

"""Service layer orchestrating seed resolution, schemes and records."""

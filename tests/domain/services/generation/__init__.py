"""Generation service tests."""

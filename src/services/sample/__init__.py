"""Sample series source."""

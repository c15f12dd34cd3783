"""Series polling and normalization."""

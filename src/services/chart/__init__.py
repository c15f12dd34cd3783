"""Chart axis scaling, layout and rendering."""

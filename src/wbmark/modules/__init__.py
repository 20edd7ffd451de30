"""Domain modules: component parsing and rendering."""

"""Icon search widget: catalog search, result rendering and clipboard export."""

"""HTTP application shell: app factory, middleware and error handling."""

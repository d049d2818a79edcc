"""HTTP surface: routes, dependencies, models, error handlers, middleware."""

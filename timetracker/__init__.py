"""Single-user time tracker: projects, activities and time entries."""

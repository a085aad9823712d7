"""Node CRUD API application package."""

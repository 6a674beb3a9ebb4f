"""Movies library service: MongoDB-backed CRUD for movie records."""

"""Identity domain (users and access policy)."""

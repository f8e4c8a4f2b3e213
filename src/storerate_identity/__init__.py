"""Identity for StoreRate: users, roles, credentials and access policy."""

"""StoreRate: multi-role store rating platform."""

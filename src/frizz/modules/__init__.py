"""Port catalog and scanning modules."""

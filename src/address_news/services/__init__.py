"""Service layer: address store, search history store, search orchestration."""

"""Address news finder: address upsert, search history, and simulated local news."""

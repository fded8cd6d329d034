"""Settings and logging for the card element library."""

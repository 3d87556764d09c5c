"""HTTP routes for the SMS gateway."""

"""Client-side services built on the API transport."""

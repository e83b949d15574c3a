"""Shared values for the fake Superpowered service."""

BASE_URL = "https://api.test/v1"
API_KEY_ID = "key_id"
API_KEY_SECRET = "key_secret"

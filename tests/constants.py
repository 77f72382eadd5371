"""Constants for use in tests."""

AUR_URL = "https://aur.example.com/rpc/"
"""Base URL of the mock AUR."""

"""Django apps of the heater rental project."""

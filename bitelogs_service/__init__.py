"""Django project package for the BiteLogs API."""

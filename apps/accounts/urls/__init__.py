"""URL modules for the accounts app, mounted separately in config.urls."""

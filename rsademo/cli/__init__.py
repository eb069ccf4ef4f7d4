"""rsademo command line interface."""

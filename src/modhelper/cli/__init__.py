"""modhelper command line interface."""

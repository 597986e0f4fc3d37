"""Domain models and rules.

Pure structures and functions (durations, languages, paste shapes). The domain
knows nothing about HTTP or the CLI.
"""

"""CLI command modules for anki-splitter.

- shared.py: Common utilities (config/logger loading, console, card input)
- split_commands.py: analyze, split and clozes commands
- score_commands.py: score command
"""

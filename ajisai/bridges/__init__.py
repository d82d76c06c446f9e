"""Conversions between neutral rules and prompts and Cursor, Windsurf and GitHub Copilot formats."""
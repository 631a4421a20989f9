"""
version.py — SkillShare
========================
Single source of truth for the toolkit version.
Used by:
  - pyproject.toml (dynamic version)
  - the CLI
"""

APP_NAME = "SkillShare Password Toolkit"
VERSION = "1.0.0"

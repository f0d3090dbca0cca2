"""Keeps a Notion database of recurring chores up to date."""

"""Core business logic layer.

Subpackages:
- planning: recipe selection, week planning, plan generation and batch edits
- shopping: building shopping lists
- reporting: text summaries of a plan
"""
__all__ = ["planning", "shopping", "reporting"]

"""Weighted directed graphs with longest-path search and DOT export, and a linked list."""

__all__ = ["cli", "graph", "linked_list"]
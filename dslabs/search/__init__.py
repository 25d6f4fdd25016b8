"""Binary search trees and integer search in text files."""

__all__ = ["fileio", "tree"]
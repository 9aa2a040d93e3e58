"""
Git Puller - Pull every git repository found under a directory tree.

This package walks a directory, finds each repository root by its `.git`
directory and runs `git pull` for all of them concurrently, then prints a
summary table of the outcome per repository.
"""

__version__ = "1.0.0"

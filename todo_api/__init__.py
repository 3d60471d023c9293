"""
Todo API - task lists and tasks behind a token-authenticated REST backend
"""

__version__ = "1.0.0"

"""
Module: session

Purpose:
    Public entry point for embedding the editor state: one CodeSession per
    rendered snippet.

Key Classes:
    - CodeSession: Initialization task + per-surface views
    - CodeView: Result of CodeSession.view()
    - SessionConfig: Fixed per-instance inputs
"""

from .config import SessionConfig
from .controller import CodeSession, CodeView

__all__ = [
    "CodeSession",
    "CodeView",
    "SessionConfig",
]

"""
Edit intent resolution - classify a prompt and resolve the files it targets.
"""

from .classifier import EditIntent, EditType, classify_intent
from .context import FileContext, select_files_for_edit

__all__ = ["EditIntent", "EditType", "classify_intent", "FileContext", "select_files_for_edit"]

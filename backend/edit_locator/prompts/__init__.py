"""
Centralized prompts for the edit locator.

- search_plan: LLM search-plan generation
- edit: editing brief handed to the code-editing model
"""

from edit_locator.prompts.search_plan import (
    SEARCH_PLAN_SYSTEM_PROMPT,
    SEARCH_PLAN_USER_PROMPT,
)

from edit_locator.prompts.edit import (
    EDIT_INSTRUCTIONS,
    EDIT_BRIEF_TEMPLATE,
)

__all__ = [
    # Search planning
    "SEARCH_PLAN_SYSTEM_PROMPT",
    "SEARCH_PLAN_USER_PROMPT",
    # Editing brief
    "EDIT_INSTRUCTIONS",
    "EDIT_BRIEF_TEMPLATE",
]

"""
Editing brief handed to the code-editing model once target files are known.
Keyed by edit type value.
"""

EDIT_INSTRUCTIONS = {
    "UPDATE_COMPONENT": """- Change ONLY the specific element or feature mentioned
- Do not refactor, reformat or remove unrelated code
- Preserve all imports and exports
- Return the COMPLETE file with the change applied""",

    "ADD_FEATURE": """- Create new components in the appropriate directory
- Import and render the new component in its parent
- Update routing when adding a page
- Follow the existing patterns and styling""",

    "FIX_ISSUE": """- Identify and fix the specific issue
- Preserve existing behavior except for the bug
- Add error handling where it is missing""",

    "UPDATE_STYLE": """- Change ONLY the style classes mentioned
- Keep every other class, attribute and responsive variant exactly as is
- Do not change the component structure""",

    "REFACTOR": """- Improve code quality without changing functionality
- Follow project conventions""",

    "FULL_REBUILD": """- You may rebuild the entire application
- Keep the same core functionality""",

    "ADD_DEPENDENCY": """- Add the dependency to package.json
- Add the import statements where it is used
- Update build configuration if the package needs it""",
}


EDIT_BRIEF_TEMPLATE = """## Edit Intent
Type: {edit_type}
Description: {description}
Confidence: {confidence}%
User request: "{prompt}"
Entry point: {entry_point}

## Primary Files (edit ONLY these)
{primary_files}

## Context Files (reference only)
Architecture:
{architecture}
Styling:
{styling}
Components:
{components}

## Instructions
{instructions}"""

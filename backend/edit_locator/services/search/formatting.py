"""
Plain-text rendering of search results for an editing model.
"""
from edit_locator.services.search.models import SearchResult

NO_RESULTS = "No search results found."


def format_search_results(results: list[SearchResult]) -> str:
    """Group results by file and end with a recommended action for the best match."""
    if not results:
        return NO_RESULTS

    sections = ["SEARCH RESULTS - TARGET LOCATIONS:"]

    by_file: dict[str, list[SearchResult]] = {}
    for result in results:
        by_file.setdefault(result.file_path, []).append(result)

    for file_path, file_results in by_file.items():
        component_type = file_results[0].component_type or "file"
        sections.append(f"\n{component_type.upper()}: {file_path}")

        for result in file_results:
            label = f"{result.element_type.upper()} ELEMENT" if result.element_type else "CODE"
            sections.append(
                f"  Line {result.line_number} ({result.confidence.upper()} confidence) - {label}"
            )
            if result.matched_term:
                sections.append(f'    Matched term: "{result.matched_term}"')
            elif result.matched_pattern:
                sections.append(f"    Matched pattern: {result.matched_pattern}")
            sections.append(f"    Code: {result.line_content}")

            if result.context_before or result.context_after:
                sections.append("    Context:")
                sections.extend(f"      {line}" for line in result.context_before)
                sections.append(f"    > {result.line_content}")
                sections.extend(f"      {line}" for line in result.context_after)

    best = results[0]
    component_type = best.component_type or "component"
    location = f"{best.file_path} at line {best.line_number}"

    sections.append("\nRECOMMENDED EDIT ACTION:")
    if best.element_type == "jsx":
        sections.extend([
            f"Edit JSX in {location}",
            f"- This is a {component_type} rendering elements in its return statement",
            "- Modify ONLY the requested element, keep the rest of the JSX as is",
        ])
    elif best.element_type == "style":
        sections.extend([
            f"Update styles in {location}",
            f"- This is a Tailwind class list in a {component_type}",
            "- Change ONLY the requested classes, keep responsive variants (sm:, md:, lg:)",
        ])
    elif best.element_type == "state":
        sections.extend([
            f"Modify state in {location}",
            f"- This is a state definition in a {component_type}",
        ])
    else:
        sections.extend([
            f"Edit {location}",
            "- Make a targeted change and preserve existing behaviour",
        ])

    return "\n".join(sections)

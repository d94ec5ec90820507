"""Tests for the per-edit-type file resolvers."""

from edit_locator.services.intent import resolvers


def test_extract_component_names_drops_edit_verbs_and_short_words():
    assert resolvers.extract_component_names("update the header component") == ["header", "component"]
    assert resolvers.extract_component_names("fix it on the nav") == ["nav"]


def test_extract_content_terms():
    assert resolvers.extract_content_terms("remove start deploying button") == ["start deploying"]
    assert resolvers.extract_content_terms('change "Ship faster" text') == ["Ship faster"]
    assert resolvers.extract_content_terms("make it blue") == []
    # quotes around the removed phrase are not part of the term
    assert resolvers.extract_content_terms("remove 'sk-secret' text") == ["sk-secret"]


def test_single_file_kept_when_several_components_match(sample_manifest):
    files = resolvers.find_component_files("update header and footer", sample_manifest)

    assert files == ["src/components/Header.jsx"]


def test_ui_element_prefers_exact_file_name(make_manifest, sample_files):
    manifest = make_manifest({
        "src/components/HeaderLinks.jsx": "export default function HeaderLinks() {}",
        "src/components/Header.jsx": "export default function Header() {}",
        "src/App.jsx": sample_files["src/App.jsx"],
    })

    # "headers" names no file directly, so the UI element table decides
    assert resolvers.find_component_files("headers look off", manifest) == ["src/components/Header.jsx"]


def test_ui_element_partial_match(make_manifest, sample_files):
    manifest = make_manifest({
        "src/App.jsx": sample_files["src/App.jsx"],
        "src/components/Navigation.jsx": "export default function Navigation() {}",
    })

    assert resolvers.find_component_files("the navbar is crowded", manifest) == [
        "src/components/Navigation.jsx"
    ]


def test_component_files_fall_back_to_entry_point(sample_manifest):
    assert resolvers.find_component_files("do something", sample_manifest) == ["src/App.jsx"]


def test_content_search_only_looks_at_component_files(make_manifest, sample_files):
    manifest = make_manifest({
        "src/data.js": "export const label = 'Start Deploying'",
        "src/App.jsx": sample_files["src/App.jsx"],
    })

    files = resolvers.find_component_by_content("remove start deploying button", manifest)

    assert files == ["src/App.jsx"]


def test_style_files_are_deduplicated(make_manifest, sample_files):
    manifest = make_manifest(sample_files, style_files=["src/index.css", "src/index.css"])

    assert resolvers.find_style_files("make the header blue", manifest) == [
        "src/index.css",
        "tailwind.config.js",
        "src/components/Header.jsx",
    ]


def test_feature_insertion_uses_location_phrase(sample_manifest):
    files = resolvers.find_feature_insertion_points(
        "add a newsletter section to the footer", sample_manifest
    )

    assert files == ["src/components/Footer.jsx"]


def test_feature_insertion_for_page_includes_router_files(make_manifest, sample_files):
    manifest = make_manifest({
        "src/App.jsx": sample_files["src/App.jsx"],
        "src/routes.jsx": "<Route path='/' element={<Home />} />",
    })

    files = resolvers.find_feature_insertion_points("create a pricing page", manifest)

    assert files == ["src/routes.jsx", "src/App.jsx"]


def test_problem_files_without_bug_language(sample_manifest):
    files = resolvers.find_problem_files("optimize the header", sample_manifest)

    assert files == ["src/components/Header.jsx"]


def test_problem_files_with_bug_language_are_most_recent_first(make_manifest, sample_files):
    manifest = make_manifest(
        sample_files,
        last_modified={"src/components/Hero.jsx": 1_900_000_000},
    )

    files = resolvers.find_problem_files("the page is broken", manifest)

    assert files[0] == "src/components/Hero.jsx"
    assert len(files) == len(set(files))


def test_package_files(make_manifest, sample_files):
    manifest = make_manifest({
        "package.json": "{}",
        "vite.config.js": "export default {}",
        "tsconfig.json": "{}",
        "src/App.jsx": sample_files["src/App.jsx"],
    })

    assert resolvers.find_package_files("install axios", manifest) == [
        "package.json",
        "vite.config.js",
        "tsconfig.json",
    ]


def test_entry_point_resolver(sample_manifest):
    assert resolvers.find_entry_point("start over", sample_manifest) == ["src/App.jsx"]

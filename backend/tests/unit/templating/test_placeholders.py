"""
Unit Tests for placeholder extraction and substitution
"""
from teamflow.templating.blueprint import (
    DetailsBlueprint,
    ProjectBlueprint,
    TaskBlueprint,
    TemplateBlueprint,
)
from teamflow.templating.placeholders import (
    extract_placeholders,
    find_placeholders,
    substitute,
)


class TestFindPlaceholders:
    """Scanning a single string"""

    def test_finds_names_in_order(self):
        assert find_placeholders("Hi {b}, meet {a}") == ["b", "a"]

    def test_deduplicates(self):
        assert find_placeholders("{a} and {a} again") == ["a"]

    def test_empty_braces_are_plain_text(self):
        assert find_placeholders("literal {} braces") == []

    def test_whitespace_is_part_of_the_name(self):
        assert find_placeholders("{ name} {name}") == [" name", "name"]

    def test_unclosed_brace_ignored(self):
        assert find_placeholders("oops {name") == []

    def test_none_and_empty(self):
        assert find_placeholders(None) == []
        assert find_placeholders("") == []


class TestExtractPlaceholders:
    """Scanning a whole template"""

    def test_onboarding_template(self):
        template = TemplateBlueprint(
            name="Onboarding",
            projects=[
                ProjectBlueprint(
                    name="Onboard {employee}",
                    tasks=[TaskBlueprint(title="Meet {manager}")],
                )
            ],
        )

        assert extract_placeholders(template) == ["employee", "manager"]

    def test_scan_order_covers_every_text_field(self):
        template = TemplateBlueprint(
            name="{not_scanned}",
            description="{t_desc}",
            projects=[
                ProjectBlueprint(
                    name="{p_name}",
                    description="{p_desc}",
                    details=DetailsBlueprint(
                        product_info="{d_product}",
                        internal_link_plan="{d_links}",
                        customer_notes="{d_notes}",
                    ),
                    tasks=[TaskBlueprint(title="{task_title}", description="{task_desc}")],
                ),
                ProjectBlueprint(name="{p2_name} and {t_desc}"),
            ],
        )

        assert extract_placeholders(template) == [
            "t_desc",
            "p_name",
            "p_desc",
            "d_product",
            "d_notes",
            "d_links",
            "task_title",
            "task_desc",
            "p2_name",
        ]

    def test_numeric_details_and_keywords_not_scanned(self):
        template = TemplateBlueprint(
            name="SEO",
            projects=[
                ProjectBlueprint(
                    name="Site",
                    details=DetailsBlueprint(
                        personnel_count=2,
                        keywords_plan=[{"page": "{page}", "mainKeyword": {"keyword": "{kw}", "volume": 1}}],
                    ),
                )
            ],
        )

        assert extract_placeholders(template) == []

    def test_empty_template(self):
        assert extract_placeholders(TemplateBlueprint(name="Empty")) == []


class TestSubstitute:
    """Single-pass replacement"""

    def test_replaces_known_names(self):
        assert substitute("Onboard {employee}", {"employee": "Ana"}) == "Onboard Ana"

    def test_unknown_names_kept(self):
        assert substitute("{a} {b}", {"a": "1"}) == "1 {b}"

    def test_not_recursive(self):
        assert substitute("{a}", {"a": "{b}", "b": "X"}) == "{b}"

    def test_backslashes_in_values_kept_literally(self):
        assert substitute("path {dir}", {"dir": r"C:\new\1"}) == r"path C:\new\1"

    def test_empty_braces_untouched(self):
        assert substitute("{} {a}", {"a": "x"}) == "{} x"

    def test_none_stays_none(self):
        assert substitute(None, {"a": "x"}) is None

    def test_empty_value(self):
        assert substitute("[{a}]", {"a": ""}) == "[]"

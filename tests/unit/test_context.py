"""Unit tests for token context analysis."""

from template_binder.strategies.binding_engine.context import (
    analyze_token_context,
    clean_token_name,
)


class TestCleanTokenName:
    """Test suite for clean_token_name."""

    def test_bracket_token(self):
        assert clean_token_name("[[FIELD:phone]]") == "phone"

    def test_handlebar_token_with_spaces(self):
        assert clean_token_name("{{ name }}") == "name"

    def test_block_helper_keeps_expression(self):
        assert clean_token_name("{{#each items}}") == "#each items"


class TestAnalyzeTokenContext:
    """Test suite for analyze_token_context."""

    def test_enclosing_and_parent_tag(self):
        """Test that the innermost open tag and its parent are reported."""
        html = '<div><a href="#">{{email}}</a></div>'
        context = analyze_token_context("{{email}}", html)

        assert context.clean_name == "email"
        assert context.html_tag == "a"
        assert context.parent_tag == "div"

    def test_closed_tags_are_ignored(self):
        """Test that tags closed before the token do not count."""
        html = "<div><span>label</span>{{name}}</div>"
        context = analyze_token_context("{{name}}", html)

        assert context.html_tag == "div"
        assert context.parent_tag is None

    def test_tag_names_lowercased(self):
        context = analyze_token_context("{{title}}", "<SECTION><H1>{{title}}</H1></SECTION>")

        assert context.html_tag == "h1"
        assert context.parent_tag == "section"

    def test_void_tags_count_as_open(self):
        """Test that void elements are treated like any other open tag."""
        context = analyze_token_context("{{name}}", "<p><br>{{name}}</p>")

        assert context.html_tag == "br"
        assert context.parent_tag == "p"

    def test_token_not_found(self):
        """Test that a missing token yields only token and clean name."""
        context = analyze_token_context("{{missing}}", "<p>{{present}}</p>")

        assert context.token == "{{missing}}"
        assert context.clean_name == "missing"
        assert context.html_tag is None
        assert context.parent_tag is None
        assert context.surrounding_text is None

    def test_empty_html(self):
        context = analyze_token_context("{{email}}", "")

        assert context.clean_name == "email"
        assert context.surrounding_text is None

    def test_surrounding_text_window(self):
        """Test that 50 characters are kept on each side of the token."""
        html = "x" * 100 + "{{a}}" + "y" * 100
        context = analyze_token_context("{{a}}", html)

        assert context.surrounding_text == "x" * 50 + "{{a}}" + "y" * 50

    def test_surrounding_text_clipped(self):
        context = analyze_token_context("{{a}}", "ab{{a}}cd")

        assert context.surrounding_text == "ab{{a}}cd"

    def test_custom_window(self):
        context = analyze_token_context("{{a}}", "12345{{a}}67890", window=2)

        assert context.surrounding_text == "45{{a}}67"

    def test_first_occurrence_used(self):
        html = "<h1>{{name}}</h1><p>{{name}}</p>"
        context = analyze_token_context("{{name}}", html)

        assert context.html_tag == "h1"

    def test_repeated_block(self, resume_template_html):
        """Test detection of tokens inside an #each block."""
        inside = analyze_token_context("{{jobTitle}}", resume_template_html)
        outside = analyze_token_context("{{summary}}", resume_template_html)

        assert inside.in_repeated_block is True
        assert inside.section == "workExperience"
        assert inside.html_tag == "h3"
        assert outside.in_repeated_block is False
        assert outside.section is None

    def test_deterministic(self, resume_template_html):
        first = analyze_token_context("{{employer}}", resume_template_html)
        second = analyze_token_context("{{employer}}", resume_template_html)

        assert first == second

"""Tests for requirement extraction from analysis text."""

from src.intelligence.requirements_parser import parse_requirements


class TestParseRequirements:
    """Tests for parse_requirements."""

    def test_basic_sections(self):
        """Bullets land in the bucket of the preceding header."""
        text = "\n".join([
            "Technical Requirements:",
            "- must support X",
            "Compliance:",
            "- must comply with Y",
            "random line",
        ])
        result = parse_requirements(text)

        assert result.technical == ["must support X"]
        assert result.compliance == ["must comply with Y"]
        assert result.deliverables == []
        assert result.timeline is None

    def test_model_style_output(self, sample_analysis_text):
        """Numbered headers and indented bullets are handled."""
        result = parse_requirements(sample_analysis_text)

        assert result.technical == [
            "Migrate 40 legacy applications to AWS GovCloud",
            "Maintain 99.9% availability during cutover",
        ]
        assert result.compliance == ["Section 508 accessibility", "NIST 800-53 controls"]
        assert result.deliverables == ["Migration plan within 30 days", "Monthly status reports"]

    def test_bullets_before_any_header_ignored(self):
        """Hyphenated lines are dropped until a header sets the category."""
        result = parse_requirements("- orphan bullet\nDeliverables\n- final report")

        assert result.technical == []
        assert result.deliverables == ["final report"]

    def test_lines_without_hyphen_ignored(self):
        """Non-bullet lines under a header are skipped."""
        result = parse_requirements("Technical requirements\n* starred item\n1. numbered item")

        assert result.technical == []

    def test_header_priority(self):
        """A line matching several keywords switches to the first in priority order."""
        text = "Technical requirements and compliance deliverables\n- item one"
        result = parse_requirements(text)

        assert result.technical == ["item one"]
        assert result.compliance == []
        assert result.deliverables == []

    def test_header_line_with_hyphen_is_not_a_bullet(self):
        """Header lines switch the cursor even if they contain a hyphen."""
        result = parse_requirements("Technical requirements - summary\n- item")

        assert result.technical == ["item"]

    def test_inner_hyphen_kept(self):
        """Only the leading hyphen and following spaces are stripped."""
        result = parse_requirements("Compliance\nFAR 52.204-21 safeguarding\n-   DFARS 252.204-7012")

        assert result.compliance == ["FAR 52.204-21 safeguarding", "DFARS 252.204-7012"]

    def test_case_insensitive_headers(self):
        """Header matching ignores case."""
        result = parse_requirements("KEY DELIVERABLES\n- Final report")

        assert result.deliverables == ["Final report"]

    def test_empty_text(self):
        """Empty input yields empty buckets, never None."""
        result = parse_requirements("")

        assert result.technical == []
        assert result.compliance == []
        assert result.deliverables == []
        assert result.timeline is None

    def test_timeline_never_populated(self):
        """Timeline sections are not extracted."""
        result = parse_requirements("Timeline\n- Proposal due 2024-09-30")

        assert result.timeline is None
        assert result.technical == []

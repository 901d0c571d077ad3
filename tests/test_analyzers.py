"""Tests for the parsed-source model and built-in analyzers."""

import pytest

from kal.analysis.builtin.commentstart import CommentStartAnalyzer
from kal.analysis.builtin.jsontags import DEFAULT_TAG_REGEX, JSONTagsAnalyzer
from kal.analysis.builtin.nophase import NoPhaseAnalyzer
from kal.analysis.builtin.optionalorrequired import OptionalOrRequiredAnalyzer
from kal.analysis.models import StructField, StructType, parse_json_tag
from kal.config.schema import JSONTagsConfig, OptionalOrRequiredConfig


def _run(analyzer, *fields):
    return analyzer.run([StructType(name="T", fields=tuple(fields))])


def _messages(findings):
    return [f.message for f in findings]


class TestJSONTagParsing:
    def test_missing(self):
        assert parse_json_tag(None).missing is True

    def test_ignored(self):
        assert parse_json_tag("-").ignored is True

    def test_name_and_options(self):
        tag = parse_json_tag("fooBar,omitempty")
        assert tag.name == "fooBar"
        assert tag.inline is False

    def test_inline(self):
        tag = parse_json_tag(",inline")
        assert tag.name == ""
        assert tag.inline is True

    def test_empty(self):
        tag = parse_json_tag("")
        assert tag.name == ""
        assert tag.missing is False


class TestCommentStart:
    def test_good_doc(self, sample_structs):
        assert CommentStartAnalyzer().run(sample_structs) == []

    def test_missing_doc(self):
        findings = _run(CommentStartAnalyzer(), StructField("Foo", json_tag="foo"))
        assert _messages(findings) == ["field Foo is missing godoc comment"]

    def test_doc_starting_with_go_name(self):
        findings = _run(
            CommentStartAnalyzer(),
            StructField("Foo", json_tag="foo", doc="Foo is a field."),
        )
        assert _messages(findings) == ["godoc for field Foo should start with 'foo ...'"]
        assert findings[0].suggested_fix == "foo is a field."
        assert findings[0].analyzer == "commentstart"
        assert findings[0].struct == "T"

    def test_ignored_and_inline_fields_skipped(self):
        findings = _run(
            CommentStartAnalyzer(),
            StructField("Skip", json_tag="-"),
            StructField("Meta", json_tag=",inline"),
            StructField("NoTag"),
        )
        assert findings == []


class TestJSONTags:
    def test_default_pattern(self):
        assert JSONTagsAnalyzer(JSONTagsConfig()).pattern == DEFAULT_TAG_REGEX

    @pytest.mark.parametrize("tag", ["foo", "fooBar", "foo2Bar", "a"])
    def test_valid_tags(self, tag):
        assert _run(JSONTagsAnalyzer(JSONTagsConfig()), StructField("F", json_tag=tag)) == []

    @pytest.mark.parametrize("tag", ["FooBar", "foo_bar", "foo-bar", "2foo"])
    def test_invalid_tags(self, tag):
        findings = _run(JSONTagsAnalyzer(JSONTagsConfig()), StructField("F", json_tag=tag))
        assert _messages(findings) == [
            f'field F json tag does not match pattern "{DEFAULT_TAG_REGEX}": {tag}'
        ]

    def test_missing_tag(self):
        findings = _run(JSONTagsAnalyzer(JSONTagsConfig()), StructField("F"))
        assert _messages(findings) == ["field F is missing json tag"]

    def test_empty_tag(self):
        findings = _run(JSONTagsAnalyzer(JSONTagsConfig()), StructField("F", json_tag=",omitempty"))
        assert _messages(findings) == ["field F has empty json tag"]

    def test_inline_and_ignored_allowed(self):
        analyzer = JSONTagsAnalyzer(JSONTagsConfig())
        assert _run(analyzer, StructField("A", json_tag=",inline"), StructField("B", json_tag="-")) == []

    def test_custom_pattern(self):
        analyzer = JSONTagsAnalyzer(JSONTagsConfig(json_tag_regex="^[a-z_]+$"))
        assert _run(analyzer, StructField("F", json_tag="foo_bar")) == []
        assert len(_run(analyzer, StructField("F", json_tag="fooBar"))) == 1


class TestOptionalOrRequired:
    def test_marked_fields(self, sample_structs):
        analyzer = OptionalOrRequiredAnalyzer(OptionalOrRequiredConfig())
        assert analyzer.run(sample_structs) == []

    def test_unmarked(self):
        findings = _run(OptionalOrRequiredAnalyzer(OptionalOrRequiredConfig()), StructField("F", json_tag="f"))
        assert _messages(findings) == ["field F must be marked as optional or required"]

    def test_both(self):
        findings = _run(
            OptionalOrRequiredAnalyzer(OptionalOrRequiredConfig()),
            StructField("F", json_tag="f", markers=("optional", "kubebuilder:validation:Required")),
        )
        assert _messages(findings) == ["field F must not be marked as both optional and required"]

    def test_secondary_marker_reported(self):
        findings = _run(
            OptionalOrRequiredAnalyzer(OptionalOrRequiredConfig()),
            StructField("F", json_tag="f", markers=("kubebuilder:validation:Optional",)),
        )
        assert _messages(findings) == [
            "field F should use marker optional instead of kubebuilder:validation:Optional"
        ]
        assert findings[0].suggested_fix == "optional"

    def test_preferred_kubebuilder_markers(self):
        analyzer = OptionalOrRequiredAnalyzer(
            OptionalOrRequiredConfig(
                preferred_optional_marker="kubebuilder:validation:Optional",
                preferred_required_marker="kubebuilder:validation:Required",
            )
        )
        findings = _run(
            analyzer,
            StructField("A", json_tag="a", markers=("kubebuilder:validation:Optional",)),
            StructField("B", json_tag="b", markers=("required",)),
        )
        assert _messages(findings) == [
            "field B should use marker kubebuilder:validation:Required instead of required"
        ]

    def test_both_preferred_and_secondary(self):
        findings = _run(
            OptionalOrRequiredAnalyzer(OptionalOrRequiredConfig()),
            StructField("F", json_tag="f", markers=("optional", "kubebuilder:validation:Optional")),
        )
        assert len(findings) == 1
        assert findings[0].suggested_fix is None

    def test_inline_skipped(self):
        analyzer = OptionalOrRequiredAnalyzer(OptionalOrRequiredConfig())
        assert _run(analyzer, StructField("Meta", json_tag=",inline")) == []


class TestNoPhase:
    PHASE_MSG = "phase fields are deprecated and conditions should be preferred, avoid phase like enum fields"

    @pytest.mark.parametrize(
        "field",
        [
            StructField("Phase", json_tag="phase,omitempty"),
            StructField("FooPhase", json_tag="fooPhase,omitempty"),
            StructField("FooField", json_tag="fooPhase,omitempty"),
        ],
        ids=lambda f: f.name,
    )
    def test_phase_fields(self, field):
        findings = _run(NoPhaseAnalyzer(), field)
        assert _messages(findings) == [f"field {field.name}: {self.PHASE_MSG}"]

    def test_non_phase_fields(self, sample_structs):
        assert NoPhaseAnalyzer().run(sample_structs) == []

    def test_phases_plural_allowed(self):
        assert _run(NoPhaseAnalyzer(), StructField("Phases", json_tag="phases")) == []

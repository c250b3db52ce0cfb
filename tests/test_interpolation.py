"""Tests for the placeholder grammar and interpolators."""

from __future__ import annotations

import pytest

from lingotree.core.errors import InterpolationError, PropertyNotFoundError
from lingotree.core.protocols import Interpolator
from lingotree.interpolation import (
    Declaration,
    FunctionInterpolator,
    NoErrorInterpolator,
    PlaceholderInterpolator,
    find_declarations,
)
from lingotree.properties import DefaultedPropertySource, MapPropertySource

from tests.conftest import RecordingPropertySource


@pytest.fixture
def profile():
    return MapPropertySource({
        "name": "Alan Ginsberg",
        "hobby": "writing poems",
        "favorite music": "jazz",
    })


@pytest.fixture
def interpolator():
    return PlaceholderInterpolator()


class TestFindDeclarations:
    def test_no_declarations(self):
        assert find_declarations("plain text") == []

    def test_name_only(self):
        assert find_declarations("hi %{name}!") == [Declaration("%{name}", "name")]

    def test_name_and_default(self):
        [decl] = find_declarations("%{name|Frida Kahlo}")
        assert decl.name == "name"
        assert decl.has_default
        assert decl.default == "Frida Kahlo"

    def test_empty_default(self):
        [decl] = find_declarations("%{name|}")
        assert decl.has_default
        assert decl.default == ""

    def test_empty_name_does_not_match(self):
        assert find_declarations("this text %{}") == []
        assert find_declarations("%{|default}") == []

    def test_order_of_occurrence(self):
        names = [d.name for d in find_declarations("%{b} %{a|x} %{b}")]
        assert names == ["b", "a", "b"]

    def test_default_may_contain_pipes(self):
        [decl] = find_declarations("%{a|x|y}")
        assert decl.default == "x|y"


class TestPlaceholderInterpolator:
    @pytest.mark.parametrize(
        "template, expected",
        [
            ("", ""),
            ("this text %{}", "this text %{}"),
            ("my name is %{name}", "my name is Alan Ginsberg"),
            ("my name is %{name|Frida Kahlo}", "my name is Alan Ginsberg"),
            ("my name is %{firstname|Frida}", "my name is Frida"),
            (
                "my name is %{name} and I like %{hobby}",
                "my name is Alan Ginsberg and I like writing poems",
            ),
            (
                "my name is %{name|Frida Kahlo} and I like %{hobby|feminist activism}",
                "my name is Alan Ginsberg and I like writing poems",
            ),
            ("my name is %{lastname|Ginsberg}, %{name}", "my name is Ginsberg, Alan Ginsberg"),
            (
                "my name is %{lastname|Ginsberg}, %{name}. My hobby is %{hobby|watching TV} "
                "and I like %{favorite music} music",
                "my name is Ginsberg, Alan Ginsberg. My hobby is writing poems "
                "and I like jazz music",
            ),
        ],
    )
    def test_interpolates(self, interpolator, profile, template, expected):
        assert interpolator.interpolate(template, profile) == expected

    @pytest.mark.parametrize(
        "template",
        ["my name is %{firstname}", "my name is %{lastname}, %{name}", "%{firstname}"],
    )
    def test_missing_property_without_default(self, interpolator, profile, template):
        with pytest.raises(InterpolationError) as exc_info:
            interpolator.interpolate(template, profile)
        assert exc_info.value.template == template
        assert repr(template) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, PropertyNotFoundError)

    def test_default_used_verbatim(self, interpolator):
        result = interpolator.interpolate("%{a|%{b}}", MapPropertySource({"b": "B"}))
        # The default stops at the first "}", the trailing brace is literal text.
        assert result == "%{b}"

    def test_default_is_not_reinterpolated(self, interpolator):
        result = interpolator.interpolate("x %{a|y}", MapPropertySource({"y": "nope"}))
        assert result == "x y"

    def test_substituted_value_is_not_rescanned(self, interpolator):
        source = MapPropertySource({"a": "%{b}", "b": "B"})
        assert interpolator.interpolate("%{a} %{b}", source) == "%{b} B"

    def test_substituted_default_is_not_rescanned(self, interpolator):
        source = MapPropertySource({"b": "B"})
        assert interpolator.interpolate("%{a|%{b}} %{b}", source) == "%{b} B"

    def test_value_with_regex_escapes_is_literal(self, interpolator):
        source = MapPropertySource({"path": r"C:\new\1"})
        assert interpolator.interpolate("at %{path}", source) == r"at C:\new\1"

    def test_all_occurrences_replaced(self, interpolator):
        result = interpolator.interpolate("%{n} and %{n}", MapPropertySource({"n": "x"}))
        assert result == "x and x"

    def test_present_property_independent_of_absent_ones(self, interpolator):
        result = interpolator.interpolate("%{name}", MapPropertySource({"name": "Alan"}))
        assert result == "Alan"

    def test_stops_at_first_failure(self, interpolator):
        source = RecordingPropertySource({"c": "C"})
        with pytest.raises(InterpolationError) as exc_info:
            interpolator.interpolate("%{a|A} %{b} %{c}", source)
        assert source.lookups == ["a", "b"]
        assert exc_info.value.property_name == "b"

    def test_defaulted_source_never_fails(self, interpolator):
        source = DefaultedPropertySource(MapPropertySource({}), "?")
        assert interpolator.interpolate("%{a} %{b|x}", source) == "? ?"

    def test_satisfies_protocol(self, interpolator):
        assert isinstance(interpolator, Interpolator)


class TestNoErrorInterpolator:
    def test_passes_through_success(self, recording_source):
        inner = FunctionInterpolator(lambda text, props: f"{text} - some text")
        result = NoErrorInterpolator(inner).interpolate("this text", recording_source)
        assert result == "this text - some text"

    def test_returns_original_on_failure(self):
        source = RecordingPropertySource()
        result = NoErrorInterpolator(PlaceholderInterpolator()).interpolate(
            "this other %{text}", source
        )
        assert result == "this other %{text}"
        assert source.lookups == ["text"]

    def test_forwards_same_property_source(self):
        seen = []

        def record(text, props):
            seen.append(props)
            return text

        source = MapPropertySource({})
        NoErrorInterpolator(FunctionInterpolator(record)).interpolate("t", source)
        assert seen == [source]
        assert seen[0] is source

    def test_does_not_swallow_other_errors(self):
        def broken(text, props):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            NoErrorInterpolator(FunctionInterpolator(broken)).interpolate("t", MapPropertySource())

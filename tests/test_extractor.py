"""Tests for partial reference extraction."""

from etapack.extractor import extract_partials, match_include, match_layout
from etapack.template import Evaluate, InterpolatedExpr, Literal, RawExpr, parse


def test_include_in_raw_node():
    nodes = [Literal("Hello "), RawExpr("E.include('greeting')")]
    assert extract_partials(nodes) == ["greeting"]


def test_bare_include_and_extra_arguments():
    assert match_include("include('header')") == "header"
    assert match_include("E.include('header', { title: it.title })") == "header"
    assert match_include('include("footer")') == "footer"


def test_include_with_variable_is_ignored():
    assert match_include("include(someVariable)") is None
    assert match_include("E.include(it.partial)") is None
    assert extract_partials([RawExpr("include(someVariable)")]) == []


def test_empty_include_name_is_ignored():
    assert extract_partials([RawExpr("E.include('')")]) == []


def test_include_requires_call_name():
    assert match_include("myinclude('x')") is None
    assert match_include("it.include('x')") is None


def test_include_outside_raw_node_is_ignored():
    nodes = [InterpolatedExpr("E.include('greeting')"), Literal("E.include('x')")]
    assert extract_partials(nodes) == []


def test_layout_call_with_options():
    nodes = parse('<%= layout("base", {x:1}) %>')
    assert extract_partials(nodes) == ["base"]


def test_layout_quotes():
    assert match_layout("layout('base')") == "base"
    assert match_layout('layout("base")') == "base"
    assert match_layout("layout(  'base' , it)") == "base"


def test_layout_must_span_whole_expression():
    assert match_layout("it.x + layout('base')") is None
    assert match_layout("layout(name)") is None
    assert match_layout("layout('')") is None


def test_layout_in_evaluate_node():
    assert extract_partials([Evaluate("layout('base')")]) == ["base"]


def test_layout_in_raw_node_is_ignored():
    assert extract_partials([RawExpr("layout('base')")]) == []


def test_dedup_keeps_first_occurrence_order():
    source = (
        "<% layout('base') %>"
        "<%~ include('header') %>"
        "<%~ E.include('nav') %>"
        "<%~ include('header') %>"
        "<%= it.body %>"
    )
    assert extract_partials(parse(source)) == ["base", "header", "nav"]

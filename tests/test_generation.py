import pytest

from subdomain_maker.generation import (
    collapse_dots,
    estimate_candidate_count,
    generate_candidates,
    generate_depth1,
    generate_depth2,
)


def test_collapse_dots_collapses_runs() -> None:
    assert collapse_dots("a..b...c.d") == "a.b.c.d"
    assert collapse_dots("www.example.com") == "www.example.com"


def test_generate_depth1_appends_domain_in_order() -> None:
    assert list(generate_depth1(["www", "api", "www"], "example.com")) == [
        "www.example.com",
        "api.example.com",
        "www.example.com",
    ]


def test_generate_depth1_collapses_leading_dot_domain() -> None:
    assert list(generate_depth1(["www"], ".example.com")) == ["www.example.com"]


def test_generate_depth2_cross_product_first_list_outer() -> None:
    assert list(generate_depth2(["a", "b"], ["x", "y"], "ex.com")) == [
        "a.x.ex.com",
        "a.y.ex.com",
        "b.x.ex.com",
        "b.y.ex.com",
    ]


def test_generate_depth2_size_is_product_before_dedup() -> None:
    first = ["a", "b", "a"]
    second = ["x", "y"]
    candidates = list(generate_depth2(first, second, "ex.com"))
    assert len(candidates) == len(first) * len(second)
    assert len(set(candidates)) == 4


def test_generate_depth2_empty_second_list() -> None:
    assert list(generate_depth2(["a"], [], "ex.com", show_progress=True)) == []


def test_generate_depth2_with_progress_bar(capsys: pytest.CaptureFixture[str]) -> None:
    assert list(generate_depth2(["a"], ["b"], "ex.com", show_progress=True)) == ["a.b.ex.com"]
    assert capsys.readouterr().out == ""


def test_generate_candidates_streams_per_depth() -> None:
    assert len(generate_candidates("1", ["a"], ["a"], "ex.com")) == 1
    assert len(generate_candidates("2", ["a"], ["a"], "ex.com")) == 1
    streams = generate_candidates("both", ["a"], ["a"], "ex.com")
    assert [list(stream) for stream in streams] == [["a.ex.com"], ["a.a.ex.com"]]


def test_generate_candidates_rejects_unknown_depth() -> None:
    with pytest.raises(ValueError):
        generate_candidates("3", ["a"], ["a"], "ex.com")


def test_estimate_candidate_count() -> None:
    assert estimate_candidate_count("1", 10, 20) == 10
    assert estimate_candidate_count("2", 10, 20) == 200
    assert estimate_candidate_count("both", 10, 20) == 210
    with pytest.raises(ValueError):
        estimate_candidate_count("3", 1, 1)

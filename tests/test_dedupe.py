from subdomain_maker.dedupe import deduplicate


def test_deduplicate_merges_and_sorts() -> None:
    first = ["www.ex.com", "api.ex.com", "www.ex.com"]
    second = ["a.a.ex.com", "api.ex.com"]
    assert deduplicate([first, second]) == ["a.a.ex.com", "api.ex.com", "www.ex.com"]


def test_deduplicate_is_order_independent() -> None:
    first = ["b.ex.com", "a.ex.com"]
    second = ["c.ex.com", "a.ex.com"]
    assert deduplicate([first, second]) == deduplicate([reversed(second), reversed(first)])


def test_deduplicate_accepts_generators_and_empty_streams() -> None:
    assert deduplicate([iter([]), (name for name in ["x.ex.com"])]) == ["x.ex.com"]
    assert deduplicate([]) == []

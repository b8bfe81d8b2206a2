from cheers.brand.suggestions import SuggestionFeed, suggest


def test_suggest_best_first(index):
    out = suggest("Bud", index)
    assert out[0] == "Budweiser"
    assert len(out) <= 5


def test_suggest_is_idempotent(index):
    assert suggest("cor", index) == suggest("cor", index)


def test_suggest_empty(index):
    assert suggest("", index) == []
    assert suggest("  ", index) == []
    assert suggest(None, index) == []


def test_feed_drops_stale_responses(index):
    feed = SuggestionFeed(index)
    assert feed.update(1, "Bu") is not None
    assert feed.update(3, "Budw") == ["Budweiser"]
    assert feed.update(2, "Bud") is None
    assert feed.latest_seq == 3
    # même seq renvoyé : pas périmé
    assert feed.update(3, "Budw") == ["Budweiser"]

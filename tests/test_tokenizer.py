from profile_matcher.core.tokenizer import tokenize

def test_empty_text():
    assert tokenize("") == []

def test_separators_stripped():
    assert tokenize("a, b.") == ["a", "b"]

def test_runs_of_separators_collapse():
    assert tokenize("  cat,, .dog . ") == ["cat", "dog"]

def test_only_separators():
    assert tokenize(" ,.,. ") == []

def test_no_normalization():
    text = "Entry-level O'Brien café\tPython"
    assert tokenize(text) == ["Entry-level", "O'Brien", "café\tPython"]

def test_keeps_duplicates_in_order():
    assert tokenize("b a b") == ["b", "a", "b"]

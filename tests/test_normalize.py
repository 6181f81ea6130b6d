from enkastela.normalize import normalize_for_blind_index


def test_ascii_passthrough():
    assert normalize_for_blind_index("hello") == "hello"
    assert normalize_for_blind_index("alice@example.com") == "alice@example.com"


def test_nfc_vs_nfd_equivalence():
    nfc = "\u00e9"
    nfd = "\u0065\u0301"
    assert normalize_for_blind_index(nfc) == normalize_for_blind_index(nfd)


def test_trim_whitespace():
    assert normalize_for_blind_index("  hello  ") == "hello"
    assert normalize_for_blind_index("\thello\n") == "hello"
    assert normalize_for_blind_index("  hello world  ") == "hello world"


def test_lowercase():
    assert normalize_for_blind_index("HELLO") == "hello"
    assert normalize_for_blind_index("Hello World") == "hello world"
    assert normalize_for_blind_index("Alice@Example.COM") == "alice@example.com"


def test_empty_string():
    assert normalize_for_blind_index("") == ""


def test_cjk_characters_preserved():
    text = "\u4f60\u597d"
    assert normalize_for_blind_index(text) == text


def test_accented_characters_composed_vs_decomposed():
    composed = "caf\u00e9"
    decomposed = "caf\u0065\u0301"
    norm_composed = normalize_for_blind_index(composed)
    norm_decomposed = normalize_for_blind_index(decomposed)
    assert norm_composed == norm_decomposed
    assert norm_composed == "caf\u00e9"


def test_whitespace_only_becomes_empty():
    assert normalize_for_blind_index("   ") == ""
    assert normalize_for_blind_index("\t\n ") == ""


def test_mixed_case_unicode():
    assert normalize_for_blind_index("\u00dcBER") == "\u00fcber"
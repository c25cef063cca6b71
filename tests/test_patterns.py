from strongpass.patterns import (
    COMMON_PATTERNS,
    SEQUENTIAL_TRIADS,
    find_common_patterns,
    find_repeated_runs,
    find_sequential_runs,
    has_common_pattern,
    has_digit,
    has_lower,
    has_repeated_run,
    has_sequential_run,
    has_symbol,
    has_upper,
)


def test_sequential_table():
    assert len(SEQUENTIAL_TRIADS) == 24 + 8
    assert SEQUENTIAL_TRIADS[0] == "abc"
    assert "xyz" in SEQUENTIAL_TRIADS
    assert SEQUENTIAL_TRIADS[-1] == "789"
    assert "yza" not in SEQUENTIAL_TRIADS
    assert "890" not in SEQUENTIAL_TRIADS


def test_class_predicates():
    assert has_lower("ABCd") and not has_lower("ABC1")
    assert has_upper("abcD") and not has_upper("abc1")
    assert has_digit("abc7") and not has_digit("abc")
    assert has_symbol("abc!")
    assert has_symbol("a b")
    assert has_symbol("é")  # non-ASCII counts as a symbol
    assert not has_symbol("Ab1")
    # ASCII only
    assert not has_lower("é")
    assert not has_digit("٣")


def test_repeated_runs():
    assert find_repeated_runs("aaaabbbb") == ["aaaa", "bbbb"]
    assert find_repeated_runs("aabbaa") == []
    assert has_repeated_run("x111y")
    assert not has_repeated_run("")
    # case-sensitive: 'aAa' is not a run
    assert not has_repeated_run("aAa")


def test_sequential_runs():
    assert "abc" in find_sequential_runs("abcdef12345")
    assert "123" in find_sequential_runs("abcdef12345")
    assert has_sequential_run("myXYZpass")
    assert not has_sequential_run("cba321")  # descending is fine
    assert not has_sequential_run("a1b2c3")
    assert not has_sequential_run("yzab")


def test_common_patterns():
    assert find_common_patterns("MyAdminLogin") == ["admin", "login"]
    assert find_common_patterns("abc123") == ["abc123"]
    assert has_common_pattern("xxPaSsWoRdxx")
    assert has_common_pattern("my-qwerty-key")
    assert not has_common_pattern("pass word")
    for word in COMMON_PATTERNS:
        assert has_common_pattern(word.upper())

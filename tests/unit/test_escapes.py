from mathprep.normalization.escapes import normalize_escapes


def test_empty_string():
    assert normalize_escapes("") == ""


def test_double_escaped_parens_collapse():
    assert normalize_escapes(r"\\(x\\)") == r"\(x\)"


def test_double_escaped_brackets_collapse():
    assert normalize_escapes(r"\\[ x \\]") == r"\[ x \]"


def test_crlf_and_outer_whitespace():
    assert normalize_escapes("  a\r\nb  \n") == "a\nb"


def test_backslash_runs_reach_fixed_point():
    # Eight backslashes need several rounds to become one
    assert normalize_escapes("a" + "\\" * 8 + "b") == "a\\b"
    assert normalize_escapes("a" + "\\" * 3 + "b") == "a\\b"


def test_single_backslash_untouched():
    assert normalize_escapes(r"\frac{1}{2}") == r"\frac{1}{2}"

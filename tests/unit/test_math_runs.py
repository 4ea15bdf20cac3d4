from mathprep.normalization.math_runs import is_boundary_char, wrap_math_runs


def test_superscript_run_stops_at_boundary():
    assert wrap_math_runs("设 x^2+1=0，求解") == "设 $x^2+1=0$，求解"


def test_command_run_wrapped():
    src = r"其中 \alpha + \beta = 1。所以"
    assert wrap_math_runs(src) == r"其中 $\alpha + \beta = 1$。所以"


def test_existing_spans_pass_through():
    assert wrap_math_runs("已知 $x^2$ 且 y_1") == "已知 $x^2$ 且 $y_1$"


def test_text_command_in_prose_wrapped():
    assert wrap_math_runs(r"令 \text{n} 为整数") == r"令 $\text{n}$ 为整数"


def test_latin_period_is_a_boundary():
    assert wrap_math_runs("Let x_1 be root. Next") == "Let $x_1 be root$. Next"


def test_plain_prose_unchanged():
    assert wrap_math_runs("hello world") == "hello world"


def test_boundary_chars():
    for char in "\n。；，、.?!：":
        assert is_boundary_char(char)
    assert not is_boundary_char(" ")
    assert not is_boundary_char("+")

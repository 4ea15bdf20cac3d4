from mathprep.normalization.delimiters import canonicalize_delimiters, wrap_environments


def test_dollar_runs_collapse_to_block():
    assert canonicalize_delimiters("$$$x$$$") == "$$x$$"


def test_whitespace_separated_dollars_join():
    assert canonicalize_delimiters("$ $") == "$$"
    assert canonicalize_delimiters("$\n$") == "$$"


def test_bracket_and_paren_delimiters_converted():
    assert canonicalize_delimiters(r"\[ x^2 \]") == "$$ x^2 $$"
    assert canonicalize_delimiters(r"\(a\)") == "$a$"


def test_inline_environment_promoted_to_block():
    src = r"$\begin{cases} x \end{cases}$"
    assert wrap_environments(src) == r"$$\begin{cases} x \end{cases}$$"


def test_bare_environment_wrapped():
    src = r"\begin{pmatrix} a & b \end{pmatrix}"
    assert wrap_environments(src) == r"$$\begin{pmatrix} a & b \end{pmatrix}$$"


def test_nested_environment_wrapped_once():
    src = r"\begin{align} \begin{cases} x \end{cases} \end{align}"
    out = wrap_environments(src)
    assert out == "$$" + src + "$$"
    assert out.count("$$") == 2


def test_block_environment_left_alone():
    src = r"$$\begin{aligned} a \end{aligned}$$"
    assert wrap_environments(src) == src


def test_left_right_group_wrapped_inline():
    src = r"面积为 \left( a+b \right)。"
    assert wrap_environments(src) == r"面积为 $\left( a+b \right)$。"


def test_left_right_inside_math_not_rewrapped():
    src = r"$\left( a \right)$"
    assert wrap_environments(src) == src


def test_left_right_around_environment_wrapped_as_block():
    src = r"矩阵 \left( \begin{pmatrix} a & b \end{pmatrix} \right) 可逆"
    assert wrap_environments(src) == (
        r"矩阵 $$\left( \begin{pmatrix} a & b \end{pmatrix} \right)$$ 可逆"
    )

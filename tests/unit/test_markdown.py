from mathprep.normalization.markdown import format_options, normalize_line_breaks


def test_paren_options_become_list_items():
    assert format_options("(A) 选项一 (B) 选项二") == "- (A) 选项一\n- (B) 选项二"


def test_dot_and_enumeration_comma_options():
    assert format_options("A. 对 B、错") == "- A. 对\n- B. 错"


def test_options_outside_a_to_d_untouched():
    assert format_options("(E) 其他") == "(E) 其他"


def test_single_newline_becomes_hard_break():
    assert normalize_line_breaks("第一行\n第二行\n\n第三段") == "第一行  \n第二行\n\n第三段"


def test_leading_newline_untouched():
    assert normalize_line_breaks("\n- (A) x") == "\n- (A) x"


def test_existing_list_items_not_reformatted():
    text = "- (A) 选项一\n- B. 选项二"
    assert format_options(text) == text


def test_existing_hard_breaks_not_doubled():
    text = "第一行  \n第二行"
    assert normalize_line_breaks(text) == text

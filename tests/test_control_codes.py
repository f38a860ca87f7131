from message_wrap.control_codes import (
    alignment_of,
    extract_control_code,
    has_control_code,
    wrap_with_alignment,
)


def test_extract_prefix_code():
    assert extract_control_code("<center>Hello") == ("<center>", "Hello")


def test_extract_is_case_insensitive():
    assert extract_control_code("<RIGHT>Hello") == ("<RIGHT>", "Hello")


def test_extract_escape_form():
    assert extract_control_code("\\TA[1]Hello") == ("\\TA[1]", "Hello")


def test_extract_first_occurrence_only():
    code, remainder = extract_control_code("aa <left>bb <right>cc")
    assert code == "<left>"
    assert remainder == "aa bb <right>cc"


def test_no_code():
    assert extract_control_code("plain text") == ("", "plain text")
    assert not has_control_code("plain <bold> text")


def test_code_only_line_passes_through(mono10):
    assert wrap_with_alignment("<CENTER>", 10, mono10) == ["<CENTER>"]
    assert wrap_with_alignment("<left>   ", 10, mono10) == ["<left>   "]


def test_code_reattached_to_first_line_only(mono10):
    result = wrap_with_alignment("<center>aaa bbb ccc", 70, mono10)
    assert result == ["<center>aaa bbb", "ccc"]


def test_code_is_not_measured(mono10):
    # "aaa bbb" mesure 70, le code ne compte pas
    assert wrap_with_alignment("<right>aaa bbb", 70, mono10) == ["<right>aaa bbb"]


def test_code_in_the_middle_moves_to_front(mono10):
    assert wrap_with_alignment("aaa <right>bbb", 100, mono10) == ["<right>aaa bbb"]


def test_without_code_behaves_like_wrap(mono20):
    assert wrap_with_alignment("hi there", 100, mono20) == ["hi", "there"]


def test_alignment_of_codes():
    assert alignment_of("<center>") == "center"
    assert alignment_of("<RIGHT>") == "right"
    assert alignment_of("\\TA[1]") == "center"
    assert alignment_of("\\ta[2]") == "right"
    assert alignment_of("<left>") == "left"
    assert alignment_of("") == "left"

from wordfold.core.errors import EmptyExpression, MissingOperand, OperandNotFound, ReduceError
from wordfold.core.reduce.reduce_expression import reduce_expression, strike


def _expect_error(expression: str, cls: type) -> ReduceError:
    try:
        reduce_expression(expression)
        assert False, f"expected {cls.__name__}"
    except cls as e:
        return e


def test_plus_chain_concatenates_without_separator():
    assert reduce_expression("NA + NA + NA + BATMAN") == "NANANABATMAN"
    assert reduce_expression("a + b + c + d + e") == "abcde"


def test_plus_then_minus():
    assert reduce_expression("hello + world - llowo") == "herld"


def test_multi_word_left_operand_minus():
    assert reduce_expression("you know nothing Jon Snow - nothing") == "you know Jon Snow"


def test_minus_removes_first_occurrence_only():
    assert reduce_expression("abab - ab") == "ab"


def test_minus_is_case_sensitive():
    e = _expect_error("Hello - hello", OperandNotFound)
    assert e.code == "E_OPERAND_NOT_FOUND"


def test_minus_is_literal_not_regex():
    assert reduce_expression("a.c+abc - .c+") == "aabc"
    _expect_error("abc - a.c", OperandNotFound)


def test_words_after_step_join_left_operand():
    assert reduce_expression("a + b c - ab") == "c"
    assert reduce_expression("a + b c") == "ab c"


def test_plain_words_pass_through():
    assert reduce_expression("  just   some words ") == "just some words"


def test_empty_expression():
    e = _expect_error("", EmptyExpression)
    assert e.code == "E_EMPTY_EXPRESSION"
    _expect_error("   ", EmptyExpression)


def test_trailing_operator_is_missing_operand():
    e = _expect_error("a -", MissingOperand)
    assert e.code == "E_MISSING_OPERAND"
    assert e.column == 3


def test_leading_and_doubled_operators():
    _expect_error("+ a", MissingOperand)
    e = _expect_error("a + - b", MissingOperand)
    assert e.column == 5


def test_operand_not_found():
    e = _expect_error("abc - xyz", OperandNotFound)
    assert e.column == 7
    assert "xyz" in str(e)
    assert str(e).startswith("abc - xyz:7: E_OPERAND_NOT_FOUND")


def test_errors_share_a_base():
    for expr in ("", "a -", "abc - xyz"):
        _expect_error(expr, ReduceError)


def test_reduce_is_pure():
    expr = "hello + world - llowo + ing - rl"
    first = reduce_expression(expr)
    assert first == "heding"
    assert all(reduce_expression(expr) == first for _ in range(5))


def test_strike_seams():
    assert strike("a b c", "b") == "a c"
    assert strike("a b c", "a") == "b c"
    assert strike("a b c", "c") == "a b"
    assert strike("abc", "abc") == ""
    assert strike("abc", "z") is None


def test_emptied_operand_leaves_no_seam_space():
    assert reduce_expression("x - x") == ""
    assert reduce_expression("x - x y") == "y"
    assert reduce_expression("x - x + y") == "y"
    assert reduce_expression("ab - ab c - c") == ""

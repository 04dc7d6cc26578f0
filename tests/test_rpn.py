import pytest

from ninetools.rpn import RPNError, evaluate, main, validate_expression


def test_evaluate_long_expression():
    assert evaluate("8 9 * 9 - 9 - 9 - 4 - 1 +") == 42


def test_addition_commutes():
    assert evaluate("3 4 +") == evaluate("4 3 +")


def test_division_truncates():
    assert evaluate("7 2 /") == 3


def test_division_truncates_toward_zero():
    assert evaluate("1 8 - 2 /") == -3


@pytest.mark.parametrize("expression", ["0 5 /", "5 0 /"])
def test_division_with_zero_gives_zero(expression):
    assert evaluate(expression) == 0


def test_operator_short_of_operands_keeps_single_value():
    assert evaluate("5 +") == 5


def test_leftover_operands_raise():
    with pytest.raises(RPNError):
        evaluate("1 2")


def test_unknown_character_raises():
    with pytest.raises(RPNError):
        evaluate("(1 + 1)")


def test_validate_accepts():
    assert validate_expression("1 2 +") == "1 2 +"


def test_main_prints_result(capsys):
    assert main(["9 3 - 2 *"]) == 0
    assert capsys.readouterr().out == f"{evaluate('9 3 - 2 *')}\n"


def test_main_argument_count(capsys):
    main([])
    assert capsys.readouterr().err == "Error: Argument not correct\n"


def test_main_invalid_format(capsys):
    main(["1 2"])
    assert capsys.readouterr().err == "Error: FormatInvalid\n"


def test_main_evaluation_error(capsys):
    main(["1 2 + a"])
    captured = capsys.readouterr()
    assert captured.err == "Erreur\n"
    assert captured.out == ""
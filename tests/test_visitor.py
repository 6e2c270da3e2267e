import pytest

from patternday.visitor import Dev, Element, Env, Prod, Qa


@pytest.mark.parametrize("visitor", [Prod(), Dev(), Qa()])
def test_accept_and_print_agree(visitor):
    assert Element().accept(visitor) == Env().print(visitor)


@pytest.mark.parametrize(
    "visitor, name, line",
    [
        (Prod(), "prod", "Env Prod\n"),
        (Dev(), "dev", "Env Dev\n"),
        (Qa(), "qa", "Env Qa\n"),
    ],
)
def test_print_returns_environment_name(capsys, visitor, name, line):
    assert Env().print(visitor) == name
    assert capsys.readouterr().out == line
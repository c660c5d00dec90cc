import pytest

from corekit.pg_query import PlainSql, carry_dao_func, carry_tx_factory, carry_tx_func, table_alias


def test_plain_sql_returns_statement_and_params():
    query = PlainSql("SELECT * FROM t WHERE id = $1 AND x = $2", 7, "a")
    assert query.to_sql() == ("SELECT * FROM t WHERE id = $1 AND x = $2", [7, "a"])


def test_plain_sql_without_params():
    assert PlainSql("SELECT 1").to_sql() == ("SELECT 1", [])


def test_plain_sql_params_are_copied():
    query = PlainSql("SELECT $1", 1)
    _, params = query.to_sql()
    params.append(2)
    assert query.to_sql()[1] == [1]


def test_table_alias():
    assert table_alias("users", "u") == "users AS u"


def test_carry_tx_func_binds_context():
    calls = []

    def dao(ctx, runner):
        calls.append((ctx, runner))
        return "done"

    tx = carry_tx_func("ctx", dao)
    assert tx("runner") == "done"
    assert calls == [("ctx", "runner")]


def test_carry_dao_func_binds_arguments():
    def dao(ctx, runner, a, b):
        return (ctx, runner, a, b)

    carried = carry_dao_func(dao, 1, 2)
    assert carried("ctx", "runner") == ("ctx", "runner", 1, 2)


def test_carry_dao_func_without_arguments():
    carried = carry_dao_func(lambda ctx, runner: (ctx, runner))
    assert carried("c", "r") == ("c", "r")


def test_carry_tx_factory():
    calls = []

    def factory(ctx, a, b, c):
        def run(runner):
            calls.append((ctx, a, b, c, runner))
            return len(calls)

        return run

    carried = carry_tx_factory(factory, "x", "y", "z")
    assert carried("ctx", "runner") == 1
    assert calls == [("ctx", "x", "y", "z", "runner")]


def test_carried_errors_propagate():
    def dao(ctx, runner, value):
        raise ValueError(value)

    with pytest.raises(ValueError, match="boom"):
        carry_dao_func(dao, "boom")("ctx", "runner")
"""Raw SQL queries and helpers that bind arguments to query functions."""

from __future__ import annotations

from typing import Any, Callable


class PlainSql:
    """A literal SQL statement with its positional parameters."""

    def __init__(self, sql: str, *params: Any) -> None:
        self.sql = sql
        self.params = list(params)

    def __repr__(self) -> str:
        return f"PlainSql({self.sql!r}, params={self.params!r})"

    def to_sql(self) -> tuple[str, list[Any]]:
        """The statement and its parameters."""
        return self.sql, list(self.params)


def table_alias(table_name: str, alias: str) -> str:
    """A table reference with an alias, as used in a FROM clause."""
    return f"{table_name} AS {alias}"


def carry_tx_func(ctx: Any, f: Callable[[Any, Any], Any]) -> Callable[[Any], Any]:
    """Bind ``ctx`` so the result only needs the query runner."""

    def run(runner: Any) -> Any:
        return f(ctx, runner)

    return run


def carry_dao_func(f: Callable[..., Any], *args: Any) -> Callable[[Any, Any], Any]:
    """Bind trailing arguments of ``f(ctx, runner, *args)``."""

    def run(ctx: Any, runner: Any) -> Any:
        return f(ctx, runner, *args)

    return run


def carry_tx_factory(f: Callable[..., Callable[[Any], Any]], *args: Any) -> Callable[[Any, Any], Any]:
    """Adapt ``f(ctx, *args)(runner)`` to the ``(ctx, runner)`` calling form."""

    def run(ctx: Any, runner: Any) -> Any:
        return f(ctx, *args)(runner)

    return run
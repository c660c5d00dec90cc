"""Connection settings for a PostgreSQL database."""

from __future__ import annotations

from dataclasses import dataclass


def _join_host_port(host: str, port: int) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


@dataclass
class DatabaseConfig:
    """Where and how to connect, and how large the pool may grow."""

    name: str = ""
    host: str = ""
    port: int = 0
    user: str = ""
    password: str = ""
    database: str = ""
    schema: str = ""
    pool_max: int = 0
    app_name: str = ""
    connection_timeout: int = 0

    def dsn(self) -> str:
        """The connection settings as a ``postgres://`` URL."""
        return (
            f"postgres://{self.user}:{self.password}@"
            f"{_join_host_port(self.host, self.port)}/{self.database}"
            f"?application_name={self.app_name}"
            f"&search_path={self.schema}"
            f"&connect_timeout={self.connection_timeout}"
        )

    def params_url(self) -> str:
        """The connection settings as space-separated ``key=value`` pairs."""
        return (
            f"host={self.host} port={self.port} dbname={self.database} "
            f"user={self.user} password={self.password} "
            f"application_name={self.app_name} search_path={self.schema} sslmode=disable"
        )
"""Options describing how a database context reaches its backing store.

``DbContextOptions`` is the explicit configuration handed to
``ApplicationDbContext`` and ``DbContextFactory``. It validates itself on
construction, so a context never starts acquiring resources with options
that cannot work.

Connection strings are accepted in two shapes:

- URLs: ``sqlite:///data/app.db``, ``postgresql://user:pw@host/db``
- Key/value pairs: ``Data Source=app.db`` or
  ``Host=db;Port=5432;Database=app;Username=app;Password=secret``

For SQLite, ``":memory:"`` selects a private in-memory database and any
other plain string is treated as a file path. Whatever the input, the
resulting URL always targets the async driver of the provider
(``aiosqlite`` or ``asyncpg``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from asp_data.exceptions import ConfigurationError

if TYPE_CHECKING:
    from asp_config import Settings

SQLITE = "sqlite"
POSTGRESQL = "postgresql"
SUPPORTED_PROVIDERS = (SQLITE, POSTGRESQL)

SQLITE_DRIVER = "sqlite+aiosqlite"
POSTGRESQL_DRIVER = "postgresql+asyncpg"
IN_MEMORY = ":memory:"

_PROVIDER_ALIASES = {
    "sqlite": SQLITE,
    "postgresql": POSTGRESQL,
    "postgres": POSTGRESQL,
    "npgsql": POSTGRESQL,
}

_SQLITE_PATH_KEYS = ("datasource", "filename")

# Key/value aliases seen in ADO.NET/Npgsql style connection strings
_POSTGRES_KEYS = {
    "host": "host",
    "server": "host",
    "port": "port",
    "database": "database",
    "initialcatalog": "database",
    "username": "username",
    "userid": "username",
    "user": "username",
    "uid": "username",
    "password": "password",
    "pwd": "password",
}


_FLAG = TypeAdapter(bool)


def _parse_flag(name: str, value: Any) -> bool:
    """Parse a boolean option like settings do: ``"false"``, ``0`` and ``"off"`` are False."""
    try:
        return _FLAG.validate_python(value)
    except ValidationError as e:
        msg = f"Database option {name!r} must be a boolean, got {value!r}"
        raise ConfigurationError(msg) from e


def _parse_key_values(connection_string: str) -> dict[str, str]:
    """Split ``Key=Value;Key=Value`` into a dict with normalized keys."""
    values: dict[str, str] = {}
    for index, segment in enumerate(connection_string.split(";")):
        segment = segment.strip()
        if not segment:
            continue
        if "=" not in segment:
            msg = f"Malformed connection string: segment {index} is not a key=value pair"
            raise ConfigurationError(msg)
        key, value = segment.split("=", 1)
        normalized = key.strip().lower().replace(" ", "").replace("_", "")
        if not normalized:
            msg = f"Malformed connection string: segment {index} has an empty key"
            raise ConfigurationError(msg)
        values[normalized] = value.strip()
    return values


def _parse_url(connection_string: str) -> URL:
    try:
        return make_url(connection_string)
    except (ArgumentError, ValueError) as e:
        msg = "Malformed database URL in connection string"
        raise ConfigurationError(msg) from e


def _sqlite_url(connection_string: str) -> URL:
    if connection_string == IN_MEMORY:
        return URL.create(SQLITE_DRIVER, database=IN_MEMORY)

    if "://" in connection_string:
        url = _parse_url(connection_string)
        if url.get_backend_name() != SQLITE:
            msg = "Connection string is not a SQLite URL"
            raise ConfigurationError(msg)
        return url.set(drivername=SQLITE_DRIVER)

    path = connection_string
    if "=" in connection_string:
        values = _parse_key_values(connection_string)
        path = next((values[k] for k in _SQLITE_PATH_KEYS if values.get(k)), "")
        if not path:
            msg = "SQLite connection string needs a 'Data Source'"
            raise ConfigurationError(msg)

    return URL.create(SQLITE_DRIVER, database=path)


def _postgresql_url(connection_string: str) -> URL:
    if "://" in connection_string:
        url = _parse_url(connection_string)
        if url.drivername.split("+")[0] not in ("postgres", "postgresql"):
            msg = "Connection string is not a PostgreSQL URL"
            raise ConfigurationError(msg)
        url = url.set(drivername=POSTGRESQL_DRIVER)
    else:
        values = _parse_key_values(connection_string)
        parts: dict[str, Any] = {}
        for key, value in values.items():
            target = _POSTGRES_KEYS.get(key)
            if target and value:
                parts[target] = value

        if "port" in parts:
            try:
                parts["port"] = int(parts["port"])
            except ValueError as e:
                msg = f"Invalid port in connection string: {parts['port']!r}"
                raise ConfigurationError(msg) from e

        url = URL.create(POSTGRESQL_DRIVER, **parts)

    if not url.host:
        msg = "PostgreSQL connection string needs a host"
        raise ConfigurationError(msg)
    if not url.database:
        msg = "PostgreSQL connection string needs a database"
        raise ConfigurationError(msg)
    return url


@dataclass(frozen=True)
class DbContextOptions:
    """Validated, immutable database context options.

    Attributes
    ----------
    provider
        ``"sqlite"`` or ``"postgresql"`` (case-insensitive; ``postgres`` and
        ``npgsql`` are accepted as aliases)
    connection_string
        URL or key/value connection string, see module docstring
    echo
        Log every SQL statement through the ``sqlalchemy.engine`` logger
    pool_pre_ping
        Test pooled connections before handing them out
    expire_on_commit
        Expire loaded entities after ``save_changes``

    Raises
    ------
    ConfigurationError
        If the provider is unknown or the connection string is blank or
        cannot be parsed
    """

    provider: str
    connection_string: str = field(repr=False)
    echo: bool = False
    pool_pre_ping: bool = True
    expire_on_commit: bool = False
    _url: URL = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.provider, str) or not self.provider.strip():
            msg = "Database provider is required"
            raise ConfigurationError(msg)

        provider = _PROVIDER_ALIASES.get(self.provider.strip().lower())
        if provider is None:
            supported = ", ".join(SUPPORTED_PROVIDERS)
            msg = f"Unsupported database provider {self.provider!r} (supported: {supported})"
            raise ConfigurationError(msg)

        if not isinstance(self.connection_string, str):
            msg = "Connection string must be a string"
            raise ConfigurationError(msg)

        connection_string = self.connection_string.strip()
        if not connection_string:
            msg = "Connection string cannot be empty"
            raise ConfigurationError(msg)

        if provider == SQLITE:
            url = _sqlite_url(connection_string)
        else:
            url = _postgresql_url(connection_string)

        # Frozen dataclass: write the normalized values directly
        object.__setattr__(self, "provider", provider)
        object.__setattr__(self, "connection_string", connection_string)
        object.__setattr__(self, "_url", url)

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL targeting the provider's async driver."""
        return self._url

    @property
    def display_url(self) -> str:
        """Database URL with the password masked, safe for log output."""
        return self._url.render_as_string(hide_password=True)

    @property
    def is_sqlite(self) -> bool:
        return self.provider == SQLITE

    @property
    def is_in_memory(self) -> bool:
        """True for a SQLite database that only lives in memory."""
        if not self.is_sqlite:
            return False
        return self._url.database in (None, "", IN_MEMORY) or (
            self._url.query.get("mode") == "memory"
        )

    @classmethod
    def for_sqlite(
        cls,
        connection_string: str = IN_MEMORY,
        **kwargs: Any,
    ) -> DbContextOptions:
        return cls(provider=SQLITE, connection_string=connection_string, **kwargs)

    @classmethod
    def for_postgresql(cls, connection_string: str, **kwargs: Any) -> DbContextOptions:
        return cls(provider=POSTGRESQL, connection_string=connection_string, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> DbContextOptions:
        """Build options from a plain mapping.

        Accepts snake_case keys as well as the camelCase spelling used in
        JSON configuration files (``connectionString``, ``poolPrePing``,
        ``expireOnCommit``).
        """
        if not isinstance(values, Mapping):
            msg = "Database options must be a mapping"
            raise ConfigurationError(msg)

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in values:
                    return values[key]
            return default

        provider = pick("provider", "Provider")
        connection_string = pick(
            "connection_string",
            "connectionString",
            "ConnectionString",
        )
        if provider is None:
            msg = "Database options are missing 'provider'"
            raise ConfigurationError(msg)
        if connection_string is None:
            msg = "Database options are missing 'connection_string'"
            raise ConfigurationError(msg)

        return cls(
            provider=provider,
            connection_string=connection_string,
            echo=_parse_flag("echo", pick("echo", default=False)),
            pool_pre_ping=_parse_flag(
                "pool_pre_ping",
                pick("pool_pre_ping", "poolPrePing", default=True),
            ),
            expire_on_commit=_parse_flag(
                "expire_on_commit",
                pick("expire_on_commit", "expireOnCommit", default=False),
            ),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> DbContextOptions:
        return cls(
            provider=settings.database_provider,
            connection_string=settings.database_connection_string,
            echo=settings.database_echo,
            pool_pre_ping=settings.database_pool_pre_ping,
        )


def coerce_options(value: object) -> DbContextOptions:
    """Return ``value`` as ``DbContextOptions``.

    Accepts an options instance or a mapping understood by
    ``DbContextOptions.from_mapping``.

    Raises
    ------
    ConfigurationError
        If ``value`` is None or of any other type
    """
    if value is None:
        msg = "Database context options are required"
        raise ConfigurationError(msg)
    if isinstance(value, DbContextOptions):
        return value
    if isinstance(value, Mapping):
        return DbContextOptions.from_mapping(value)

    msg = f"Unsupported database context options type: {type(value).__name__}"
    raise ConfigurationError(msg)

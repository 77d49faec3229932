"""Exceptions for tmplscope.

Exception Hierarchy:
IntrospectionError (base, tagged with an ErrorKind)
└── AliasCycleError           # Alias table expands into itself

The introspection walk itself is total: malformed identifiers and unknown
aliases degrade to literal output. Errors come from the surrounding
plumbing (serializing or writing a result) and from cyclic alias tables.

Example:
    ```
    TS-CYC-001: Alias cycle while expanding 'item': item -> item
      Docs: https://tmplscope.readthedocs.io/en/latest/errors/#ts-cyc-001
    ```

"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

_TMPLSCOPE_DOCS_BASE = "https://tmplscope.readthedocs.io/en/latest/errors"


class ErrorKind(Enum):
    """Kind of an IntrospectionError, with a searchable code.

    Format: TS-{CATEGORY}-{NUMBER}
    """

    MSG = "TS-MSG-001"
    JSON = "TS-SER-001"
    IO = "TS-IO-001"
    ALIAS_CYCLE = "TS-CYC-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error kind."""
        anchor = self.value.lower()
        return f"{_TMPLSCOPE_DOCS_BASE}/#{anchor}"

    @property
    def category(self) -> str:
        """Error category (e.g., 'message', 'serialization', 'io')."""
        prefix = self.value.split("-")[1]
        return {
            "MSG": "message",
            "SER": "serialization",
            "IO": "io",
            "CYC": "alias",
        }.get(prefix, "unknown")


class IntrospectionError(Exception):
    """Base exception for all tmplscope errors.

    Use the ``msg``, ``json`` and ``io_error`` constructors rather than
    building instances by hand; they set ``kind`` and chain the cause.

    Attributes:
        kind: ErrorKind identifying the failure.
        message: Human-readable message (MSG and JSON kinds).
        io_kind: For IO errors, the category of the failure (the OSError
            subclass name such as ``"FileNotFoundError"``). The native
            exception stays reachable through ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.MSG,
        io_kind: str | None = None,
    ):
        self.message = message
        self.kind = kind
        self.io_kind = io_kind
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.kind is ErrorKind.IO:
            return f"Io error while writing introspection to output: {self.io_kind}"
        return self.message

    @classmethod
    def msg(cls, value: object) -> IntrospectionError:
        """Create a generic error from any value."""
        return cls(str(value))

    @classmethod
    def json(cls, error: Exception) -> IntrospectionError:
        """Create a serialization error wrapping ``error``."""
        err = cls(str(error), kind=ErrorKind.JSON)
        err.__cause__ = error
        return err

    @classmethod
    def io_error(cls, error: OSError) -> IntrospectionError:
        """Create an IO error carrying the category of ``error``."""
        err = cls(str(error), kind=ErrorKind.IO, io_kind=type(error).__name__)
        err.__cause__ = error
        return err

    def format_compact(self) -> str:
        """Format error as a short diagnostic with its code and docs link.

        Format::

            TS-CYC-001: Alias cycle while expanding 'item': item -> item
              Docs: https://tmplscope.readthedocs.io/en/latest/errors/#ts-cyc-001

        Returns:
            Two-line string with the error code, message and docs URL.
        """
        header = str(self)
        code = self.kind.value
        if code not in header:
            header = f"{code}: {header}"
        return f"{header}\n  Docs: {self.kind.docs_url}"


class AliasCycleError(IntrospectionError):
    """Alias expansion revisited a name it already substituted.

    Raised in strict mode when a binding (directly or through other
    aliases) expands to a path starting with itself, e.g.
    ``{% for item in item.children %}``.

    Attributes:
        chain: Alias names in the order they were substituted, ending with
            the repeated name.
    """

    def __init__(self, chain: Sequence[str]):
        self.chain = tuple(chain)
        message = f"Alias cycle while expanding {self.chain[0]!r}: " + " -> ".join(self.chain)
        super().__init__(message, kind=ErrorKind.ALIAS_CYCLE)

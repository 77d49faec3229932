"""Introspection result record.

One TemplateIntrospection is produced per walked node sequence and merged
into its parent's, so the root instance holds everything the template
references.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, TextIO

from tmplscope.analysis.config import DEFAULT_CONFIG
from tmplscope.errors import IntrospectionError

_FIELDS = ("extends", "includes", "macros", "idents")


@dataclass(slots=True)
class TemplateIntrospection:
    """Dependencies and data references of a template.

    Attributes:
        extends: Parent template names (at most one in practice).
        includes: Included template names.
        macros: Imported macro file names.
        idents: Alias-expanded identifier paths read by the template,
            e.g. ``"data.rows"`` and ``"data.rows().name"``.
        call_marker: Loop call marker the idents were built with, used to
            recover root names. Not part of equality or serialization.

    Sets dedupe by value; ordering is not meaningful.
    """

    extends: set[str] = field(default_factory=set)
    includes: set[str] = field(default_factory=set)
    macros: set[str] = field(default_factory=set)
    idents: set[str] = field(default_factory=set)
    call_marker: str = field(default=DEFAULT_CONFIG.call_marker, compare=False, repr=False)

    def merge(self, other: TemplateIntrospection) -> None:
        """Union ``other`` into this record in place."""
        self.extends |= other.extends
        self.includes |= other.includes
        self.macros |= other.macros
        self.idents |= other.idents

    def is_empty(self) -> bool:
        return not (self.extends or self.includes or self.macros or self.idents)

    def required_context(self) -> frozenset[str]:
        """Get the top-level context names the template reads.

        Example:
            >>> result.idents
            {'data.rows', 'data.rows().name', 'config.title'}
            >>> result.required_context()
            frozenset({'data', 'config'})
        """
        names = set()
        for ident in self.idents:
            head = ident.split(".", 1)[0]
            if self.call_marker:
                head = head.removesuffix(self.call_marker)
            names.add(head)
        return frozenset(names)

    def validate_context(self, context: Mapping[str, Any]) -> list[str]:
        """Check a context mapping for top-level names the template reads.

        Only top-level names are checked: ``page.title`` requires ``page``
        but nothing is verified about its attributes.

        Returns:
            Missing names, sorted alphabetically.
        """
        missing = self.required_context() - context.keys()
        return sorted(missing)

    def to_dict(self) -> dict[str, list[str]]:
        """Convert to a plain dict of sorted string lists."""
        return {name: sorted(getattr(self, name)) for name in _FIELDS}

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], *, call_marker: str = DEFAULT_CONFIG.call_marker
    ) -> TemplateIntrospection:
        """Build a record from ``to_dict()`` output. Missing fields are empty.

        Raises:
            IntrospectionError: A field is present but is not a list (kind MSG).
        """
        fields: dict[str, set[str]] = {}
        for name in _FIELDS:
            values = data.get(name, [])
            if not isinstance(values, list):
                raise IntrospectionError.msg(
                    f"Expected a list for introspection field {name!r}, "
                    f"got {type(values).__name__}"
                )
            fields[name] = {str(v) for v in values}
        return cls(**fields, call_marker=call_marker)

    def to_json(self, **kwargs: Any) -> str:
        """Serialize to a JSON object with four array fields.

        Keyword arguments are passed to ``json.dumps``.

        Raises:
            IntrospectionError: Serialization failed (kind JSON).
        """
        try:
            return json.dumps(self.to_dict(), **kwargs)
        except (TypeError, ValueError) as e:
            raise IntrospectionError.json(e) from e

    @classmethod
    def from_json(cls, text: str) -> TemplateIntrospection:
        """Parse a record previously written by ``to_json()``.

        Raises:
            IntrospectionError: The text is not valid JSON (kind JSON) or
                is not a JSON object with list fields (kind MSG).
        """
        try:
            data = json.loads(text)
        except ValueError as e:
            raise IntrospectionError.json(e) from e
        if not isinstance(data, dict):
            raise IntrospectionError.msg(
                f"Expected a JSON object for introspection, got {type(data).__name__}"
            )
        return cls.from_dict(data)

    def dump(self, fp: TextIO, **kwargs: Any) -> None:
        """Write the JSON form to a text stream.

        Raises:
            IntrospectionError: Serialization (kind JSON) or writing
                (kind IO) failed.
        """
        text = self.to_json(**kwargs)
        try:
            fp.write(text)
        except OSError as e:
            raise IntrospectionError.io_error(e) from e

    def save(self, path: str | PathLike[str], **kwargs: Any) -> None:
        """Write the JSON form to ``path``, replacing any existing file."""
        text = self.to_json(**kwargs)
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError as e:
            raise IntrospectionError.io_error(e) from e

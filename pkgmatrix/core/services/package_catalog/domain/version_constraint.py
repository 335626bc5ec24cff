"""
L1 Domain — Version constraint evaluation (pure).

Evaluates version-range expressions such as ``>=22.04`` or
``>=20.04, != 24.10`` against a concrete OS version. The sentinel
``Common`` always matches.
No I/O, no subprocess.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from pkgmatrix.core.services.package_catalog.domain.errors import (
    ConstraintParseError,
    VersionParseError,
)

# Constraint key for entries that apply to every version.
COMMON = "Common"

_VERSION_RE = re.compile(
    r"^v?(?P<segments>\d+(?:\.\d+)*)"
    r"(?:-(?P<pre>[0-9A-Za-z.~-]+))?"
    r"(?:\+(?P<meta>[0-9A-Za-z.~-]+))?$"
)

# Longest operators first so ">=" is not read as ">".
_CLAUSE_RE = re.compile(r"^\s*(?P<op>~>|>=|<=|!=|==|=|>|<)?\s*(?P<version>\S+)\s*$")

# Versions compare on at least this many segments.
_MIN_SEGMENTS = 3


# Alphanumeric prerelease identifier: leading text, optional number, rest.
_IDENT_RE = re.compile(r"^(\D*)(\d*)(.*)$")


def _prerelease_key(prerelease: str) -> tuple:
    # Dot-separated identifiers. Numbers compare numerically and sort
    # before text, so rc.2 < rc.10, rc2 < rc10 and 1 < alpha.
    key = []
    for ident in prerelease.split("."):
        if ident.isdigit():
            key.append((0, "", int(ident), ""))
            continue
        head, digits, tail = _IDENT_RE.match(ident).groups()
        key.append((1, head, int(digits) if digits else -1, tail))
    return tuple(key)


def _pad(segments: tuple[int, ...], length: int) -> tuple[int, ...]:
    return segments + (0,) * (length - len(segments))


@dataclass(frozen=True)
class Version:
    """A parsed dotted version.

    ``segments`` is zero-padded to three entries. Trailing zero segments
    never affect ordering, so ``24.10``, ``24.10.0`` and ``24.10.0.0``
    compare equal. ``precision`` remembers how many segments were
    written, which the ``~>`` operator needs.
    """

    segments: tuple[int, ...]
    prerelease: str = ""
    precision: int = _MIN_SEGMENTS
    original: str = ""

    @property
    def release(self) -> tuple[int, ...]:
        """Segments without trailing zeros."""
        segs = list(self.segments)
        while segs and segs[-1] == 0:
            segs.pop()
        return tuple(segs)

    def _key(self) -> tuple:
        # A release sorts after any of its prereleases.
        if not self.prerelease:
            return (self.release, True, ())
        return (self.release, False, _prerelease_key(self.prerelease))

    def __lt__(self, other: Version) -> bool:
        return self._key() < other._key()

    def __le__(self, other: Version) -> bool:
        return self._key() <= other._key()

    def __gt__(self, other: Version) -> bool:
        return self._key() > other._key()

    def __ge__(self, other: Version) -> bool:
        return self._key() >= other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.original or ".".join(str(s) for s in self.segments)


def parse_version(text: str) -> Version:
    """Parse a dotted version such as ``24.04``, ``13`` or ``v1.2.3-rc1``.

    Raises:
        VersionParseError: Anything else, including the empty string.
    """
    if not isinstance(text, str):
        raise VersionParseError(str(text), "not a string")
    m = _VERSION_RE.match(text.strip())
    if not m:
        raise VersionParseError(text)
    parts = [int(p) for p in m.group("segments").split(".")]
    precision = len(parts)
    while len(parts) < _MIN_SEGMENTS:
        parts.append(0)
    return Version(
        segments=tuple(parts),
        prerelease=m.group("pre") or "",
        precision=precision,
        original=text.strip(),
    )


@dataclass(frozen=True)
class Clause:
    """One ``<op> <version>`` term of a constraint.

    Ordering clauses follow the usual prerelease rule: a reference
    without a prerelease never matches a prerelease version, and a
    reference with one only matches prereleases of the same release.
    """

    op: str
    version: Version

    def _prerelease_ok(self, version: Version) -> bool:
        ref = self.version
        if version.prerelease and ref.prerelease:
            return version.release == ref.release
        return not version.prerelease

    def check(self, version: Version) -> bool:
        ref = self.version
        if self.op == "=":
            return version == ref
        if self.op == "!=":
            return version != ref
        if not self._prerelease_ok(version):
            return False
        if self.op == ">":
            return version > ref
        if self.op == "<":
            return version < ref
        if self.op == ">=":
            return version >= ref
        if self.op == "<=":
            return version <= ref
        # "~>": at least ref, and every written segment but the last is fixed
        if ref.prerelease and not version.prerelease:
            return False
        if version < ref:
            return False
        fixed = max(ref.precision - 1, 1)
        return _pad(version.segments, fixed)[:fixed] == _pad(ref.segments, fixed)[:fixed]

    def __str__(self) -> str:
        return f"{self.op}{self.version}"


@dataclass(frozen=True)
class Constraint:
    """A comma-conjoined list of clauses; all must hold."""

    text: str
    clauses: tuple[Clause, ...]

    def check(self, version: Version) -> bool:
        return all(c.check(version) for c in self.clauses)

    def __str__(self) -> str:
        return self.text


@lru_cache(maxsize=256)
def parse_constraint(text: str) -> Constraint:
    """Parse a constraint expression like ``>=20.04, != 24.10``.

    A clause without an operator means exact equality (``24.10``).

    Raises:
        ConstraintParseError: Empty clause, unknown operator or a version
            that does not parse.
    """
    if not isinstance(text, str) or not text.strip():
        raise ConstraintParseError(str(text), "empty constraint")

    clauses: list[Clause] = []
    for raw in text.split(","):
        if not raw.strip():
            raise ConstraintParseError(text, "empty clause")
        m = _CLAUSE_RE.match(raw)
        if not m:
            raise ConstraintParseError(text, f"cannot parse clause {raw.strip()!r}")
        op = m.group("op") or "="
        if op == "==":
            op = "="
        try:
            ref = parse_version(m.group("version"))
        except VersionParseError as exc:
            raise ConstraintParseError(text, str(exc)) from exc
        clauses.append(Clause(op=op, version=ref))

    return Constraint(text=text, clauses=tuple(clauses))


def is_common(constraint: str) -> bool:
    """Is this the unconditional sentinel key?"""
    return constraint == COMMON


def constraint_matches(constraint: str, version: Version | str) -> bool:
    """Check a constraint key against a concrete version.

    Args:
        constraint: ``COMMON`` or a range expression.
        version: A parsed ``Version`` or a version string.

    Returns:
        ``True`` for ``COMMON``; otherwise whether every clause holds.

    Raises:
        ConstraintParseError: Malformed constraint.
        VersionParseError: ``version`` is a string that does not parse.
    """
    if is_common(constraint):
        return True
    parsed = parse_constraint(constraint)
    if isinstance(version, str):
        version = parse_version(version)
    return parsed.check(version)

"""
Cookie Store
============

The ``CookieStore`` interface the signing layer wraps, and ``CookieJar``, an
in-memory implementation that tracks changes.

A jar keeps two collections:

- *original* cookies, seeded from a received request with ``add_original``;
- the *delta*, every change made since (``add`` and ``remove``).

``delta()`` is what a response needs to send back: added cookies, and removal
cookies for originals that were removed.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple, Union

if TYPE_CHECKING:
    from .jar import SignedJar
    from .key import Key

logger = logging.getLogger(__name__)

CookieId = Tuple[str, Optional[str], Optional[str]]


@dataclass(frozen=True)
class Cookie:
    """A cookie name/value pair with the attributes that define its identity."""

    name: str
    value: str = ""
    path: Optional[str] = None
    domain: Optional[str] = None
    max_age: Optional[int] = None

    @classmethod
    def named(cls, name: str) -> "Cookie":
        """A cookie with an empty value, for removal by name."""
        return cls(name)

    @property
    def identity(self) -> CookieId:
        """The (name, path, domain) triple used to match cookies."""
        return (self.name, self.path, self.domain)

    def with_value(self, value: str) -> "Cookie":
        return replace(self, value=value)

    def make_removal(self) -> "Cookie":
        """The cookie that instructs a client to delete this one."""
        return replace(self, value="", max_age=0)


class CookieStore(ABC):
    """
    Capability interface for the key-value store behind a signed jar.

    Read access is ``get``; write access is ``add``, ``add_original`` and
    ``remove``.
    """

    @abstractmethod
    def get(self, name: str) -> Optional[Cookie]:
        """
        Get the live cookie named ``name``.

        Returns:
            The cookie, or None if not present
        """
        pass

    @abstractmethod
    def add(self, cookie: Cookie):
        """Add ``cookie``, recording the change."""
        pass

    @abstractmethod
    def add_original(self, cookie: Cookie):
        """Add ``cookie`` without recording a change."""
        pass

    @abstractmethod
    def remove(self, cookie: Cookie):
        """Remove the cookie with the same identity as ``cookie``."""
        pass


class _DeltaEntry:
    __slots__ = ("cookie", "removed")

    def __init__(self, cookie: Cookie, removed: bool = False):
        self.cookie = cookie
        self.removed = removed


class CookieJar(CookieStore):
    """
    In-memory cookie store with change tracking.

    Not synchronized: callers sharing a jar across threads must serialize
    mutations themselves.
    """

    def __init__(self):
        self._original: Dict[CookieId, Cookie] = {}
        self._delta: Dict[CookieId, _DeltaEntry] = {}

    def get(self, name: str) -> Optional[Cookie]:
        for entry in self._delta.values():
            if entry.cookie.name == name and not entry.removed:
                return entry.cookie

        for cookie_id, cookie in self._original.items():
            if cookie.name == name and cookie_id not in self._delta:
                return cookie

        return None

    def add(self, cookie: Cookie):
        self._delta[cookie.identity] = _DeltaEntry(cookie)
        logger.debug(f"Added cookie {cookie.name!r}")

    def add_original(self, cookie: Cookie):
        """
        Seed the jar with a cookie received from a client.

        For accurate ``delta`` results, do not call this after ``remove``.
        """
        self._original[cookie.identity] = cookie
        logger.debug(f"Added original cookie {cookie.name!r}")

    def remove(self, cookie: Cookie):
        """
        Remove ``cookie``.

        If an original cookie with the same identity exists, a removal cookie
        is recorded in the delta. Otherwise any pending delta entry is dropped.
        For correct removal, ``cookie`` must carry the same path and domain as
        the cookie that was set.
        """
        cookie_id = cookie.identity
        if cookie_id in self._original:
            self._delta[cookie_id] = _DeltaEntry(cookie.make_removal(), removed=True)
            logger.debug(f"Recorded removal of original cookie {cookie.name!r}")
        else:
            self._delta.pop(cookie_id, None)
            logger.debug(f"Dropped cookie {cookie.name!r}")

    def delta(self) -> List[Cookie]:
        """All changes since the jar was seeded, including removal cookies."""
        return [entry.cookie for entry in self._delta.values()]

    def reset_delta(self):
        """Forget all changes, restoring the jar to its original cookies."""
        self._delta.clear()

    def __iter__(self) -> Iterator[Cookie]:
        for entry in self._delta.values():
            if not entry.removed:
                yield entry.cookie

        for cookie_id, cookie in self._original.items():
            if cookie_id not in self._delta:
                yield cookie

    def iter(self) -> Iterator[Cookie]:
        return iter(self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def signed(self, key: Union["Key", bytes]) -> "SignedJar":
        """Return a signed view over this jar."""
        from .jar import SignedJar

        return SignedJar(self, key)

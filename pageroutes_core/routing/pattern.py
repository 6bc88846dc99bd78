"""Pattern Compiler - Path patterns to matchers and reverse templaters.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Supported syntax:
- Literals: /users
- Named parameters: /users/:id
- Custom sub-patterns: /users/:id(\\d+)
- Unnamed captures: /files/(.*)
- Wildcard: /static/*
- Modifiers: ? (optional), + (one or more), * (zero or more)
- Escapes: /a\\:b matches the literal "/a:b"
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union

from pageroutes_core.errors import MissingParameterError, PatternError
from pageroutes_core.routing.querystring import (
    COMPONENT_SAFE,
    WILDCARD_SAFE,
    encode_component,
)

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "/"

_TOKEN_RE = re.compile(
    # Escaped character
    r"(\\.)"
    # Optional prefix, then ":name(pattern)", "(pattern)" or "*"
    r"|([/.])?(?:(?::(\w+)(?:\(((?:\\.|[^\\()])+)\))?|\(((?:\\.|[^\\()])+)\))([+*?])?|(\*))"
)

_GROUP_ESCAPE_RE = re.compile(r"([=!:$/()])")


@dataclass(frozen=True)
class Token:
    """A capture in a parsed pattern.

    Named tokens carry a string name; unnamed captures are numbered by
    position among the unnamed ones.
    """

    name: Union[str, int]
    prefix: str
    delimiter: str
    optional: bool
    repeat: bool
    partial: bool
    asterisk: bool
    pattern: str

    @property
    def named(self) -> bool:
        """Check if the token is bound to a parameter name."""
        return isinstance(self.name, str)


PatternPart = Union[str, Token]


def _escape_group(group: str) -> str:
    return _GROUP_ESCAPE_RE.sub(r"\\\1", group)


def parse(pattern: str) -> List[PatternPart]:
    """Parse a pattern string into literal strings and tokens.

    Raises:
        PatternError: On unbalanced parentheses or duplicate names
    """
    tokens: List[PatternPart] = []
    names = set()
    key = 0
    index = 0
    path = ""

    for res in _TOKEN_RE.finditer(pattern):
        raw = pattern[index:res.start()]
        if "(" in raw or ")" in raw:
            raise PatternError(pattern, "unbalanced parenthesis")
        path += raw
        index = res.end()

        escaped = res.group(1)
        if escaped:
            path += escaped[1]
            continue

        prefix, name, capture, group, modifier, asterisk = res.group(2, 3, 4, 5, 6, 7)
        following = pattern[index] if index < len(pattern) else None

        if path:
            tokens.append(path)
            path = ""

        if name is None:
            name = key
            key += 1
        elif name in names:
            raise PatternError(pattern, f'duplicate parameter "{name}"')
        else:
            names.add(name)

        delimiter = prefix or DEFAULT_DELIMITER
        sub_pattern = capture or group
        if sub_pattern:
            sub_pattern = _escape_group(sub_pattern)
        elif asterisk:
            sub_pattern = ".*"
        else:
            sub_pattern = f"[^{re.escape(delimiter)}]+?"

        tokens.append(
            Token(
                name=name,
                prefix=prefix or "",
                delimiter=delimiter,
                optional=modifier in ("?", "*"),
                repeat=modifier in ("+", "*"),
                partial=prefix is not None and following is not None and following != prefix,
                asterisk=bool(asterisk),
                pattern=sub_pattern,
            )
        )

    raw = pattern[index:]
    if "(" in raw or ")" in raw:
        raise PatternError(pattern, "unbalanced parenthesis")
    path += raw
    if path:
        tokens.append(path)

    return tokens


def _tokens_to_regex(tokens: List[PatternPart], strict: bool, end: bool) -> str:
    delimiter = re.escape(DEFAULT_DELIMITER)
    route = ""

    for token in tokens:
        if isinstance(token, str):
            route += re.escape(token)
            continue

        prefix = re.escape(token.prefix)
        capture = f"(?:{token.pattern})"
        if token.repeat:
            capture += f"(?:{prefix}{capture})*"

        if token.optional:
            if not token.partial:
                capture = f"(?:{prefix}({capture}))?"
            else:
                capture = f"{prefix}({capture})?"
        else:
            capture = f"{prefix}({capture})"

        route += capture

    ends_with_delimiter = route.endswith(delimiter)

    if not strict:
        if ends_with_delimiter:
            route = route[: -len(delimiter)]
        route += f"(?:{delimiter}(?=\\Z))?"

    if end:
        route += "\\Z"
    elif not (strict and ends_with_delimiter):
        route += f"(?={delimiter}|\\Z)"

    return "^" + route


class CompiledPattern:
    """Forward matcher and reverse templater for one pattern.

    Both directions are built from the same token list, so the keys a
    match extracts are exactly the keys the templater consumes.

    Usage:
        compiled = compile_pattern("/users/:id/:tab?")
        compiled.match("/users/42")      # ("42", None)
        compiled.param_keys              # ("id", "tab")
        compiled.to_path({"id": 7})      # "/users/7"
    """

    def __init__(
        self,
        pattern: str,
        sensitive: bool = False,
        strict: bool = False,
        end: bool = True,
    ):
        self.pattern = pattern
        self.tokens: Tuple[PatternPart, ...] = tuple(parse(pattern))
        self.keys: Tuple[Token, ...] = tuple(
            token for token in self.tokens if isinstance(token, Token)
        )
        self.param_keys: Tuple[str, ...] = tuple(
            token.name for token in self.keys if token.named
        )

        flags = 0 if sensitive else re.IGNORECASE
        try:
            self.regex = re.compile(_tokens_to_regex(list(self.tokens), strict, end), flags)
            self._segment_regexes = {
                i: re.compile(f"(?:{token.pattern})", flags)
                for i, token in enumerate(self.tokens)
                if isinstance(token, Token)
            }
        except re.error as e:
            raise PatternError(pattern, str(e)) from e

        logger.debug(f"Compiled pattern {pattern!r} -> {self.regex.pattern!r}")

    def match(self, path: str) -> Optional[Tuple[Optional[str], ...]]:
        """Match a pathname.

        Returns:
            Raw captured values by position (None for absent optional
            captures), or None if the path does not match
        """
        result = self.regex.match(path)
        if result is None:
            return None
        return result.groups()

    def to_path(self, params: Optional[Mapping[Any, Any]] = None) -> str:
        """Substitute parameter values into the pattern.

        Args:
            params: Parameter values by name. Sequence values are only
                accepted for repeated (+ or *) parameters.

        Returns:
            The substituted path, possibly empty

        Raises:
            MissingParameterError: If a required parameter is missing or
                a value does not fit its segment
        """
        params = params or {}
        path = ""

        for i, token in enumerate(self.tokens):
            if isinstance(token, str):
                path += token
                continue

            name = token.name
            value = params.get(name)
            segment_regex = self._segment_regexes[i]

            if value is None:
                if token.optional:
                    if token.partial:
                        path += token.prefix
                    continue
                if not token.named and segment_regex.fullmatch(""):
                    continue
                raise MissingParameterError(name)

            if isinstance(value, (list, tuple)):
                if not token.repeat:
                    raise MissingParameterError(
                        name,
                        f'Expected "{name}" to not repeat, but received {list(value)!r}',
                    )
                if not value:
                    if token.optional:
                        continue
                    raise MissingParameterError(name, f'Expected "{name}" to not be empty')

                for j, item in enumerate(value):
                    segment = encode_component(item)
                    if not segment_regex.fullmatch(segment):
                        raise MissingParameterError(
                            name,
                            f'Expected all "{name}" to match "{token.pattern}", '
                            f"but received {segment!r}",
                        )
                    path += (token.prefix if j == 0 else token.delimiter) + segment
                continue

            safe = WILDCARD_SAFE if token.asterisk else COMPONENT_SAFE
            segment = encode_component(value, safe)
            if not segment_regex.fullmatch(segment):
                raise MissingParameterError(
                    name,
                    f'Expected "{name}" to match "{token.pattern}", but received {segment!r}',
                )
            path += token.prefix + segment

        return path

    def __repr__(self) -> str:
        return f"CompiledPattern({self.pattern!r})"


@functools.lru_cache(maxsize=512)
def compile_pattern(
    pattern: str,
    sensitive: bool = False,
    strict: bool = False,
    end: bool = True,
) -> CompiledPattern:
    """Compile a pattern (cached).

    Args:
        pattern: Path pattern
        sensitive: Case-sensitive matching
        strict: Disallow an optional trailing slash
        end: Anchor the match at the end of the path

    Raises:
        PatternError: If the pattern is not valid
    """
    return CompiledPattern(pattern, sensitive=sensitive, strict=strict, end=end)


__all__ = [
    "Token",
    "CompiledPattern",
    "compile_pattern",
    "parse",
]

"""Path pattern compilation.

Patterns follow the Express-style grammar::

    /users/:id            named parameter, one segment
    /users/:id?           optional parameter
    /files/:path+         one or more segments
    /files/:path*         zero or more segments
    /users/:id(\\d+)      parameter with a custom capture pattern
    /icons/(\\d+).png     unnamed capture group, keyed by position
    /static/*             wildcard, captures the rest
    /literal\\:colon      backslash escapes a special character

Compilation turns a pattern into an anchored regular expression and the
ordered list of parameter keys whose capture groups it contains.
"""

import re

from ..common.exceptions import PatternSyntaxError
from .models import CompileOptions, CompiledMatcher, PathKey

DEFAULT_DELIMITER = "/"

# Alternatives, in order: an escaped character; or an optional prefix
# delimiter followed by either a named parameter with an optional custom
# pattern, an unnamed group, or a bare asterisk. Named parameters and
# groups may carry a trailing modifier.
_TOKEN_RE = re.compile(
    r"(\\.)"
    r"|([/.])?(?:(?::(\w+)(?:\(((?:\\.|[^\\()])+)\))?|\(((?:\\.|[^\\()])+)\))([+*?])?|(\*))",
    re.ASCII,
)

_ESCAPE_STRING_RE = re.compile(r"([.+*?=^!:${}()\[\]|/\\])")
_ESCAPE_GROUP_RE = re.compile(r"([=!:$/()])")


def escape_string(value: str) -> str:
    """Escape every character that is special in a generated route regex"""
    return _ESCAPE_STRING_RE.sub(r"\\\1", value)


def escape_group(group: str) -> str:
    return _ESCAPE_GROUP_RE.sub(r"\\\1", group)


def parse_pattern(pattern: str, delimiter: str = DEFAULT_DELIMITER) -> list[str | PathKey]:
    """Split a pattern into literal strings and parameter keys.

    Args:
        pattern: Path pattern (e.g., "/users/:id", "/files/*")
        delimiter: Segment delimiter used when a token has no prefix

    Returns:
        Tokens in pattern order
    """
    tokens: list[str | PathKey] = []
    unnamed_index = 0
    index = 0
    literal = ""

    for found in _TOKEN_RE.finditer(pattern):
        literal += pattern[index : found.start()]
        index = found.end()

        escaped = found.group(1)
        if escaped:
            literal += escaped[1]
            continue

        prefix, name, capture, group, modifier, asterisk = found.group(2, 3, 4, 5, 6, 7)
        next_char = pattern[index] if index < len(pattern) else None

        if literal:
            tokens.append(literal)
            literal = ""

        if name is None:
            name = str(unnamed_index)
            unnamed_index += 1

        custom = capture or group
        token_delimiter = prefix or delimiter
        if custom:
            key_pattern = escape_group(custom)
        elif asterisk:
            key_pattern = ".*"
        else:
            key_pattern = f"[^{escape_string(token_delimiter)}]+?"

        tokens.append(
            PathKey(
                name=name,
                prefix=prefix or "",
                delimiter=token_delimiter,
                optional=modifier in ("?", "*"),
                repeat=modifier in ("+", "*"),
                partial=prefix is not None and next_char is not None and next_char != prefix,
                asterisk=bool(asterisk),
                pattern=key_pattern,
            )
        )

    literal += pattern[index:]
    if literal:
        tokens.append(literal)

    return tokens


def tokens_to_regex(
    tokens: list[str | PathKey],
    options: CompileOptions,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Build the regex source for parsed tokens.

    Without ``strict`` a single trailing delimiter is optional. Without
    ``end`` the match must stop at a delimiter or the end of input, so
    "/one" matches "/one/two" but not "/onetwo".
    """
    route = ""
    for token in tokens:
        if isinstance(token, str):
            route += escape_string(token)
            continue

        prefix = escape_string(token.prefix)
        capture = f"(?:{token.pattern})"
        if token.repeat:
            capture += f"(?:{prefix}{capture})*"

        if token.optional:
            if token.partial:
                capture = f"{prefix}({capture})?"
            else:
                capture = f"(?:{prefix}({capture}))?"
        else:
            capture = f"{prefix}({capture})"
        route += capture

    escaped_delimiter = escape_string(delimiter)
    ends_with_delimiter = route.endswith(escaped_delimiter)

    if not options.strict:
        if ends_with_delimiter:
            route = route[: -len(escaped_delimiter)]
        route += rf"(?:{escaped_delimiter}(?=\Z))?"

    if options.end:
        route += r"\Z"
    elif not (options.strict and ends_with_delimiter):
        route += rf"(?={escaped_delimiter}|\Z)"

    return "^" + route


def compile_pattern(pattern: str, options: CompileOptions | None = None) -> CompiledMatcher:
    """Compile a path pattern into a reusable matcher.

    Args:
        pattern: Path pattern
        options: end/strict/sensitive flags

    Returns:
        CompiledMatcher for the pattern

    Raises:
        PatternSyntaxError: If the pattern yields an invalid regular expression
    """
    options = options or CompileOptions()
    tokens = parse_pattern(pattern)
    keys = tuple(token for token in tokens if isinstance(token, PathKey))
    source = tokens_to_regex(tokens, options)
    flags = 0 if options.sensitive else re.IGNORECASE

    try:
        regex = re.compile(source, flags)
    except re.error as e:
        raise PatternSyntaxError(pattern, str(e)) from e

    if regex.groups != len(keys):
        raise PatternSyntaxError(
            pattern, f"expected {len(keys)} capture groups, found {regex.groups}"
        )

    return CompiledMatcher(pattern=pattern, options=options, regex=regex, keys=keys)

"""SGF lexer: raw text to a flat stream of primitive tokens."""

from __future__ import annotations

from collections.abc import Iterator

from kifu.core.enums import TokenKind
from kifu.core.errors import LexError
from kifu.core.notation.models import Token

_PUNCTUATION = {
    "(": TokenKind.TREE_OPEN,
    ")": TokenKind.TREE_CLOSE,
    ";": TokenKind.NODE_START,
}


def _is_ident_char(ch: str) -> bool:
    # Lowercase is tokenized too (FF[1-3] wrote "AddBlack"); extractors ignore it.
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def _read_value(text: str, start: int) -> tuple[str, int]:
    """Read a bracketed value whose ``[`` is at ``start``.

    Returns the unescaped value and the index just past the closing ``]``.
    """
    chars: list[str] = []
    idx = start + 1
    total = len(text)

    while idx < total:
        ch = text[idx]
        if ch == "]":
            return "".join(chars), idx + 1
        if ch == "\\":
            idx += 1
            if idx >= total:
                break
            escaped = text[idx]
            if escaped == "\r":
                # Soft line break: drop "\\\r\n" or "\\\r" entirely.
                if idx + 1 < total and text[idx + 1] == "\n":
                    idx += 1
            elif escaped != "\n":
                chars.append(escaped)
            idx += 1
            continue
        chars.append(ch)
        idx += 1

    raise LexError("Unterminated property value", start)


def tokenize(text: str) -> Iterator[Token]:
    """Lazily split SGF ``text`` into tokens.

    Whitespace between tokens is skipped. Inside a bracketed value ``\\]``
    yields ``]`` and ``\\\\`` yields ``\\``; every other character, newlines
    included, passes through.
    """
    idx = 0
    total = len(text)

    while idx < total:
        ch = text[idx]

        if ch.isspace():
            idx += 1
            continue

        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            yield Token(kind, idx)
            idx += 1
            continue

        if ch == "[":
            value, end = _read_value(text, idx)
            yield Token(TokenKind.PROP_VALUE, idx, value)
            idx = end
            continue

        if _is_ident_char(ch):
            end = idx + 1
            while end < total and _is_ident_char(text[end]):
                end += 1
            yield Token(TokenKind.PROP_IDENT, idx, text[idx:end])
            idx = end
            continue

        raise LexError(f"Unexpected character {ch!r}", idx)

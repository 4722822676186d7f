"""Game-tree builder: token stream to an immutable node arena."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from types import MappingProxyType

from kifu.core.enums import TokenKind
from kifu.core.errors import MultipleGamesError, SgfSyntaxError
from kifu.core.notation.models import GameTree, Token, TreeNode


@dataclass(slots=True)
class _NodeDraft:
    """Mutable node used while the tree is being assembled."""

    parent: int | None
    properties: dict[str, list[str]] = field(default_factory=dict)
    children: list[int] = field(default_factory=list)


@dataclass(slots=True)
class _Frame:
    """One open ``(`` ... ``)`` group.

    ``anchor`` is the node the first node of this frame hangs from (``None``
    for the top-level tree); ``last`` is the most recent node in its sequence.
    """

    anchor: int | None
    offset: int
    last: int | None = None


class _TreeBuilder:
    """Stack-based assembler fed one token at a time."""

    __slots__ = (
        "_drafts",
        "_frames",
        "_ident",
        "_ident_has_value",
        "_target",
        "_closed_root",
    )

    def __init__(self) -> None:
        self._drafts: list[_NodeDraft] = []
        self._frames: list[_Frame] = []
        self._ident: str | None = None
        self._ident_has_value = False
        self._target = 0
        self._closed_root = False

    def feed(self, token: Token) -> None:
        if token.kind == TokenKind.TREE_OPEN:
            self._open(token)
        elif token.kind == TokenKind.TREE_CLOSE:
            self._close(token)
        elif token.kind == TokenKind.NODE_START:
            self._node(token)
        elif token.kind == TokenKind.PROP_IDENT:
            self._property(token)
        else:
            self._value(token)

    def finish(self, end_offset: int) -> GameTree:
        if self._frames:
            raise SgfSyntaxError(
                "Unexpected end of input inside game tree",
                end_offset,
                expected="')'",
            )
        if not self._drafts:
            raise SgfSyntaxError("No game tree found", end_offset, expected="'('")

        nodes = tuple(
            TreeNode(
                index=idx,
                properties=MappingProxyType(
                    {ident: tuple(values) for ident, values in draft.properties.items()}
                ),
                parent=draft.parent,
                children=tuple(draft.children),
            )
            for idx, draft in enumerate(self._drafts)
        )
        return GameTree(nodes=nodes)

    # ── token handlers ──────────────────────────────────────────────────────

    def _end_property(self, token: Token) -> None:
        if self._ident is not None and not self._ident_has_value:
            raise SgfSyntaxError(
                f"Property {self._ident!r} has no value",
                token.offset,
                expected="'['",
            )
        self._ident = None

    def _open(self, token: Token) -> None:
        self._end_property(token)
        if not self._frames:
            if self._closed_root:
                raise MultipleGamesError(
                    "Only one game tree per input is supported", token.offset
                )
            self._frames.append(_Frame(anchor=None, offset=token.offset))
            return

        parent = self._frames[-1]
        if parent.last is None:
            raise SgfSyntaxError(
                "Variation before any node", token.offset, expected="';'"
            )
        self._frames.append(_Frame(anchor=parent.last, offset=token.offset))

    def _close(self, token: Token) -> None:
        self._end_property(token)
        if not self._frames:
            raise SgfSyntaxError(
                "Unmatched ')'", token.offset, expected="'(' or end of input"
            )
        frame = self._frames.pop()
        if frame.last is None:
            raise SgfSyntaxError("Empty game tree", token.offset, expected="';'")
        if not self._frames:
            self._closed_root = True

    def _node(self, token: Token) -> None:
        self._end_property(token)
        if not self._frames:
            raise SgfSyntaxError("Node outside game tree", token.offset, expected="'('")

        frame = self._frames[-1]
        parent = frame.last if frame.last is not None else frame.anchor
        index = len(self._drafts)
        self._drafts.append(_NodeDraft(parent=parent))
        if parent is not None:
            self._drafts[parent].children.append(index)
        frame.last = index

    def _property(self, token: Token) -> None:
        self._end_property(token)
        if not self._frames or self._frames[-1].last is None:
            raise SgfSyntaxError(
                f"Property {token.text!r} outside node", token.offset, expected="';'"
            )
        self._ident = token.text
        self._ident_has_value = False
        self._target = self._frames[-1].last

    def _value(self, token: Token) -> None:
        if self._ident is None:
            raise SgfSyntaxError(
                "Property value without identifier",
                token.offset,
                expected="property identifier",
            )
        node = self._drafts[self._target]
        node.properties.setdefault(self._ident, []).append(token.text)
        self._ident_has_value = True


def build_game_tree(tokens: Iterable[Token]) -> GameTree:
    """Assemble a :class:`GameTree` from a token stream.

    Raises:
        SgfSyntaxError: On unbalanced parentheses, nodes or properties outside
            a tree, or values without an identifier.
        MultipleGamesError: If a second top-level tree follows the first.
    """
    builder = _TreeBuilder()
    end_offset = 0
    for token in tokens:
        builder.feed(token)
        end_offset = token.offset + 1
    return builder.finish(end_offset)

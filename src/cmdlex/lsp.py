"""Minimal LSP server for batch scripts — completion and semantic highlighting."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    CompletionItem,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    InitializeParams,
    Position,
    Range,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    TextDocumentSyncKind,
    TextEdit,
)
from pygls.lsp.server import LanguageServer

from cmdlex.buffer import BufferWords
from cmdlex.config import store_from_config
from cmdlex.errors import ConfigError
from cmdlex.hint import Cursor, HintProvider, HintRequest, KeyValueStore, MemoryStore
from cmdlex.lexer import split_lines, tokenize
from cmdlex.tokens import STYLE_CLASSES, StyleCategory

logger = logging.getLogger(__name__)

TOKEN_TYPES: list[str] = list(STYLE_CLASSES.values())
_TYPE_INDEX: dict[StyleCategory, int] = {cat: i for i, cat in enumerate(STYLE_CLASSES)}

LEGEND = SemanticTokensLegend(token_types=TOKEN_TYPES, token_modifiers=[])


class CmdlexLanguageServer(LanguageServer):
    """LanguageServer carrying the hint store configured at initialization."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.hint_store: KeyValueStore = MemoryStore()


server = CmdlexLanguageServer(
    "cmdlex-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full
)


def store_from_options(options: Any) -> KeyValueStore:
    """Build the hint store from client initialization options.

    Recognized keys are ``customCommands`` and ``specialVariables``; anything
    unusable yields an empty store.
    """
    if not isinstance(options, Mapping):
        return MemoryStore()
    hint = {
        "custom_commands": options.get("customCommands"),
        "special_variables": options.get("specialVariables"),
    }
    try:
        return store_from_config({"hint": hint})
    except ConfigError as exc:
        logger.warning("ignoring initialization options: %s", exc)
        return MemoryStore()


def _complete(ls: CmdlexLanguageServer, params: CompletionParams) -> CompletionList | None:
    """Compute completion items for the cursor in params."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    # Client columns are UTF-16 units, lexer columns are code points
    pos = doc.position_from_client_units(params.position)
    request = HintRequest(doc.source, Cursor(pos.line, pos.character))
    response = HintProvider(ls.hint_store, BufferWords()).hint(request)
    if response is None:
        return None

    edit_range = doc.range_to_client_units(
        Range(
            start=Position(line=response.line, character=response.replace_from),
            end=Position(line=response.line, character=response.replace_to),
        )
    )
    items = [
        CompletionItem(
            label=candidate,
            text_edit=TextEdit(range=edit_range, new_text=candidate),
            sort_text=f"{rank:05d}",
        )
        for rank, candidate in enumerate(response.candidates)
    ]
    return CompletionList(is_incomplete=False, items=items)


def _semantic_tokens(ls: CmdlexLanguageServer, uri: str) -> SemanticTokens:
    """Encode styled tokens as LSP relative semantic token data."""
    doc = ls.workspace.get_text_document(uri)
    units = doc.position_codec.client_num_units
    data: list[int] = []
    prev_line = 0
    prev_start = 0
    lines = split_lines(doc.source)
    for line_no, (line, tokens) in enumerate(zip(lines, tokenize(doc.source))):
        for tok in tokens:
            index = _TYPE_INDEX.get(tok.category)
            if index is None:
                continue
            start = units(line[: tok.start])
            delta_line = line_no - prev_line
            delta_start = start - prev_start if delta_line == 0 else start
            data.extend([delta_line, delta_start, units(tok.text), index, 0])
            prev_line = line_no
            prev_start = start
    return SemanticTokens(data=data)


@server.feature(INITIALIZE)
def initialize(ls: CmdlexLanguageServer, params: InitializeParams) -> None:
    ls.hint_store = store_from_options(params.initialization_options)
    logger.debug("hint store: %r", ls.hint_store)


@server.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["%", "-"]))
def completion(ls: CmdlexLanguageServer, params: CompletionParams) -> CompletionList | None:
    return _complete(ls, params)


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(
    ls: CmdlexLanguageServer, params: SemanticTokensParams
) -> SemanticTokens:
    return _semantic_tokens(ls, params.text_document.uri)


def main() -> None:
    server.start_io()

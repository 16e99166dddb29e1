"""Minimal LSP server for Mush — lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from mush import __version__
from mush.errors import (
    EncodingError,
    LexicalFault,
    UnterminatedString,
    fault_id,
    fault_message,
)
from mush.lexer import scan

server = LanguageServer("mush-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _to_diagnostic(fault: LexicalFault, doc: TextDocument) -> Diagnostic:
    # Scanner lines are 1-based and columns count the faulty character itself;
    # the codec turns code-point columns into the client's units (UTF-16 by default)
    line = fault.position.line - 1
    col = fault.position.column - 1
    width = 1
    if isinstance(fault, UnterminatedString):
        width += len(fault.partial_text)
    codec = doc.position_codec
    lines = doc.lines
    return Diagnostic(
        range=Range(
            start=codec.position_to_client_units(lines, Position(line=line, character=col)),
            end=codec.position_to_client_units(lines, Position(line=line, character=col + width)),
        ),
        message=fault_message(fault),
        severity=DiagnosticSeverity.Error,
        code=fault_id(fault),
        source="mush",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish its lexical faults."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source.encode("utf-8", errors="surrogatepass")

    try:
        _, faults = scan(source)
    except EncodingError as exc:
        diagnostics = [_to_diagnostic(exc.fault, doc)]
    else:
        diagnostics = [_to_diagnostic(fault, doc) for fault in faults]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()

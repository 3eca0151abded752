"""
JSON syntax highlighting.

A single forward scan over the text that classifies it into styled
spans. The scan never rejects input: anything it does not recognise
becomes plain text, and the spans always join back to the input.
"""

from ..schemas.highlight import Span, StyleClass
from .json_format import pretty_print


DIGITS = frozenset("0123456789")
NUMBER_CHARS = DIGITS | frozenset(".eE+-")
PUNCTUATION = frozenset("{}[]:,")
KEYWORDS = {"t": "true", "f": "false", "n": "null"}


class JsonScanner:
    """
    Cursor-based scanner producing spans for one text.

    Unclassified characters collect in a pending buffer that is flushed
    as a plain span right before each classified span, and at the end.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.pending: list[str] = []
        self.spans: list[Span] = []

    def scan(self) -> list[Span]:
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == '"':
                self._scan_string()
            elif ch in DIGITS or ch == "-":
                self._scan_number()
            elif ch in KEYWORDS:
                self._scan_keyword(KEYWORDS[ch])
            elif ch in PUNCTUATION:
                self._emit(ch, "punctuation")
                self.pos += 1
            else:
                self.pending.append(ch)
                self.pos += 1
        self._flush()
        return self.spans

    def _flush(self) -> None:
        if self.pending:
            self.spans.append(Span(text="".join(self.pending), style="plain"))
            self.pending = []

    def _emit(self, text: str, style: StyleClass) -> None:
        self._flush()
        self.spans.append(Span(text=text, style=style))

    def _scan_string(self) -> None:
        text = self.text
        start = self.pos
        self.pos += 1
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == "\\":
                # escape: take the next character whatever it is
                self.pos += 2
            elif ch == '"':
                self.pos += 1
                break
            else:
                self.pos += 1
        self.pos = min(self.pos, len(text))

        # a string followed by ":" is an object key
        lookahead = self.pos
        while lookahead < len(text) and text[lookahead].isspace():
            lookahead += 1
        is_key = lookahead < len(text) and text[lookahead] == ":"

        self._emit(text[start:self.pos], "key" if is_key else "string")

    def _scan_number(self) -> None:
        text = self.text
        start = self.pos
        while self.pos < len(text) and text[self.pos] in NUMBER_CHARS:
            self.pos += 1
        self._emit(text[start:self.pos], "number")

    def _scan_keyword(self, keyword: str) -> None:
        text = self.text
        matched = 0
        while (
            matched < len(keyword)
            and self.pos + matched < len(text)
            and text[self.pos + matched] == keyword[matched]
        ):
            matched += 1

        if matched == len(keyword):
            self._emit(keyword, "keyword")
        else:
            self.pending.extend(text[self.pos:self.pos + matched])
        self.pos += matched


def tokenize(text: str) -> list[Span]:
    """
    Classify text into highlighted spans.

    Joining the text of the returned spans gives back the input exactly.
    Empty input yields no spans.
    """
    return JsonScanner(text).scan()


def highlight(body: str) -> tuple[str, list[Span]]:
    """
    Pretty-print a response body and tokenize the result.

    Returns:
        Tuple of (formatted text, spans). When tokenizing produces no
        spans, a single plain span carrying the unformatted body is
        returned instead.
    """
    formatted = pretty_print(body)
    spans = tokenize(formatted)
    if not spans:
        spans = [Span(text=body, style="plain")]
    return formatted, spans

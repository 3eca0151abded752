# Services package

from .request_builder import assemble_url, build_headers, build_body
from .transport import send
from .curl_import import import_curl, split_command
from .json_format import pretty_print
from .highlight import tokenize, highlight
from .formatting import format_size, format_headers, truncate
from .history_service import append_history, load_history, recent_history, recall

__all__ = [
    "assemble_url",
    "build_headers",
    "build_body",
    "send",
    "import_curl",
    "split_command",
    "pretty_print",
    "tokenize",
    "highlight",
    "format_size",
    "format_headers",
    "truncate",
    "append_history",
    "load_history",
    "recent_history",
    "recall",
]

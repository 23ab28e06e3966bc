"""Lift a sidebar payload out of a compiled JavaScript chunk.

Built documentation sites ship the sidebar metadata inside a module-loader
chunk rather than as a standalone JSON file, for example::

    (window.webpackJsonp=window.webpackJsonp||[]).push([[31],{131:
    function(e){e.exports=JSON.parse('{"docsSidebars":{...}}')}}]);

:func:`extract_payload` finds the ``JSON.parse`` call carrying the sidebar
document and decodes its JavaScript string literal back into JSON text. Bare
JSON documents pass through untouched, so callers can hand it either form.

Examples
--------
>>> extract_payload("e.exports=JSON.parse('{\\"docsSidebars\\":{}}')")
'{"docsSidebars":{}}'
>>> extract_payload('{"docsSidebars": {}}')
'{"docsSidebars": {}}'
"""

from __future__ import annotations

import logging
import re

from ._constants import SIDEBARS_KEY
from .models import MalformedDataError

logger = logging.getLogger(__name__)

JSON_PARSE_PATTERN = re.compile(
    r"""JSON\.parse\(\s*(['"])((?:(?!\1)[^\\]|\\.)*)\1\s*\)""", re.DOTALL
)
ESCAPE_PATTERN = re.compile(
    r"\\(u\{[0-9A-Fa-f]+\}|u[0-9A-Fa-f]{4}|x[0-9A-Fa-f]{2}|\r\n|.)", re.DOTALL
)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}
_LINE_CONTINUATIONS = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})


def extract_payload(bundle: str) -> str:
    """Return the sidebar JSON text embedded in ``bundle``.

    Parameters
    ----------
    bundle : str
        Contents of a compiled JavaScript chunk, or a bare JSON document.

    Returns
    -------
    str
        JSON text ready for :func:`docs_sidebars.registry.load`.

    Raises
    ------
    MalformedDataError
        If the chunk holds no ``JSON.parse`` call carrying a sidebar payload.
    """
    if bundle.lstrip().startswith("{"):
        return bundle

    candidates = [
        _decode_js_string(match.group(2))
        for match in JSON_PARSE_PATTERN.finditer(bundle)
    ]
    if not candidates:
        msg = "No JSON.parse payload found in bundle."
        raise MalformedDataError(msg)
    for text in candidates:
        if f'"{SIDEBARS_KEY}"' in text:
            logger.debug(
                "extracted %d characters of sidebar JSON from %d candidate(s)",
                len(text),
                len(candidates),
            )
            return text
    msg = f"Bundle contains no payload with a '{SIDEBARS_KEY}' key."
    raise MalformedDataError(msg)


def _decode_js_string(literal: str) -> str:
    """Decode the body of a JavaScript string literal."""

    def _repl(match: re.Match[str]) -> str:
        token = match.group(1)
        if token.startswith("u{"):
            return chr(int(token[2:-1], 16))
        if len(token) == 5 and token[0] == "u":
            return chr(int(token[1:], 16))
        if len(token) == 3 and token[0] == "x":
            return chr(int(token[1:], 16))
        if token in _LINE_CONTINUATIONS:
            return ""
        return _SIMPLE_ESCAPES.get(token, token)

    decoded = ESCAPE_PATTERN.sub(_repl, literal)
    # \uD83D\uDE00 style pairs decode to lone surrogates; join them.
    try:
        return decoded.encode("utf-16", "surrogatepass").decode("utf-16")
    except UnicodeDecodeError as exc:
        msg = "Bundle payload contains an unpaired surrogate escape."
        raise MalformedDataError(msg) from exc


__all__ = ["extract_payload"]

"""Processing of ``use`` and ``link`` directives in file-manager files."""

import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Union

from .colors import Color, colorize
from .lexer import Lexer, Token, TokenKind

PathLike = Union[str, Path]

_ECHO_COLORS = {
    TokenKind.USE: Color.CYAN,
    TokenKind.LINK: Color.CYAN,
    TokenKind.REPLACE: Color.DORANGE,
    TokenKind.LOG: Color.DORANGE,
    TokenKind.IDENT: Color.STRAND,
    TokenKind.COLON: Color.LGRAY,
    TokenKind.COMMA: Color.DGRAY,
    TokenKind.SEMICOLON: Color.LGRAY,
}


def change_extension(filename: str, extension: str) -> str:
    """Replace everything from the last '.' of *filename* with *extension*."""
    dot = filename.rfind(".")
    if dot != -1:
        filename = filename[:dot]
    return filename + extension


def is_empty_or_comment(line: str) -> bool:
    """Return True if *line* holds nothing but whitespace."""
    return all(c.isspace() for c in line)


def _wrap_file(
    name: str,
    directory: PathLike,
    source_ext: str,
    target_ext: str,
    tag: str,
) -> Optional[Path]:
    source_name = change_extension(name, source_ext)
    target_name = change_extension(name, target_ext)
    base = Path(directory)
    try:
        with open(base / source_name, "r", newline="") as source:
            content = source.read()
    except OSError:
        return None
    target_path = base / target_name
    try:
        with open(target_path, "w", newline="") as target:
            target.write(f"start_{tag} @{target_name} @line 0\n")
            target.write(content)
            target.write(f"\nend_{tag}\n")
    except OSError:
        return None
    return target_path


def write_use_output(name: str, directory: PathLike = ".") -> Optional[Path]:
    """Copy ``<name>.h`` into ``<name>.i`` wrapped in use markers.

    Returns the path written, or None if either file could not be opened.
    """
    return _wrap_file(name, directory, ".h", ".i", "use")


def write_link_output(name: str, directory: PathLike = ".") -> Optional[Path]:
    """Copy ``<name>.ill`` into ``<name>.p`` wrapped in link markers.

    Returns the path written, or None if either file could not be opened.
    """
    return _wrap_file(name, directory, ".ill", ".p", "link")


class CommentStripper:
    """Removes ``//`` and ``/* */`` comments line by line.

    A block comment left open at the end of one line carries on into the
    following lines.
    """

    def __init__(self) -> None:
        self.in_block = False

    def strip(self, line: str) -> Optional[str]:
        """Return *line* without comments, or None if nothing is left.

        A line cut short by ``//`` is returned even when empty.
        """
        pos = 0
        if self.in_block:
            end = line.find("*/")
            if end == -1:
                return None
            self.in_block = False
            pos = end + 2

        kept: List[str] = []
        while pos < len(line):
            pair = line[pos:pos + 2]
            if pair == "//":
                return "".join(kept)
            if pair == "/*":
                end = line.find("*/", pos + 2)
                if end == -1:
                    self.in_block = True
                    break
                pos = end + 2
                continue
            kept.append(line[pos])
            pos += 1

        cleaned = "".join(kept)
        return cleaned or None


class TokenEcho:
    """Prints recognised tokens in colour when enabled."""

    def __init__(self, enabled: bool = False, stream: Optional[TextIO] = None):
        self.enabled = enabled
        self.stream = stream

    def show(self, kind: TokenKind, text: str) -> None:
        """Print *text* in the colour that belongs to *kind*."""
        if not self.enabled:
            return
        color = _ECHO_COLORS.get(kind)
        if color is None:
            return
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(colorize(f" {text}\n", color))


class Processor:
    """Walks the tokens of a file-manager file and acts on its directives."""

    def __init__(
        self,
        lexer: Lexer,
        echo: Optional[TokenEcho] = None,
        directory: PathLike = ".",
    ):
        self.lexer = lexer
        self.echo = echo if echo is not None else TokenEcho(False)
        self.directory = Path(directory)

    def _match(self, token: Token, kind: TokenKind, text: str) -> None:
        if token.kind == kind:
            self.echo.show(kind, text)

    def run(self) -> List[Path]:
        """Process every directive; return the paths of the files written."""
        written: List[Path] = []
        for token in self.lexer:
            if token.kind == TokenKind.USE:
                self._match(token, TokenKind.USE, "use")
                self._match(self.lexer.next_token(), TokenKind.COLON, ":")
                written.extend(self.process_use())
            elif token.kind == TokenKind.LINK:
                self._match(token, TokenKind.LINK, "link")
                self._match(self.lexer.next_token(), TokenKind.COLON, ":")
                written.extend(self.process_link())
        return written

    def _process_list(
        self, writer: Callable[[str, PathLike], Optional[Path]]
    ) -> List[Path]:
        written: List[Path] = []
        while True:
            token = self.lexer.next_token()
            if token.kind == TokenKind.ENFI:
                break
            if token.kind == TokenKind.IDENT:
                name = token.text or ""
                self._match(token, TokenKind.IDENT, name)
                path = writer(name, self.directory)
                if path is not None:
                    written.append(path)
            elif token.kind == TokenKind.SEMICOLON:
                self._match(token, TokenKind.SEMICOLON, ";")
                break
            elif token.kind == TokenKind.COMMA:
                self._match(token, TokenKind.COMMA, ",")
        return written

    def process_use(self) -> List[Path]:
        """Handle the names of a ``use`` directive up to its semicolon."""
        return self._process_list(write_use_output)

    def process_link(self) -> List[Path]:
        """Handle the names of a ``link`` directive up to its semicolon."""
        return self._process_list(write_link_output)
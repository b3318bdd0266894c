"""Command-line entry point for the file-manager preprocessor."""

import sys
from typing import List, Optional

from .directives import Processor, TokenEcho
from .errors import IrpError
from .lexer import Lexer


def main(argv: Optional[List[str]] = None) -> int:
    """Process one file-manager file; ``-o`` echoes recognised tokens."""
    args = sys.argv[1:] if argv is None else argv
    echo_tokens = False
    input_file: Optional[str] = None
    for arg in args:
        if arg == "-o":
            echo_tokens = True
        else:
            input_file = arg

    if input_file is None:
        print("Failed to open (null): no input file given")
        return 1

    try:
        stream = open(input_file, "r")
    except OSError as exc:
        print(f"Failed to open {input_file}: {exc.strerror}")
        return 1

    with stream:
        processor = Processor(Lexer(stream), TokenEcho(echo_tokens))
        try:
            processor.run()
        except IrpError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
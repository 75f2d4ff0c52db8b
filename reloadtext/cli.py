"""Command line entry point: rewrite a text file line by line."""

import os
import sys

from reloadtext.articles import fix_articles
from reloadtext.numbers import replace_numbers
from reloadtext.punctuation import process_punctuation_and_quotes
from reloadtext.transform import process_case_tags

USAGE = "usage: reloadtext <input_file.txt> [output_file.txt]"
DEFAULT_OUTPUT = "result.txt"


class UsageError(ValueError):
    """Raised when the given file names cannot be used."""


def process_line(line):
    """Run every text correction over one line."""
    line = process_case_tags(line)
    line = replace_numbers(line)
    line = process_punctuation_and_quotes(line)
    return fix_articles(line)


def process_text(text):
    """Correct each line of ``text`` separately, keeping the line breaks."""
    return "\n".join(process_line(line) for line in text.split("\n"))


def _extension(path):
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def run(input_path, output_path):
    """Read ``input_path``, correct it, and write the result to ``output_path``."""
    if _extension(input_path) != ".txt":
        raise UsageError("the input file must have a .txt extension")
    if _extension(output_path) != ".txt":
        raise UsageError("the output file must have a .txt extension")
    if os.path.normpath(input_path) == os.path.normpath(output_path):
        raise UsageError("the input and output files must differ")

    with open(input_path, encoding="utf-8", errors="surrogateescape", newline="") as src:
        text = src.read()
    with open(output_path, "w", encoding="utf-8", errors="surrogateescape", newline="") as dst:
        dst.write(process_text(text))


def main(argv=None):
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not 1 <= len(args) <= 2:
        print(USAGE)
        return 1
    input_path = args[0]
    output_path = args[1] if len(args) == 2 else DEFAULT_OUTPUT
    try:
        run(input_path, output_path)
    except (UsageError, OSError) as exc:
        print(f"error: {exc}")
        return 1
    print(f"Processing complete. Output written to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
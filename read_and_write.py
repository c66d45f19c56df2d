"""
read_and_write.py
Open a text file, print it line by line, append a reminder line, then print it again.

Configure by environment variable:
  READ_AND_WRITE_FILE - path of the text file (default: read_and_write.txt)

Example usage:
  python read_and_write.py --file read_and_write.txt
"""

import os
import sys
import argparse
from typing import List, Optional


DEFAULT_FILE = "read_and_write.txt"
DEFAULT_LINE = "Go air up the bike tires"


# -----------------------
# 1) Reading
# -----------------------
def read_lines(path: str) -> List[str]:
    """Return every line of the file without its trailing newline.
       Raises FileNotFoundError if the file does not exist."""
    # split on "\n" only so a leading "\r" stays part of its line
    with open(path, "r", newline="\n") as f:
        return [line.rstrip("\n") for line in f]

def reed(path: str = DEFAULT_FILE):
    for line in read_lines(path):
        print(line)


# -----------------------
# 2) Appending
# -----------------------
def wryte(path: str = DEFAULT_FILE, line: str = DEFAULT_LINE):
    # carriage return first, same as the printed reminder
    with open(path, "a", newline="") as f:
        f.write("\r" + line + "\n")


# -----------------------
# 3) Round trip
# -----------------------
def run(path: str = DEFAULT_FILE, line: str = DEFAULT_LINE):
    reed(path)
    wryte(path, line)
    print(" ")  # Adding a space here
    reed(path)


# -----------------------
# CLI
# -----------------------
def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser()
    p.add_argument('--file', default=None, help=f'Text file to read and append to (env READ_AND_WRITE_FILE, default {DEFAULT_FILE})')
    p.add_argument('--line', default=DEFAULT_LINE, help='Line to append')
    return p.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    path = args.file or os.getenv('READ_AND_WRITE_FILE') or DEFAULT_FILE
    try:
        run(path, args.line)
    except FileNotFoundError:
        print(f"File not found: {path}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())

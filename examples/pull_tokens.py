#!/usr/bin/env python3
"""
Pull-Based Scanning Demo
========================

This script demonstrates how to drive the scanner one token at a time:
1. Build a Scanner from a string
2. Call next_token() until EOF
3. Count unrecognized characters instead of stopping on them

Usage:
    python examples/pull_tokens.py
"""

from tinylex import Scanner, TokenKind


def main():
    source = "total = price * 3;\nrate = total / 4 # tax\n"

    illegal = 0
    with Scanner(source, "demo") as scanner:
        token = scanner.next_token()
        while token.kind is not TokenKind.EOF:
            print(f"{str(token.position):>6}  {str(token.kind):<8}{token.text}")
            if token.is_illegal:
                illegal += 1
            token = scanner.next_token()

    print(f"\nDone at {token.position}, {illegal} unrecognized character(s)")


if __name__ == "__main__":
    main()

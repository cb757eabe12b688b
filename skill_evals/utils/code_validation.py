"""Deterministic validation of generated code (no LLM calls).

Pattern checks are literal substring matches over the extracted code, so a
forbidden pattern inside a comment still counts as present.
"""

from __future__ import annotations

import ast
import re
from collections.abc import Sequence
from typing import NoReturn

from skill_evals.evals.structural import JS_LANGUAGES, find_code_blocks
from skill_evals.schemas.scores import CodeValidationResult

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_WORD_RE = re.compile(r"[\w$]+")
_TAG_NAME_RE = re.compile(r"[\w$.:-]*")

# Tokens after which `/` starts a regex literal and `<` may open a JSX element.
_OPERAND_AFTER = frozenset("(,=:[!&|?{};+-*%<>~^")
_OPERAND_KEYWORDS = frozenset(
    {"return", "typeof", "case", "do", "else", "in", "instanceof", "new", "delete", "void", "throw", "yield", "await", "of"}
)


def extract_code(answer: str) -> str:
    """Join the bodies of all fenced code blocks; the whole answer if there are none."""
    blocks = find_code_blocks(answer)
    if not blocks:
        return answer.strip()
    return "\n\n".join(body for _, body in blocks)


def _check_python(code: str) -> str | None:
    try:
        ast.parse(code)
    except SyntaxError as exc:
        return f"{exc.msg} at line {exc.lineno}"
    return None


class _JsSyntaxError(Exception):
    pass


class _JsScanner:
    """Balanced-delimiter scan for JS/TS.

    Strings, template literals, comments and regex literals are skipped, and
    JSX elements are walked so that their text content is not read as code.
    Template `${...}` expressions are not descended into. A `<` that fails to
    scan as JSX is re-read as an operator, which keeps TS generics working.
    """

    def __init__(self, code: str):
        self.code = code
        self.n = len(code)
        self.i = 0
        self.line = 1

    def _peek(self, offset: int = 0) -> str:
        j = self.i + offset
        return self.code[j] if j < self.n else ""

    def _fail(self, message: str) -> NoReturn:
        raise _JsSyntaxError(message)

    def scan(self, closing: str | None = None, opened_at: int = 0) -> None:
        code = self.code
        stack: list[tuple[str, int]] = []
        last = ""
        while self.i < self.n:
            ch = code[self.i]
            nxt = self._peek(1)
            operand = not last or last in _OPERAND_AFTER or last in _OPERAND_KEYWORDS
            if ch == "\n":
                self.line += 1
            elif ch.isspace():
                pass
            elif ch == "/" and nxt == "/":
                end = code.find("\n", self.i)
                self.i = self.n if end == -1 else end
                continue
            elif ch == "/" and nxt == "*":
                end = code.find("*/", self.i + 2)
                if end == -1:
                    self._fail(f"Unterminated block comment at line {self.line}")
                self.line += code.count("\n", self.i, end)
                self.i = end + 2
                continue
            elif ch in "'\"`":
                self._string(ch)
                last = "a"
                continue
            elif ch == "/" and operand:
                self._regex()
                last = "a"
                continue
            elif ch == "<" and operand and (nxt.isalpha() or nxt == ">"):
                saved = (self.i, self.line)
                try:
                    self._jsx_element()
                except _JsSyntaxError:
                    self.i, self.line = saved
                else:
                    last = "a"
                    continue
            elif ch in "([{":
                stack.append((ch, self.line))
            elif ch in _CLOSERS:
                if not stack and ch == closing:
                    self.i += 1
                    return
                if not stack or stack[-1][0] != _CLOSERS[ch]:
                    self._fail(f"Unexpected '{ch}' at line {self.line}")
                stack.pop()
            else:
                match = _WORD_RE.match(code, self.i)
                if match:
                    last = match.group()
                    self.i = match.end()
                    continue
            if not ch.isspace():
                last = ch
            self.i += 1

        if stack:
            opener, line = stack[-1]
            self._fail(f"Unclosed '{opener}' from line {line}")
        if closing:
            self._fail(f"Unclosed '{_CLOSERS[closing]}' from line {opened_at}")

    def _string(self, quote: str) -> None:
        code = self.code
        start_line = self.line
        self.i += 1
        while self.i < self.n and code[self.i] != quote:
            if code[self.i] == "\\":
                self.i += 1
            elif code[self.i] == "\n":
                if quote != "`":
                    self._fail(f"Unterminated string at line {start_line}")
                self.line += 1
            self.i += 1
        if self.i >= self.n:
            self._fail(f"Unterminated string at line {start_line}")
        self.i += 1

    def _regex(self) -> None:
        code = self.code
        in_class = False
        self.i += 1
        while self.i < self.n:
            ch = code[self.i]
            if ch == "\\":
                self.i += 2
                continue
            if ch == "\n":
                break
            if in_class:
                in_class = ch != "]"
            elif ch == "[":
                in_class = True
            elif ch == "/":
                self.i += 1
                return
            self.i += 1
        self._fail(f"Unterminated regex at line {self.line}")

    def _skip_space(self) -> None:
        while self.i < self.n and self.code[self.i].isspace():
            if self.code[self.i] == "\n":
                self.line += 1
            self.i += 1

    def _expression(self) -> None:
        opened_at = self.line
        self.i += 1
        self.scan(closing="}", opened_at=opened_at)

    def _jsx_element(self) -> None:
        code = self.code
        opened_at = self.line
        self.i += 1
        match = _TAG_NAME_RE.match(code, self.i)
        tag = match.group()
        self.i = match.end()

        while True:
            self._skip_space()
            ch = self._peek()
            if ch == "/" and self._peek(1) == ">":
                self.i += 2
                return
            if ch == ">":
                self.i += 1
                break
            if ch == "{":
                self._expression()
                continue
            name = _TAG_NAME_RE.match(code, self.i)
            if not name.group():
                self._fail(f"Malformed <{tag}> at line {self.line}")
            self.i = name.end()
            self._skip_space()
            if self._peek() != "=":
                continue
            self.i += 1
            self._skip_space()
            value = self._peek()
            if value and value in "\"'":
                end = code.find(value, self.i + 1)
                if end == -1:
                    self._fail(f"Unterminated string at line {self.line}")
                self.line += code.count("\n", self.i, end)
                self.i = end + 1
            elif value == "{":
                self._expression()
            elif value == "<":
                self._jsx_element()
            else:
                self._fail(f"Malformed <{tag}> at line {self.line}")

        while self.i < self.n:
            ch = code[self.i]
            if ch == "{":
                self._expression()
                continue
            if ch == "<" and self._peek(1) == "/":
                end = code.find(">", self.i)
                if end == -1 or code[self.i + 2 : end].strip() != tag:
                    self._fail(f"Mismatched closing tag for <{tag}> at line {self.line}")
                self.i = end + 1
                return
            if ch == "<":
                self._jsx_element()
                continue
            if ch == "\n":
                self.line += 1
            self.i += 1
        self._fail(f"Unclosed <{tag}> from line {opened_at}")


def _check_js(code: str) -> str | None:
    try:
        _JsScanner(code).scan()
    except _JsSyntaxError as exc:
        return str(exc)
    except RecursionError:
        return "Nesting too deep to check"
    return None


def check_syntax(code: str, language: str) -> str | None:
    """Return a syntax error description, or None if the code parses."""
    if not code.strip():
        return "No code found"
    if language.strip().lower() in JS_LANGUAGES:
        return _check_js(code)
    return _check_python(code)


def _coverage(code: str, required: Sequence[str]) -> tuple[float, list[str]]:
    if not required:
        return 1.0, []
    missing = [item for item in required if item not in code]
    return (len(required) - len(missing)) / len(required), missing


def validate_code(
    answer: str,
    *,
    language: str,
    required_imports: Sequence[str] = (),
    required_patterns: Sequence[str] = (),
    forbidden_patterns: Sequence[str] = (),
) -> CodeValidationResult:
    """Score generated code: syntax 30%, imports 30%, patterns 20%, forbidden 20%."""
    code = extract_code(answer)
    syntax_error = check_syntax(code, language)
    import_coverage, missing_imports = _coverage(code, required_imports)
    pattern_coverage, missing_patterns = _coverage(code, required_patterns)

    forbidden_found = [item for item in forbidden_patterns if item in code]
    if forbidden_patterns:
        forbidden_absence = 1 - len(forbidden_found) / len(forbidden_patterns)
    else:
        forbidden_absence = 1.0

    return CodeValidationResult(
        syntax_valid=syntax_error is None,
        syntax_error=syntax_error,
        import_coverage=import_coverage,
        pattern_coverage=pattern_coverage,
        forbidden_absence=forbidden_absence,
        missing_imports=missing_imports,
        missing_patterns=missing_patterns,
        forbidden_found=forbidden_found,
    )

"""Parse reflection-style type names into type descriptors.

Accepted syntax (whitespace is ignored around separators):

    System.Int32                      ordinary type
    N.Outer+Inner                     nested type
    System.Collections.Generic.List`1<System.String>
                                      generic instantiation
    !0, !!1                           type-level / method-level type parameter
    System.Int32[] System.Int32[,]    vector / multi-dimensional array
    System.Byte*                      pointer
    System.Int32&                     by-reference (last suffix only)

Suffixes apply from the element outward, so `System.Int32[][,]` is a 2-D
array whose elements are `System.Int32[]`.
"""

import re

from xmldoc_help.type_descriptor import (
    ArrayOf,
    ByRef,
    GenericInstantiation,
    GenericParameter,
    Ordinary,
    PointerTo,
    TypeDescriptor,
)

NAME_RE = re.compile(r"[A-Za-z_][\w.+`]*")
ARITY_RE = re.compile(r"`(\d+)")


class TypeNameSyntaxError(ValueError):
    """The type name could not be parsed."""

    def __init__(self, text: str, pos: int, expected: str) -> None:
        """Record where parsing stopped."""
        super().__init__(f"Invalid type name {text!r} at position {pos}: expected {expected}")
        self.text = text
        self.pos = pos


def parse_type_name(text: str) -> TypeDescriptor:
    """Parse a full type name, including any by-ref marker."""
    parser = _TypeNameParser(text)
    result = parser.parse_type()
    parser.skip_ws()
    if parser.pos != len(text):
        raise TypeNameSyntaxError(text, parser.pos, "end of type name")
    return result


class _TypeNameParser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def peek(self) -> str:
        self.skip_ws()
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, ch: str) -> None:
        if self.peek() != ch:
            raise TypeNameSyntaxError(self.text, self.pos, repr(ch))
        self.pos += 1

    def parse_type(self) -> TypeDescriptor:
        result = self.parse_core()
        while True:
            ch = self.peek()
            if ch == "[":
                self.pos += 1
                rank = 1
                while self.peek() == ",":
                    self.pos += 1
                    rank += 1
                self.expect("]")
                result = ArrayOf(result, rank)
            elif ch == "*":
                self.pos += 1
                result = PointerTo(result)
            elif ch == "&":
                self.pos += 1
                return ByRef(result)
            else:
                return result

    def parse_core(self) -> TypeDescriptor:
        if self.peek() == "!":
            self.pos += 1
            is_method_level = self.text.startswith("!", self.pos)
            if is_method_level:
                self.pos += 1
            digits = re.match(r"\d+", self.text[self.pos :])
            if not digits:
                raise TypeNameSyntaxError(self.text, self.pos, "type parameter position")
            self.pos += digits.end()
            return GenericParameter(int(digits.group()), is_method_level)

        m = NAME_RE.match(self.text, self.pos)
        if not m:
            raise TypeNameSyntaxError(self.text, self.pos, "type name")
        self.pos = m.end()
        name = m.group()
        definition = Ordinary(name, sum(int(n) for n in ARITY_RE.findall(name)))

        if self.peek() != "<":
            return definition
        self.pos += 1
        arguments = [self.parse_type()]
        while self.peek() == ",":
            self.pos += 1
            arguments.append(self.parse_type())
        self.expect(">")
        return GenericInstantiation(definition, tuple(arguments))

#!/usr/bin/env python3
"""treelox: tree-walking interpreter for the lox scripting language"""
# pylint: disable=line-too-long,too-many-arguments,multiple-statements,too-many-lines
import argparse
import cmd
import enum
import logging
import sys
import time
import typing

from termcolor import colored

logger = logging.getLogger(__name__)

MAX_ARGUMENTS = 255


class TokenType(enum.Enum):
    """Token types"""
    # Single-character tokens.
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    LEFT_BRACE = enum.auto()
    RIGHT_BRACE = enum.auto()
    COMMA = enum.auto()
    DOT = enum.auto()
    MINUS = enum.auto()
    PLUS = enum.auto()
    SEMICOLON = enum.auto()
    SLASH = enum.auto()
    STAR = enum.auto()

    # One or two character tokens.
    BANG = enum.auto()
    BANG_EQUAL = enum.auto()
    EQUAL = enum.auto()
    EQUAL_EQUAL = enum.auto()
    GREATER = enum.auto()
    GREATER_EQUAL = enum.auto()
    LESS = enum.auto()
    LESS_EQUAL = enum.auto()

    # Literals.
    IDENTIFIER = enum.auto()
    STRING = enum.auto()
    NUMBER = enum.auto()

    # Keywords.
    AND = enum.auto()
    CLASS = enum.auto()
    ELSE = enum.auto()
    FALSE = enum.auto()
    FUN = enum.auto()
    FOR = enum.auto()
    IF = enum.auto()
    NIL = enum.auto()
    OR = enum.auto()
    PRINT = enum.auto()
    RETURN = enum.auto()
    SUPER = enum.auto()
    THIS = enum.auto()
    TRUE = enum.auto()
    VAR = enum.auto()
    WHILE = enum.auto()

    EOF = enum.auto()


KEYWORDS = {
    'and':    TokenType.AND,
    'class':  TokenType.CLASS,
    'else':   TokenType.ELSE,
    'false':  TokenType.FALSE,
    'for':    TokenType.FOR,
    'fun':    TokenType.FUN,
    'if':     TokenType.IF,
    'nil':    TokenType.NIL,
    'or':     TokenType.OR,
    'print':  TokenType.PRINT,
    'return': TokenType.RETURN,
    'super':  TokenType.SUPER,
    'this':   TokenType.THIS,
    'true':   TokenType.TRUE,
    'var':    TokenType.VAR,
    'while':  TokenType.WHILE,
}


class ReadOnly:
    """Attributes may be bound once, while the object is built"""
    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise AttributeError(f"{self.__class__.__name__}.{name} is read-only")
        super().__setattr__(name, value)


class Token(ReadOnly):
    """Token"""
    def __init__(self, token_type:TokenType, lexeme:str, literal:typing.Any, line:int) -> None:
        self.type = token_type
        self.lexeme = lexeme
        self.literal = literal
        self.line = line

    def __str__(self) -> str:
        return f"{self.type} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.type}, {self.lexeme!r}, {self.literal!r}, {self.line!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((self.type, self.lexeme, self.line))


class LoxRuntimeError(RuntimeError):
    """Runtime error carrying the offending token"""
    def __init__(self, token:Token, msg:str) -> None:
        super().__init__(msg)
        self.token = token

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.token!r}, {self!s})"


class ErrorReporter:
    """Diagnostic sink shared by the scanner, parser and interpreter"""
    ERROR = "red"

    def __init__(self, stream:typing.Optional[typing.TextIO] = None, color:bool = True) -> None:
        self.stream = stream
        self.color = color
        self.diagnostics:typing.List[typing.Tuple[int, str, str]] = []
        self.runtime_errors:typing.List[LoxRuntimeError] = []
        self.had_error = False
        self.had_runtime_error = False

    def _emit(self, label:str, msg:str) -> None:
        if self.color:
            label = colored(label, ErrorReporter.ERROR, attrs=["bold"])
        print(label + msg, file=self.stream or sys.stderr)

    def error(self, line:int, msg:str, where:str = "") -> None:
        """report a (line, message) diagnostic"""
        self.had_error = True
        self.diagnostics.append((line, where, msg))
        self._emit(f"[line {line}] Error{where}: ", msg)

    def token_error(self, token:Token, msg:str) -> None:
        """report a (token, message) diagnostic"""
        if token.type == TokenType.EOF:
            self.error(token.line, msg, " at end")
        else:
            self.error(token.line, msg, f" at '{token.lexeme}'")

    def runtime_error(self, exc:LoxRuntimeError) -> None:
        """report an error that aborted evaluation"""
        self.had_runtime_error = True
        self.runtime_errors.append(exc)
        self._emit(f"[line {exc.token.line}] RuntimeError: ", str(exc))

    def reset(self) -> None:
        """forget reported errors, used between interactive lines"""
        self.diagnostics = []
        self.runtime_errors = []
        self.had_error = False
        self.had_runtime_error = False


class Scanner:
    """Scanner"""

    def __init__(self, source:str, reporter:typing.Optional[ErrorReporter] = None) -> None:
        self.source = source
        self.reporter = reporter or ErrorReporter()
        self.tokens:typing.List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

        while not self.is_at_end:
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

    is_at_end = property(lambda self: self.current >= len(self.source))
    next_is_at_end = property(lambda self: (self.current + 1) >= len(self.source))
    peek = property(lambda self: self.source[self.current] if not self.is_at_end else '\0')
    peek_next = property(lambda self: self.source[self.current + 1] if not self.next_is_at_end else '\0')

    @staticmethod
    def is_digit(c:str) -> bool:
        """ascii digits only, str.isdigit also takes superscripts"""
        return '0' <= c <= '9'

    def advance(self) -> str:
        """advance to the next character"""
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected:str) -> bool:
        """match current character"""
        if self.is_at_end: return False
        if self.source[self.current] != expected: return False
        self.current += 1
        return True

    def string(self) -> None:
        """scan a string"""
        while self.peek != '"' and not self.is_at_end:
            if self.peek == '\n': self.line += 1
            self.advance()

        if self.is_at_end:
            self.reporter.error(self.line, "Unterminated string.")
            return

        self.advance()
        self.add_token(TokenType.STRING, self.source[self.start + 1: self.current - 1])

    def number(self) -> None:
        """scan a number, always a float"""
        while self.is_digit(self.peek): self.advance()
        if self.peek == '.' and self.is_digit(self.peek_next):
            self.advance()
            while self.is_digit(self.peek): self.advance()
        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self) -> None:
        """scan an identifier or keyword"""
        while self.peek.isalnum() or self.peek == '_': self.advance()
        value = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(value, TokenType.IDENTIFIER))

    def add_token(self, token_type:TokenType, literal=None) -> None:
        """add a scanned token"""
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    SINGLE_CHARACTER_TOKENS = {
        '(': TokenType.LEFT_PAREN,
        ')': TokenType.RIGHT_PAREN,
        '{': TokenType.LEFT_BRACE,
        '}': TokenType.RIGHT_BRACE,
        ',': TokenType.COMMA,
        '.': TokenType.DOT,
        '-': TokenType.MINUS,
        '+': TokenType.PLUS,
        ';': TokenType.SEMICOLON,
        '*': TokenType.STAR,
    }

    # character: (token when followed by '=', token otherwise)
    EQUAL_SUFFIX_TOKENS = {
        '!': (TokenType.BANG_EQUAL, TokenType.BANG),
        '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        '<': (TokenType.LESS_EQUAL, TokenType.LESS),
        '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }

    def scan_token(self) -> None:
        """scan for a token"""
        c = self.advance()
        if c in self.SINGLE_CHARACTER_TOKENS:
            self.add_token(self.SINGLE_CHARACTER_TOKENS[c])
        elif c in self.EQUAL_SUFFIX_TOKENS:
            with_equal, alone = self.EQUAL_SUFFIX_TOKENS[c]
            self.add_token(with_equal if self.match('=') else alone)
        elif c == '/':
            if self.match('/'):
                while self.peek != '\n' and not self.is_at_end: self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif c in (' ', '\t', '\r'): pass
        elif c == '\n': self.line += 1
        elif c == '"': self.string()
        elif self.is_digit(c): self.number()
        elif c.isalpha() or c == '_': self.identifier()
        else:
            self.reporter.error(self.line, f"Unexpected character '{c}'.")


class Expr(ReadOnly):
    """Expression"""
    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join(f'{k}={v!r}' for k,v in self.__dict__.items())})"

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__


class Stmt(ReadOnly):
    """Statement"""
    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join(f'{k}={v!r}' for k,v in self.__dict__.items())})"

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__


class Assign(Expr):
    """Assignment expression"""
    def __init__(self, name:Token, value:Expr):
        self.name = name
        self.value = value


class Binary(Expr):
    """Binary expression"""
    def __init__(self, left:Expr, operator:Token, right:Expr):
        self.left = left
        self.operator = operator
        self.right = right


class Call(Expr):
    """Call expression"""
    def __init__(self, callee:Expr, paren:Token, arguments:typing.Sequence[Expr]):
        self.callee = callee
        self.paren = paren
        self.arguments = tuple(arguments)


class Get(Expr):
    """Property read on an instance"""
    def __init__(self, obj:Expr, name:Token):
        self.object = obj
        self.name = name


class Grouping(Expr):
    """Grouping expression"""
    def __init__(self, expression:Expr):
        self.expression = expression


class Literal(Expr):
    """Literal expression"""
    def __init__(self, value:typing.Union[str, float, bool, None]):
        self.value = value


class Logical(Expr):
    """Short-circuiting and/or"""
    def __init__(self, left:Expr, operator:Token, right:Expr):
        self.left = left
        self.operator = operator
        self.right = right


class Set(Expr):
    """Property write on an instance"""
    def __init__(self, obj:Expr, name:Token, value:Expr):
        self.object = obj
        self.name = name
        self.value = value


class Super(Expr):
    """Superclass method access"""
    def __init__(self, keyword:Token, method:Token):
        self.keyword = keyword
        self.method = method


class This(Expr):
    """This in a method body"""
    def __init__(self, keyword:Token):
        self.keyword = keyword


class Unary(Expr):
    """Unary expression"""
    def __init__(self, operator:Token, right:Expr):
        self.operator = operator
        self.right = right


class Variable(Expr):
    """Variable expression"""
    def __init__(self, name:Token):
        self.name = name


class Block(Stmt):
    """Block statement"""
    def __init__(self, statements:typing.Sequence[Stmt]):
        self.statements = tuple(statements)


class FunctionType(enum.Enum):
    """function types"""
    FUNCTION = "function"
    METHOD = "method"

    def __str__(self):
        return self.value


class Function(Stmt):
    """Function declaration"""
    def __init__(self, name:Token, params:typing.Sequence[Token], body:typing.Sequence[Stmt]):
        self.name = name
        self.params = tuple(params)
        self.body = tuple(body)


class Class(Stmt):
    """Class declaration"""
    def __init__(self, name:Token, superclass:typing.Optional[Variable], methods:typing.Sequence[Function]):
        self.name = name
        self.superclass = superclass
        self.methods = tuple(methods)


class Expression(Stmt):
    """Expression statement"""
    def __init__(self, expression:Expr):
        self.expression = expression


class If(Stmt):
    """If statement"""
    def __init__(self, condition:Expr, then_branch:Stmt, else_branch:typing.Optional[Stmt]):
        self.condition = condition
        self.then_branch = then_branch
        self.else_branch = else_branch


class Print(Stmt):
    """Print statement"""
    def __init__(self, expression:Expr):
        self.expression = expression


class Return(Stmt):
    """Return statement"""
    def __init__(self, keyword:Token, value:typing.Optional[Expr]):
        self.keyword = keyword
        self.value = value


class Var(Stmt):
    """Var statement"""
    def __init__(self, name:Token, initializer:typing.Optional[Expr]):
        self.name = name
        self.initializer = initializer


class While(Stmt):
    """While statement, also the target of for loops"""
    def __init__(self, condition:Expr, body:Stmt):
        self.condition = condition
        self.body = body


def _parenthesize(name:str, *parts) -> str:
    return "(" + " ".join([name] + [ast_str(part) if isinstance(part, (Expr, Stmt)) else str(part) for part in parts]) + ")"


def ast_str(node:typing.Union[Expr, Stmt]) -> str:  # noqa:C901 # too-complex
    """Render a node as a parenthesized prefix expression"""
    # pylint: disable=too-many-return-statements,too-many-branches
    if isinstance(node, Literal):
        return f'"{node.value}"' if isinstance(node.value, str) else stringify(node.value)
    if isinstance(node, Grouping): return _parenthesize("group", node.expression)
    if isinstance(node, Unary): return _parenthesize(node.operator.lexeme, node.right)
    if isinstance(node, (Binary, Logical)): return _parenthesize(node.operator.lexeme, node.left, node.right)
    if isinstance(node, Variable): return node.name.lexeme
    if isinstance(node, Assign): return _parenthesize("=", node.name.lexeme, node.value)
    if isinstance(node, Call): return _parenthesize("call", node.callee, *node.arguments)
    if isinstance(node, Get): return _parenthesize(".", node.object, node.name.lexeme)
    if isinstance(node, Set): return _parenthesize("=", _parenthesize(".", node.object, node.name.lexeme), node.value)
    if isinstance(node, This): return "this"
    if isinstance(node, Super): return _parenthesize("super", node.method.lexeme)

    if isinstance(node, Expression): return _parenthesize(";", node.expression)
    if isinstance(node, Print): return _parenthesize("print", node.expression)
    if isinstance(node, Var):
        if node.initializer is None: return _parenthesize("var", node.name.lexeme)
        return _parenthesize("var", node.name.lexeme, "=", node.initializer)
    if isinstance(node, Block): return _parenthesize("block", *node.statements)
    if isinstance(node, If):
        if node.else_branch is None: return _parenthesize("if", node.condition, node.then_branch)
        return _parenthesize("if-else", node.condition, node.then_branch, node.else_branch)
    if isinstance(node, While): return _parenthesize("while", node.condition, node.body)
    if isinstance(node, Function):
        params = "(" + " ".join(param.lexeme for param in node.params) + ")"
        return _parenthesize("fun", node.name.lexeme, params, *node.body)
    if isinstance(node, Return):
        if node.value is None: return "(return)"
        return _parenthesize("return", node.value)
    if isinstance(node, Class):
        name = node.name.lexeme if node.superclass is None else f"{node.name.lexeme} < {node.superclass.name.lexeme}"
        return _parenthesize("class", name, *node.methods)

    raise TypeError(f"Not a syntax tree node: {node!r}")


class Parser:
    """
    program        → declaration* EOF ;
    declaration    → classDecl | funDecl | varDecl | statement ;
    classDecl      → "class" IDENTIFIER ( "<" IDENTIFIER )? "{" function* "}" ;
    funDecl        → "fun" function ;
    function       → IDENTIFIER "(" parameters? ")" block ;
    parameters     → IDENTIFIER ( "," IDENTIFIER )* ;
    varDecl        → "var" IDENTIFIER ( "=" expression )? ";" ;
    statement      → exprStmt | forStmt | ifStmt | printStmt | returnStmt | whileStmt | block ;
    exprStmt       → expression ";" ;
    forStmt        → "for" "(" ( varDecl | exprStmt | ";" ) expression? ";" expression? ")" statement ;
    ifStmt         → "if" "(" expression ")" statement ( "else" statement )? ;
    printStmt      → "print" expression ";" ;
    returnStmt     → "return" expression? ";" ;
    whileStmt      → "while" "(" expression ")" statement ;
    block          → "{" declaration* "}" ;

    expression     → assignment ;
    assignment     → ( call "." )? IDENTIFIER "=" assignment | logic_or ;
    logic_or       → logic_and ( "or" logic_and )* ;
    logic_and      → equality ( "and" equality )* ;
    equality       → comparison ( ( "!=" | "==" ) comparison )* ;
    comparison     → term ( ( ">" | ">=" | "<" | "<=" ) term )* ;
    term           → factor ( ( "-" | "+" ) factor )* ;
    factor         → unary ( ( "/" | "*" ) unary )* ;
    unary          → ( "!" | "-" ) unary | call ;
    call           → primary ( "(" arguments? ")" | "." IDENTIFIER )* ;
    arguments      → expression ( "," expression )* ;
    primary        → NUMBER | STRING | "true" | "false" | "nil" | "this" | "(" expression ")" | IDENTIFIER
                   | "super" "." IDENTIFIER
                   // Error production...
                   | ( "!=" | "==" | ">" | ">=" | "<" | "<=" | "+" | "/" | "*" ) ;
    """
    # pylint: disable=too-many-public-methods
    previous = property(lambda self: self.tokens[self.current - 1], doc="return the previous token")
    peek = property(lambda self: self.tokens[self.current], doc="return the current token")
    is_at_end = property(lambda self: self.peek.type == TokenType.EOF, doc="check if we are at the EOF token")

    class ParserError(RuntimeError):
        """Unwinds a malformed statement back to declaration()"""

    def __init__(self, tokens:typing.Sequence[Token], reporter:typing.Optional[ErrorReporter] = None):
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenType.EOF, "", None, line))
        self.reporter = reporter or ErrorReporter()
        self.current = 0
        self.has_error = False
        self.call_depth = 0
        # one entry per enclosing class declaration, True when it has a superclass
        self.classes:typing.List[bool] = []

    def parse(self) -> typing.List[Stmt]:
        """main entry point to start the parsing"""
        statements:typing.List[Stmt] = []
        while not self.is_at_end:
            stmt:typing.Optional[Stmt] = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        logger.debug("parsed %d statement(s), has_error=%s", len(statements), self.has_error)
        return statements

    def declaration(self) -> typing.Optional[Stmt]:
        """declaration    → classDecl | funDecl | varDecl | statement ;"""
        try:
            if self.match(TokenType.CLASS): return self.class_declaration()
            if self.match(TokenType.FUN): return self.function(FunctionType.FUNCTION)
            if self.match(TokenType.VAR): return self.var_declaration()
            return self.statement()
        except self.ParserError:
            self.synchronize()
            return None

    def class_declaration(self) -> Stmt:
        """classDecl      → "class" IDENTIFIER ( "<" IDENTIFIER )? "{" function* "}" ;"""
        name:Token = self.consume(TokenType.IDENTIFIER, "Expect class name.")

        superclass:typing.Optional[Variable] = None
        if self.match(TokenType.LESS):
            superclass = Variable(self.consume(TokenType.IDENTIFIER, "Expect superclass name."))
            if superclass.name.lexeme == name.lexeme:
                self.error(superclass.name, "A class can't inherit from itself.")

        self.consume(TokenType.LEFT_BRACE, "Expect '{' before class body.")
        methods:typing.List[Function] = []
        self.classes.append(superclass is not None)
        try:
            while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end:
                methods.append(self.function(FunctionType.METHOD))
        finally:
            self.classes.pop()
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after class body.")
        return Class(name, superclass, methods)

    def function(self, kind:FunctionType) -> Function:
        """function       → IDENTIFIER "(" parameters? ")" block ;"""
        name:Token = self.consume(TokenType.IDENTIFIER, f"Expect {kind} name.")

        self.consume(TokenType.LEFT_PAREN, f"Expect '(' after {kind} name.")
        parameters:typing.List[Token] = []
        if not self.check(TokenType.RIGHT_PAREN):
            parameters.append(self.consume(TokenType.IDENTIFIER, "Expect parameter name."))
            while self.match(TokenType.COMMA):
                if len(parameters) >= MAX_ARGUMENTS:
                    self.error(self.peek, f"Can't have more than {MAX_ARGUMENTS} parameters.")
                parameters.append(self.consume(TokenType.IDENTIFIER, "Expect parameter name."))
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after parameters.")

        self.consume(TokenType.LEFT_BRACE, "Expect '{' before " + str(kind) + " body.")
        self.call_depth += 1
        try:
            body:typing.List[Stmt] = self.block()
        finally:
            self.call_depth -= 1
        return Function(name, parameters, body)

    def var_declaration(self) -> Stmt:
        """varDecl        → "var" IDENTIFIER ( "=" expression )? ";" ;"""
        name:Token = self.consume(TokenType.IDENTIFIER, "Expect variable name.")
        initializer:typing.Optional[Expr] = self.expression() if self.match(TokenType.EQUAL) else None
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def statement(self) -> Stmt:
        """statement      → exprStmt | forStmt | ifStmt | printStmt | returnStmt | whileStmt | block ;"""
        # pylint: disable=too-many-return-statements
        if self.match(TokenType.FOR): return self.for_statement()
        if self.match(TokenType.IF): return self.if_statement()
        if self.match(TokenType.PRINT): return self.print_statement()
        if self.match(TokenType.RETURN): return self.return_statement()
        if self.match(TokenType.WHILE): return self.while_statement()
        if self.match(TokenType.LEFT_BRACE): return Block(self.block())  # block() is shared with function bodies
        return self.expression_statement()

    def return_statement(self) -> Stmt:
        """returnStmt     → "return" expression? ";" ;"""
        keyword:Token = self.previous
        if not self.call_depth:
            self.error(keyword, "Can't return from top-level code.")
        value:typing.Optional[Expr] = None

        if not self.check(TokenType.SEMICOLON):
            value = self.expression()

        self.consume(TokenType.SEMICOLON, "Expect ';' after return value.")
        return Return(keyword, value)

    def block(self) -> typing.List[Stmt]:
        """block          → "{" declaration* "}" ;"""
        statements:typing.List[Stmt] = []

        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end:
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)

        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    def for_statement(self) -> Stmt:
        """forStmt        → "for" "(" ( varDecl | exprStmt | ";" ) expression? ";" expression? ")" statement ;

            Lowered to blocks around a While, there is no for node.
        """
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")
        initializer:typing.Optional[Stmt] = None
        if self.match(TokenType.SEMICOLON):
            pass
        elif self.match(TokenType.VAR):
            initializer = self.var_declaration()
        else:
            initializer = self.expression_statement()

        condition:typing.Optional[Expr] = None
        if not self.check(TokenType.SEMICOLON):
            condition = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after loop condition.")

        increment:typing.Optional[Expr] = None
        if not self.check(TokenType.RIGHT_PAREN):
            increment = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

        body:Stmt = self.statement()

        if increment is not None:
            body = Block([body, Expression(increment)])

        if condition is None:
            condition = Literal(True)

        body = While(condition, body)

        if initializer is not None:
            body = Block([initializer, body])

        return body

    def if_statement(self) -> Stmt:
        """ifStmt         → "if" "(" expression ")" statement ( "else" statement )? ;"""
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
        condition:Expr = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")

        then_branch:Stmt = self.statement()
        else_branch:typing.Optional[Stmt] = None
        if self.match(TokenType.ELSE):
            else_branch = self.statement()
        return If(condition, then_branch, else_branch)

    def while_statement(self) -> Stmt:
        """whileStmt      → "while" "(" expression ")" statement ;"""
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
        condition:Expr = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after condition.")
        return While(condition, self.statement())

    def expression_statement(self) -> Stmt:
        """exprStmt       → expression ";" ;"""
        expr:Expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Expression(expr)

    def print_statement(self) -> Stmt:
        """printStmt      → "print" expression ";" ;"""
        value:Expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def error(self, token:Token, msg:str) -> 'Parser.ParserError':
        """Report a diagnostic; the caller raises the returned error when it can't carry on"""
        self.has_error = True
        self.reporter.token_error(token, msg)
        return self.ParserError(msg)

    def advance(self) -> Token:
        """advance to the next token"""
        if not self.is_at_end:
            self.current += 1
        return self.previous

    def check(self, token_type:TokenType) -> bool:
        """check the current token for a given TokenType"""
        if self.is_at_end: return False
        return self.peek.type == token_type

    def match(self, *types:TokenType) -> bool:
        """Match the current token for a list of TokenTypes"""
        for t in types:
            if self.check(t):
                self.advance()
                return True
        return False

    def consume(self, token_type:TokenType, msg:str) -> Token:
        """check for next expected token, raise error msg if not"""
        if self.check(token_type): return self.advance()
        raise self.error(self.peek, msg)

    def expression(self) -> Expr:
        """expression     → assignment ;"""
        return self.assignment()

    def assignment(self) -> Expr:
        """assignment     → ( call "." )? IDENTIFIER "=" assignment | logic_or ;"""
        expr:Expr = self.logic_or()

        if self.match(TokenType.EQUAL):
            equals:Token = self.previous
            value:Expr = self.assignment()

            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            if isinstance(expr, Get):
                return Set(expr.object, expr.name, value)

            self.error(equals, "Invalid assignment target.")

        return expr

    def _binary(self, operand:typing.Callable[[], Expr], node:typing.Type[Expr], *types:TokenType) -> Expr:
        """left-associative loop shared by every binary precedence level"""
        expr:Expr = operand()
        while self.match(*types):
            operator:Token = self.previous
            right:Expr = operand()
            expr = node(expr, operator, right)
        return expr

    def logic_or(self) -> Expr:
        """logic_or       → logic_and ( "or" logic_and )* ;"""
        return self._binary(self.logic_and, Logical, TokenType.OR)

    def logic_and(self) -> Expr:
        """logic_and      → equality ( "and" equality )* ;"""
        return self._binary(self.equality, Logical, TokenType.AND)

    def equality(self) -> Expr:
        """equality       → comparison ( ( "!=" | "==" ) comparison )* ;"""
        return self._binary(self.comparison, Binary, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def comparison(self) -> Expr:
        """comparison     → term ( ( ">" | ">=" | "<" | "<=" ) term )* ;"""
        return self._binary(self.term, Binary, TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL)

    def term(self) -> Expr:
        """term           → factor ( ( "-" | "+" ) factor )* ;"""
        return self._binary(self.factor, Binary, TokenType.MINUS, TokenType.PLUS)

    def factor(self) -> Expr:
        """factor         → unary ( ( "/" | "*" ) unary )* ;"""
        return self._binary(self.unary, Binary, TokenType.SLASH, TokenType.STAR)

    def unary(self) -> Expr:
        """unary          → ( "!" | "-" ) unary | call ;"""
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator:Token = self.previous
            right:Expr = self.unary()
            return Unary(operator, right)
        return self.call()

    def call(self) -> Expr:
        """call           → primary ( "(" arguments? ")" | "." IDENTIFIER )* ;"""
        expr:Expr = self.primary()
        while True:
            if self.match(TokenType.LEFT_PAREN):
                expr = self.finish_call(expr)
            elif self.match(TokenType.DOT):
                name:Token = self.consume(TokenType.IDENTIFIER, "Expect property name after '.'.")
                expr = Get(expr, name)
            else:
                return expr

    def finish_call(self, callee:Expr) -> Expr:
        """arguments      → expression ( "," expression )* ;"""
        arguments:typing.List[Expr] = []
        if not self.check(TokenType.RIGHT_PAREN):
            arguments.append(self.expression())
            while self.match(TokenType.COMMA):
                if len(arguments) >= MAX_ARGUMENTS:
                    self.error(self.peek, f"Can't have more than {MAX_ARGUMENTS} arguments.")
                arguments.append(self.expression())
        paren:Token = self.consume(TokenType.RIGHT_PAREN, "Expect ')' after arguments.")
        return Call(callee, paren, arguments)

    MISSING_OPERAND_TOKEN_TYPES = (
        TokenType.BANG_EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.PLUS,
        TokenType.SLASH,
        TokenType.STAR,
    )

    def primary(self) -> Expr:  # noqa:C901 # too-complex
        """primary        → NUMBER | STRING | "true" | "false" | "nil" | "this"
                          | "(" expression ")" | IDENTIFIER | "super" "." IDENTIFIER ;
        """
        # pylint: disable=too-many-return-statements
        if self.match(TokenType.FALSE): return Literal(False)
        if self.match(TokenType.TRUE): return Literal(True)
        if self.match(TokenType.NIL): return Literal(None)

        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous.literal)

        if self.match(TokenType.THIS):
            keyword:Token = self.previous
            if not self.classes:
                self.error(keyword, "Can't use 'this' outside of a class.")
            return This(keyword)

        if self.match(TokenType.SUPER):
            keyword = self.previous
            self.consume(TokenType.DOT, "Expect '.' after 'super'.")
            method:Token = self.consume(TokenType.IDENTIFIER, "Expect superclass method name.")
            if not self.classes:
                self.error(keyword, "Can't use 'super' outside of a class.")
            elif not self.classes[-1]:
                self.error(keyword, "Can't use 'super' in a class with no superclass.")
            return Super(keyword, method)

        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous)

        if self.match(TokenType.LEFT_PAREN):
            expr:Expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        # error production: a binary operator with nothing on its left
        if self.match(*self.MISSING_OPERAND_TOKEN_TYPES):
            raise self.error(self.previous, "Missing left-hand operand.")

        raise self.error(self.peek, "Expect expression.")

    SYNCHRONIZE_TOKEN_TYPES = (
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN
    )

    def synchronize(self) -> None:
        """Discard tokens up to the next statement boundary"""
        self.advance()
        while not self.is_at_end:
            if self.previous.type == TokenType.SEMICOLON: return
            if self.peek.type in self.__class__.SYNCHRONIZE_TOKEN_TYPES: return
            self.advance()


def parse(tokens:typing.Sequence[Token], reporter:typing.Optional[ErrorReporter] = None) -> typing.List[Stmt]:
    """parse a token stream into statements"""
    return Parser(tokens, reporter).parse()


class Environment:
    """Scope frame: name bindings plus the enclosing frame"""

    class RuntimeError(LoxRuntimeError):
        """Environment runtime error"""

    def __init__(self, enclosing:typing.Optional['Environment'] = None):
        """enclosing is None only for the globals frame"""
        self.values:typing.Dict[str, typing.Any] = {}
        self.enclosing = enclosing

    def define(self, name:str, value:typing.Any) -> None:
        """bind a name in this frame, replacing any previous binding here"""
        self.values[name] = value

    def _frame_of(self, token:Token) -> 'Environment':
        """the nearest frame on the chain that binds token"""
        environment:typing.Optional[Environment] = self
        while environment is not None:
            if token.lexeme in environment.values:
                return environment
            environment = environment.enclosing
        raise self.RuntimeError(token, f"Undefined variable '{token.lexeme}'.")

    def get(self, token:Token) -> typing.Any:
        """return a value by name"""
        return self._frame_of(token).values[token.lexeme]

    def assign(self, token:Token, value:typing.Any) -> None:
        """rebind an existing name, never creating one"""
        self._frame_of(token).values[token.lexeme] = value

    def __contains__(self, name:str) -> bool:
        environment:typing.Optional[Environment] = self
        while environment is not None:
            if name in environment.values:
                return True
            environment = environment.enclosing
        return False

    def __repr__(self):
        return f"{self.__class__.__name__}({self.values!r}, enclosing={self.enclosing!r})"


class LoxCallable:
    """Anything that can be called from lox code: exposes arity and is invoked with (interpreter, arguments)"""
    arity:int

    def __call__(self, interpreter:'Interpreter', arguments:typing.List[typing.Any]) -> typing.Any:
        raise NotImplementedError


class NativeFunction(LoxCallable):
    """Host function exposed to lox code"""
    def __init__(self, name:str, arity:int, func:typing.Callable):
        self.name = name
        self.arity = arity
        self.func = func

    def __call__(self, interpreter:'Interpreter', arguments:typing.List[typing.Any]):
        return self.func(interpreter, *arguments)

    def __str__(self):
        return "<native fn>"


class Returning(ReadOnly):
    """Completion of a return statement, handed back up to the call that owns the frame"""
    def __init__(self, keyword:Token, value:typing.Any):
        self.keyword = keyword
        self.value = value


class LoxFunction(ReadOnly, LoxCallable):
    """Function declaration closed over the frame it was created in"""
    def __init__(self, declaration:Function, closure:Environment, is_initializer:bool = False):
        self.declaration = declaration
        self.closure = closure
        self.is_initializer = is_initializer

    arity = property(lambda self: len(self.declaration.params))

    def bind(self, instance:'LoxInstance') -> 'LoxFunction':
        """a copy of this method whose closure defines this -> instance"""
        environment = Environment(self.closure)
        environment.define("this", instance)
        logger.debug("bind %s to %s", self, instance)
        return LoxFunction(self.declaration, environment, self.is_initializer)

    def __call__(self, interpreter:'Interpreter', arguments:typing.List[typing.Any]):
        logger.debug("call %s with %d argument(s)", self, len(arguments))
        environment = Environment(self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            environment.define(param.lexeme, argument)

        completion = interpreter.execute_block(self.declaration.body, environment)

        if self.is_initializer:
            return self.closure.values["this"]
        if completion is not None:
            return completion.value
        return None

    def __str__(self):
        return f"<fn {self.declaration.name.lexeme}>"


class LoxClass(LoxCallable):
    """Class: named method table with an optional superclass"""
    def __init__(self, name:str, superclass:typing.Optional['LoxClass'], methods:typing.Dict[str, LoxFunction]):
        self.name = name
        self.superclass = superclass
        self.methods = methods

    def find_method(self, name:str) -> typing.Optional[LoxFunction]:
        """look a method up on this class, then its superclasses"""
        klass:typing.Optional[LoxClass] = self
        while klass is not None:
            if name in klass.methods:
                return klass.methods[name]
            klass = klass.superclass
        return None

    @property
    def arity(self) -> int:
        initializer = self.find_method("init")
        return initializer.arity if initializer is not None else 0

    def __call__(self, interpreter:'Interpreter', arguments:typing.List[typing.Any]):
        instance = LoxInstance(self)
        initializer = self.find_method("init")
        if initializer is not None:
            initializer.bind(instance)(interpreter, arguments)
        return instance

    def __str__(self):
        return self.name


class LoxInstance:
    """Instance of a LoxClass"""
    def __init__(self, klass:LoxClass):
        self.klass = klass
        self.fields:typing.Dict[str, typing.Any] = {}

    def get(self, name:Token) -> typing.Any:
        """field value, else a method bound to this instance"""
        if name.lexeme in self.fields:
            return self.fields[name.lexeme]
        method = self.klass.find_method(name.lexeme)
        if method is not None:
            return method.bind(self)
        raise LoxRuntimeError(name, f"Undefined property '{name.lexeme}'.")

    def set(self, name:Token, value:typing.Any) -> None:
        """set a field"""
        self.fields[name.lexeme] = value

    def __str__(self):
        return f"{self.klass.name} instance"


class ValueKind(enum.Enum):
    """runtime value kinds"""
    NIL = "nil"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    CALLABLE = "callable"
    INSTANCE = "instance"


def kind_of(value:typing.Any) -> ValueKind:
    """classify a runtime value"""
    # pylint: disable=too-many-return-statements
    if value is None: return ValueKind.NIL
    if isinstance(value, bool): return ValueKind.BOOLEAN
    if isinstance(value, (int, float)): return ValueKind.NUMBER
    if isinstance(value, str): return ValueKind.STRING
    if isinstance(value, LoxCallable): return ValueKind.CALLABLE
    if isinstance(value, LoxInstance): return ValueKind.INSTANCE
    raise TypeError(f"Not a lox value: {value!r}")


def is_number(value:typing.Any) -> bool:
    """bool is an int to python, not to lox"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value:typing.Any) -> bool:
    """nil and false are falsey, everything else is truthy"""
    if value is None: return False
    if isinstance(value, bool): return value
    return True


def is_equal(left:typing.Any, right:typing.Any) -> bool:
    """values of different kinds are never equal"""
    if kind_of(left) is not kind_of(right):
        return False
    return left == right


def stringify(value:typing.Any) -> str:
    """lox text of a runtime value"""
    if value is None: return "nil"
    if isinstance(value, bool): return "true" if value else "false"
    if isinstance(value, float) and value.is_integer(): return f"{value:.0f}"  # keeps the sign of -0
    return str(value)


class Interpreter:
    """Interpreter"""

    class RuntimeError(LoxRuntimeError):
        """Interpreter runtime error"""

    def __init__(self, reporter:typing.Optional[ErrorReporter] = None) -> None:
        self.reporter = reporter or ErrorReporter()
        self.globals = Environment()
        self.environment = self.globals

        self.define_native("clock", 0, lambda _: time.time())

    def define_native(self, name:str, arity:int, func:typing.Callable) -> None:
        """expose a python callable to lox code as a global; func gets the interpreter first"""
        self.globals.define(name, NativeFunction(name, arity, func))

    def interpret(self, statements:typing.Sequence[Stmt]) -> None:
        """Interpret statements, reporting the first runtime error"""
        try:
            for statement in statements:
                completion = self.execute(statement)
                if completion is not None:
                    raise self.RuntimeError(completion.keyword, "Can't return from top-level code.")
        except LoxRuntimeError as exc:
            logger.debug("aborted on %r", exc)
            self.reporter.runtime_error(exc)

    def execute(self, stmt:Stmt) -> typing.Optional[Returning]:  # noqa:C901 # too-complex
        """execute a statement, returning the Returning completion when a return ran"""
        # pylint: disable=too-many-return-statements,too-many-branches
        if isinstance(stmt, Expression):
            self.eval(stmt.expression)
            return None
        if isinstance(stmt, Print):
            print(stringify(self.eval(stmt.expression)))
            return None
        if isinstance(stmt, Var):
            value = self.eval(stmt.initializer) if stmt.initializer is not None else None
            self.environment.define(stmt.name.lexeme, value)
            return None
        if isinstance(stmt, Block):
            return self.execute_block(stmt.statements, Environment(self.environment))
        if isinstance(stmt, If):
            if is_truthy(self.eval(stmt.condition)):
                return self.execute(stmt.then_branch)
            if stmt.else_branch is not None:
                return self.execute(stmt.else_branch)
            return None
        if isinstance(stmt, While):
            while is_truthy(self.eval(stmt.condition)):
                completion = self.execute(stmt.body)
                if completion is not None:
                    return completion
            return None
        if isinstance(stmt, Function):
            self.environment.define(stmt.name.lexeme, LoxFunction(stmt, self.environment))
            return None
        if isinstance(stmt, Return):
            value = self.eval(stmt.value) if stmt.value is not None else None
            return Returning(stmt.keyword, value)
        if isinstance(stmt, Class):
            self._execute_class(stmt)
            return None

        raise TypeError(f"Not a statement: {stmt!r}")

    def execute_block(self, statements:typing.Sequence[Stmt], environment:Environment) -> typing.Optional[Returning]:
        """execute a block of statements in environment, restoring the current one on the way out"""
        previous:Environment = self.environment
        try:
            self.environment = environment
            for stmt in statements:
                completion = self.execute(stmt)
                if completion is not None:
                    return completion
            return None
        finally:
            self.environment = previous

    def _execute_class(self, stmt:Class) -> None:
        """evaluate a class declaration"""
        superclass:typing.Optional[LoxClass] = None
        if stmt.superclass is not None:
            superclass = self.eval(stmt.superclass)
            if not isinstance(superclass, LoxClass):
                raise self.RuntimeError(stmt.superclass.name, "Superclass must be a class.")

        environment = self.environment
        if superclass is not None:
            environment = Environment(self.environment)
            environment.define("super", superclass)

        methods = {
            method.name.lexeme: LoxFunction(method, environment, is_initializer=method.name.lexeme == "init")
            for method in stmt.methods
        }
        logger.debug("class %s with %d method(s)", stmt.name.lexeme, len(methods))
        self.environment.define(stmt.name.lexeme, LoxClass(stmt.name.lexeme, superclass, methods))

    def eval(self, expression:Expr) -> typing.Any:  # noqa:C901 # too-complex
        """eval an expression"""
        # pylint: disable=too-many-return-statements,too-many-branches
        if isinstance(expression, Literal):
            return expression.value
        if isinstance(expression, Grouping):
            return self.eval(expression.expression)
        if isinstance(expression, Unary):
            right = self.eval(expression.right)
            if expression.operator.type == TokenType.MINUS:
                self.check_numbers(expression.operator, right)
                return -right
            return not is_truthy(right)
        if isinstance(expression, Variable):
            return self.environment.get(expression.name)
        if isinstance(expression, Assign):
            value = self.eval(expression.value)
            self.environment.assign(expression.name, value)
            return value
        if isinstance(expression, Logical):
            return self._eval_logical(expression)
        if isinstance(expression, Binary):
            return self._eval_binary(expression)
        if isinstance(expression, Call):
            return self._eval_call(expression)
        if isinstance(expression, Get):
            obj = self.eval(expression.object)
            if not isinstance(obj, LoxInstance):
                raise self.RuntimeError(expression.name, "Only instances have properties.")
            return obj.get(expression.name)
        if isinstance(expression, Set):
            obj = self.eval(expression.object)
            if not isinstance(obj, LoxInstance):
                raise self.RuntimeError(expression.name, "Only instances have fields.")
            value = self.eval(expression.value)
            obj.set(expression.name, value)
            return value
        if isinstance(expression, This):
            return self.environment.get(expression.keyword)
        if isinstance(expression, Super):
            return self._eval_super(expression)

        raise TypeError(f"Not an expression: {expression!r}")

    def _eval_call(self, expr:Call) -> typing.Any:
        """evaluate a call expression"""
        callee = self.eval(expr.callee)
        arguments:typing.List[typing.Any] = [self.eval(argument) for argument in expr.arguments]

        if not isinstance(callee, LoxCallable):
            raise self.RuntimeError(expr.paren, "Can only call functions and classes.")
        if callee.arity != len(arguments):
            raise self.RuntimeError(expr.paren, f"Expected {callee.arity} arguments but got {len(arguments)}.")
        return callee(self, arguments)

    def _eval_super(self, expr:Super) -> typing.Any:
        """bind the superclass method to the current instance"""
        superclass:LoxClass = self.environment.get(expr.keyword)
        instance = self.environment.get(Token(TokenType.THIS, "this", None, expr.keyword.line))
        method = superclass.find_method(expr.method.lexeme)
        if method is None:
            raise self.RuntimeError(expr.method, f"Undefined property '{expr.method.lexeme}'.")
        return method.bind(instance)

    def _eval_logical(self, expression:Logical) -> typing.Any:
        """evaluate a logical expression, yielding the deciding operand"""
        left = self.eval(expression.left)
        if expression.operator.type == TokenType.OR:
            if is_truthy(left): return left
        elif not is_truthy(left):
            return left
        return self.eval(expression.right)

    def _eval_binary(self, expression:Binary) -> typing.Any:  # noqa:C901 # too-complex
        """evaluate a binary expression"""
        # pylint: disable=too-many-return-statements,too-many-branches
        left = self.eval(expression.left)
        right = self.eval(expression.right)
        operator = expression.operator

        if operator.type == TokenType.BANG_EQUAL: return not is_equal(left, right)
        if operator.type == TokenType.EQUAL_EQUAL: return is_equal(left, right)
        if operator.type == TokenType.PLUS:
            if is_number(left) and is_number(right): return left + right
            if isinstance(left, str) and isinstance(right, str): return left + right
            raise self.RuntimeError(operator, "Operands must be two numbers or two strings.")

        self.check_numbers(operator, left, right)
        if operator.type == TokenType.GREATER: return left > right
        if operator.type == TokenType.GREATER_EQUAL: return left >= right
        if operator.type == TokenType.LESS: return left < right
        if operator.type == TokenType.LESS_EQUAL: return left <= right
        if operator.type == TokenType.MINUS: return left - right
        if operator.type == TokenType.STAR: return left * right
        if operator.type == TokenType.SLASH:
            if right == 0:
                raise self.RuntimeError(operator, "Division by zero.")
            return left / right

        raise self.RuntimeError(operator, f"Unknown operator '{operator.lexeme}'.")

    @classmethod
    def check_numbers(cls, token:Token, *values:typing.Any) -> None:
        """check if values are numeric"""
        msg = "Operand must be a number." if len(values) == 1 else "Operands must be numbers."
        if not all(is_number(_) for _ in values):
            raise cls.RuntimeError(token, msg)


class Lox:
    """Scan, parse and run lox source against one long-lived interpreter"""
    EX_OK = 0
    EX_DATAERR = 65
    EX_NOINPUT = 66
    EX_SOFTWARE = 70

    def __init__(self, reporter:typing.Optional[ErrorReporter] = None, dump_ast:bool = False) -> None:
        self.reporter = reporter or ErrorReporter()
        self.interpreter = Interpreter(self.reporter)
        self.dump_ast = dump_ast

    def run(self, source:str) -> None:
        """run source; nothing is executed if it fails to scan or parse"""
        tokens = Scanner(source, self.reporter).tokens
        statements = Parser(tokens, self.reporter).parse()
        if self.reporter.had_error:
            return
        if self.dump_ast:
            for statement in statements:
                print(ast_str(statement))
        self.interpreter.interpret(statements)

    def run_file(self, path:str) -> int:
        """run a script, returning the process exit status"""
        logger.debug("running %s", path)
        try:
            with open(path, "r", encoding="utf-8") as fh:
                source = fh.read()
        except OSError as exc:
            print(f"Could not open '{path}': {exc.strerror}", file=sys.stderr)
            return self.EX_NOINPUT

        self.run(source)
        if self.reporter.had_error: return self.EX_DATAERR
        if self.reporter.had_runtime_error: return self.EX_SOFTWARE
        return self.EX_OK

    def run_prompt(self) -> None:
        """interactive mode"""
        Shell(self).cmdloop()


class Shell(cmd.Cmd):
    """Interactive lox prompt"""
    intro = "treelox :: tree-walking lox interpreter\nType 'exit' or press Ctrl-D to leave."
    prompt = "> "

    def __init__(self, lox:Lox, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lox = lox

    def onecmd(self, line):
        """only the bare lines 'exit' and EOF are shell commands, the rest is lox"""
        command = line.strip()
        if not command:
            return self.emptyline()
        if command in ("exit", "EOF"):
            return super().onecmd(command)
        self.default(line)
        return False

    def default(self, line):
        """run a line of lox, errors don't end the session"""
        self.lox.run(line)
        self.lox.reporter.reset()

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):  # pylint: disable=invalid-name
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True


def main(argv:typing.Optional[typing.Sequence[str]] = None) -> int:
    """command line entry point"""
    parser = argparse.ArgumentParser(prog="treelox", description="Tree-walking lox interpreter")
    parser.add_argument("script", nargs="?", help="script to run (if empty, starts the interactive prompt)")
    parser.add_argument("--dump-ast", action="store_true", help="print the syntax tree of each statement before running it")
    parser.add_argument("--no-color", action="store_true", help="plain diagnostics")
    parser.add_argument("--debug", action="store_true", help="log interpreter internals to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    lox = Lox(ErrorReporter(color=not args.no_color), dump_ast=args.dump_ast)
    if args.script is not None:
        return lox.run_file(args.script)
    lox.run_prompt()
    return Lox.EX_OK


if __name__ == '__main__':
    sys.exit(main())

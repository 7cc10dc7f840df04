"""Tests for treelox"""
import io

import pytest

from treelox import (
    Assign, Binary, Block, Call, Environment, ErrorReporter, Expression, Get, Grouping, Interpreter, Literal, Logical,
    Lox, LoxClass, LoxFunction, LoxInstance, Parser, Print, Return, Scanner, Set, Shell, Token, TokenType, Unary, Var,
    Variable, While, ast_str, is_equal, is_truthy, kind_of, main, parse, stringify, ValueKind,
)


def tok(token_type, lexeme, line=1):
    return Token(token_type, lexeme, None, line)


def ident(name, line=1):
    return tok(TokenType.IDENTIFIER, name, line)


def parse_source(source):
    reporter = ErrorReporter(color=False)
    statements = Parser(Scanner(source, reporter).tokens, reporter).parse()
    return statements, reporter


def run(source):
    lox = Lox(ErrorReporter(color=False))
    lox.run(source)
    return lox


scanner_testcases = (
    ('var foo = "two";', [tok(TokenType.VAR, 'var'), ident('foo'), tok(TokenType.EQUAL, '='), Token(TokenType.STRING, '"two"', 'two', 1), tok(TokenType.SEMICOLON, ';'), tok(TokenType.EOF, '')]),
    ('//blah', [tok(TokenType.EOF, '')]),
    ('var foo = 5.2;', [tok(TokenType.VAR, 'var'), ident('foo'), tok(TokenType.EQUAL, '='), Token(TokenType.NUMBER, '5.2', 5.2, 1), tok(TokenType.SEMICOLON, ';'), tok(TokenType.EOF, '')]),
    ('a <= b != c', [ident('a'), tok(TokenType.LESS_EQUAL, '<='), ident('b'), tok(TokenType.BANG_EQUAL, '!='), ident('c'), tok(TokenType.EOF, '')]),
    ('this.x\nsuper', [tok(TokenType.THIS, 'this'), tok(TokenType.DOT, '.'), ident('x'), tok(TokenType.SUPER, 'super', 2), tok(TokenType.EOF, '', 2)]),
    ('class _Foo1 < Bar {}', [tok(TokenType.CLASS, 'class'), ident('_Foo1'), tok(TokenType.LESS, '<'), ident('Bar'), tok(TokenType.LEFT_BRACE, '{'), tok(TokenType.RIGHT_BRACE, '}'), tok(TokenType.EOF, '')]),
)


@pytest.mark.parametrize("source,expected", scanner_testcases)
def test_scanner_tokens(source, expected):
    assert Scanner(source).tokens == expected


def test_scanner_numbers_are_floats():
    token = Scanner('12').tokens[0]
    assert token.literal == 12.0
    assert isinstance(token.literal, float)


@pytest.mark.parametrize("source,diagnostic", (
    ('"foo', (1, "", "Unterminated string.")),
    ('"a\nb', (2, "", "Unterminated string.")),
    ('var a = @;', (1, "", "Unexpected character '@'.")),
))
def test_scanner_errors(source, diagnostic):
    reporter = ErrorReporter(color=False)
    Scanner(source, reporter)
    assert reporter.diagnostics == [diagnostic]
    assert reporter.had_error


parser_expression_testcases = (
    ('1-2+3', Binary(left=Binary(left=Literal(1.0), operator=tok(TokenType.MINUS, '-'), right=Literal(2.0)), operator=tok(TokenType.PLUS, '+'), right=Literal(3.0))),
    ('1<6>3', Binary(left=Binary(left=Literal(1.0), operator=tok(TokenType.LESS, '<'), right=Literal(6.0)), operator=tok(TokenType.GREATER, '>'), right=Literal(3.0))),
    ('1+2*3', Binary(left=Literal(1.0), operator=tok(TokenType.PLUS, '+'), right=Binary(left=Literal(2.0), operator=tok(TokenType.STAR, '*'), right=Literal(3.0)))),
    ('(1+2)*3', Binary(left=Grouping(Binary(left=Literal(1.0), operator=tok(TokenType.PLUS, '+'), right=Literal(2.0))), operator=tok(TokenType.STAR, '*'), right=Literal(3.0))),
    ('!!nil', Unary(operator=tok(TokenType.BANG, '!'), right=Unary(operator=tok(TokenType.BANG, '!'), right=Literal(None)))),
    ('-1 == 2', Binary(left=Unary(operator=tok(TokenType.MINUS, '-'), right=Literal(1.0)), operator=tok(TokenType.EQUAL_EQUAL, '=='), right=Literal(2.0))),
    ('a or b and c', Logical(left=Variable(ident('a')), operator=tok(TokenType.OR, 'or'), right=Logical(left=Variable(ident('b')), operator=tok(TokenType.AND, 'and'), right=Variable(ident('c'))))),
    ('a = b = 1', Assign(ident('a'), Assign(ident('b'), Literal(1.0)))),
    ('a.b = 1', Set(Variable(ident('a')), ident('b'), Literal(1.0))),
    ('a.b.c', Get(Get(Variable(ident('a')), ident('b')), ident('c'))),
    ('foo(a, b)', Call(callee=Variable(ident('foo')), paren=tok(TokenType.RIGHT_PAREN, ')'), arguments=[Variable(ident('a')), Variable(ident('b'))])),
    ('true', Literal(True)),
    ('"foo"', Literal('foo')),
)


@pytest.mark.parametrize("source,expected", parser_expression_testcases)
def test_parser_expressions(source, expected):
    assert Parser(Scanner(source).tokens).expression() == expected


parser_statement_testcases = (
    ('print "Hello, world!";', [Print(Literal('Hello, world!'))]),
    ('var foo;', [Var(ident('foo'), None)]),
    ('var foo = 2;', [Var(ident('foo'), Literal(2.0))]),
    ('{ var a; a = 2; }', [Block([Var(ident('a'), None), Expression(Assign(ident('a'), Literal(2.0)))])]),
    ('while (a) print a;', [While(Variable(ident('a')), Print(Variable(ident('a'))))]),
    ('for (;;) print 1;', [While(Literal(True), Print(Literal(1.0)))]),
    ('for (var i = 0; i < 3; i = i + 1) print i;', [
        Block([
            Var(ident('i'), Literal(0.0)),
            While(
                Binary(Variable(ident('i')), tok(TokenType.LESS, '<'), Literal(3.0)),
                Block([
                    Print(Variable(ident('i'))),
                    Expression(Assign(ident('i'), Binary(Variable(ident('i')), tok(TokenType.PLUS, '+'), Literal(1.0)))),
                ]),
            ),
        ]),
    ]),
    ('fun f(a) { return a; }', None),
)


@pytest.mark.parametrize("source,expected", parser_statement_testcases)
def test_parser_statements(source, expected):
    statements, reporter = parse_source(source)
    assert not reporter.had_error
    if expected is not None:
        assert statements == expected


def test_function_declaration_shape():
    statements, _ = parse_source('fun sum(a, b) { return a + b; }')
    function = statements[0]
    assert function.name == ident('sum')
    assert function.params == (ident('a'), ident('b'))
    assert function.body == (Return(tok(TokenType.RETURN, 'return'), Binary(Variable(ident('a')), tok(TokenType.PLUS, '+'), Variable(ident('b')))),)


def test_class_declaration_shape():
    statements, _ = parse_source('class B < A { init() {} go() {} }')
    klass = statements[0]
    assert klass.name == ident('B')
    assert klass.superclass == Variable(ident('A'))
    assert [method.name.lexeme for method in klass.methods] == ['init', 'go']


def test_parser_isolates_errors_per_statement():
    statements, reporter = parse_source('print 1; var = 1; print 2; var b = ; print 3;')
    assert statements == [Print(Literal(1.0)), Print(Literal(2.0)), Print(Literal(3.0))]
    assert reporter.diagnostics == [
        (1, " at '='", "Expect variable name."),
        (1, " at ';'", "Expect expression."),
    ]


def test_parser_recovers_inside_blocks():
    statements, reporter = parse_source('{ print ; print 1; }')
    assert statements == [Block([Print(Literal(1.0))])]
    assert len(reporter.diagnostics) == 1


parser_error_testcases = (
    ('1 = 2;', [Expression(Literal(1.0))], (1, " at '='", "Invalid assignment target.")),
    ('a + b = c;', None, (1, " at '='", "Invalid assignment target.")),
    ('print 1', [], (1, " at end", "Expect ';' after value.")),
    ('return 1;', None, (1, " at 'return'", "Can't return from top-level code.")),
    ('print this;', None, (1, " at 'this'", "Can't use 'this' outside of a class.")),
    ('print super.x;', None, (1, " at 'super'", "Can't use 'super' outside of a class.")),
    ('class A { f() { return super.f(); } }', None, (1, " at 'super'", "Can't use 'super' in a class with no superclass.")),
    ('class A < A {}', None, (1, " at 'A'", "A class can't inherit from itself.")),
    ('+ 1;', [], (1, " at '+'", "Missing left-hand operand.")),
    ('== 1;', [], (1, " at '=='", "Missing left-hand operand.")),
    ('foo(' + ', '.join(f'a{_}' for _ in range(256)) + ');', None, (1, " at 'a255'", "Can't have more than 255 arguments.")),
    ('fun f(' + ', '.join(f'a{_}' for _ in range(256)) + ') {}', None, (1, " at 'a255'", "Can't have more than 255 parameters.")),
    ('if (true print 1;', [], (1, " at 'print'", "Expect ')' after if condition.")),
)


@pytest.mark.parametrize("source,expected,diagnostic", parser_error_testcases)
def test_parser_errors(source, expected, diagnostic):
    statements, reporter = parse_source(source)
    assert reporter.diagnostics == [diagnostic]
    if expected is not None:
        assert statements == expected


def test_parse_supplies_missing_eof():
    assert parse([tok(TokenType.PRINT, 'print'), Token(TokenType.NUMBER, '1', 1.0, 1), tok(TokenType.SEMICOLON, ';')]) == [Print(Literal(1.0))]


def test_nodes_and_tokens_are_read_only():
    node = Literal(1.0)
    with pytest.raises(AttributeError):
        node.value = 2.0
    with pytest.raises(AttributeError):
        ident('a').lexeme = 'b'
    assert isinstance(Block([Print(node)]).statements, tuple)


def test_environment_define_overwrites_in_same_frame():
    env = Environment()
    env.define("a", 1)
    env.define("a", 2)
    assert env.get(ident("a")) == 2


def test_environment_chain():
    parent = Environment()
    parent.define("a", 1)
    child = Environment(parent)
    assert child.get(ident("a")) == 1

    child.assign(ident("a"), 3)
    assert parent.values["a"] == 3
    assert "a" not in child.values

    child.define("a", 4)
    assert child.get(ident("a")) == 4
    assert parent.get(ident("a")) == 3
    assert "a" in child


def test_environment_undefined():
    env = Environment(Environment())
    with pytest.raises(Environment.RuntimeError) as exc:
        env.get(ident("nope", line=7))
    assert str(exc.value) == "Undefined variable 'nope'."
    assert exc.value.token.line == 7

    with pytest.raises(Environment.RuntimeError):
        env.assign(ident("nope"), 1)
    assert "nope" not in env
    assert "nope" not in env.enclosing


@pytest.mark.parametrize("value,expected", (
    (None, False), (False, False), (True, True), (0.0, True), ("", True), ("a", True),
))
def test_truthiness(value, expected):
    assert is_truthy(value) is expected


@pytest.mark.parametrize("left,right,expected", (
    (None, None, True),
    (None, False, False),
    (1.0, "1", False),
    (True, 1.0, False),
    (False, 0.0, False),
    (1.0, 1.0, True),
    ("a", "a", True),
))
def test_equality(left, right, expected):
    assert is_equal(left, right) is expected


@pytest.mark.parametrize("value,expected", (
    (None, "nil"), (True, "true"), (False, "false"), (3.0, "3"), (2.5, "2.5"), (-0.5, "-0.5"), (-0.0, "-0"), ("hi", "hi"),
))
def test_stringify(value, expected):
    assert stringify(value) == expected


def test_kind_of_rejects_host_values():
    assert kind_of(1.0) is ValueKind.NUMBER
    assert kind_of(LoxClass("A", None, {})) is ValueKind.CALLABLE
    with pytest.raises(TypeError):
        kind_of([])


interpret_output_testcases = (
    ('var a = 1; { var a = 2; print a; } print a;', "2\n1\n"),
    ('for (var i = 0; i < 3; i = i + 1) print i;', "0\n1\n2\n"),
    ('{ var i = 0; while (i < 3) { print i; i = i + 1; } }', "0\n1\n2\n"),
    ('if (0) print "zero"; if ("") print "empty"; if (nil) print "nil"; else print "falsy";', "zero\nempty\nfalsy\n"),
    ('print nil == nil; print nil == false; print 1 == "1"; print true == 1; print "a" == "a"; print 1 != 2;', "true\nfalse\nfalse\nfalse\ntrue\ntrue\n"),
    ('print 1 + 2; print 7 / 2; print "foo" + "bar"; print -(3); print !nil; print 2 * 3 - 1;', "3\n3.5\nfoobar\n-3\ntrue\n5\n"),
    ('print 1 < 2; print 2 <= 2; print 3 > 4; print 4 >= 4;', "true\ntrue\nfalse\ntrue\n"),
    ('print nil or "yes"; print 0 and "and"; print false and 1; print "first" or 2;', "yes\nand\nfalse\nfirst\n"),
    ('print false and nope; print true or nope; print nil and nope();', "false\ntrue\nnil\n"),
    ('var n = 0; fun bump() { n = n + 1; return true; } print true or bump(); print false and bump(); print n;', "true\nfalse\n0\n"),
    ('print -0; print 0 * -1;', "-0\n-0\n"),
    ('var a = 1; var a = 2; print a;', "2\n"),
    ('var a; print a;', "nil\n"),
    ('var a; var b = a = 3; print a + b;', "6\n"),
    ('fun f() {} print f; print clock; print f();', "<fn f>\n<native fn>\nnil\n"),
    ('print clock() > 0;', "true\n"),
    ('fun fib(n) { if (n <= 1) return n; return fib(n - 2) + fib(n - 1); } print fib(10);', "55\n"),
    ('fun makeCounter() { var i = 0; fun count() { i = i + 1; return i; } return count; } var c = makeCounter(); c(); print c(); var d = makeCounter(); print d();', "2\n1\n"),
    ('fun find() { var i = 0; while (true) { { if (i == 3) return i; } i = i + 1; } } print find();', "3\n"),
    ('fun outer() { for (var i = 0; i < 10; i = i + 1) { if (i == 2) { return "early"; } } return "late"; } print outer();', "early\n"),
    ('class Point { init(x, y) { this.x = x; this.y = y; } sum() { return this.x + this.y; } } var p = Point(1, 2); print p.sum(); print p; print Point;', "3\nPoint instance\nPoint\n"),
    ('class Foo { init() { this.v = 1; return 42; } } var f = Foo(); print f; print f.v; print f.init();', "Foo instance\n1\nFoo instance\n"),
    ('class Foo { init() { return; } } print Foo();', "Foo instance\n"),
    ('class C { init(n) { this.n = n; } get() { return this.n; } } var m = C(7).get; print m();', "7\n"),
    ('class A { name() { return "A"; } greet() { return "hi " + this.name(); } } class B < A { name() { return "B/" + super.name(); } } print B().greet();', "hi B/A\n"),
    ('class A { init(x) { this.x = x; } } class B < A {} print B(5).x;', "5\n"),
    ('class A { f() { return "method"; } } var a = A(); a.f = "field"; print a.f;', "field\n"),
    ('class A { f() { fun inner() { return this; } return inner(); } } print A().f();', "A instance\n"),
)


@pytest.mark.parametrize("source,expected", interpret_output_testcases)
def test_interpret_output(source, expected, capsys):
    lox = run(source)
    assert not lox.reporter.had_error
    assert not lox.reporter.had_runtime_error, lox.reporter.runtime_errors
    assert capsys.readouterr().out == expected


def test_for_desugaring_matches_hand_written_while(capsys):
    run('for (var i = 0; i < 3; i = i + 1) print i;')
    desugared = capsys.readouterr().out
    run('{ var i = 0; while (i < 3) { print i; i = i + 1; } }')
    assert capsys.readouterr().out == desugared == "0\n1\n2\n"


def test_closures_capture_each_iteration_frame(capsys):
    run('''
        var a; var b; var c;
        for (var i = 0; i < 3; i = i + 1) {
            var j = i;
            fun show() { print j; }
            if (i == 0) a = show;
            if (i == 1) b = show;
            if (i == 2) c = show;
        }
        a(); b(); c();
    ''')
    assert capsys.readouterr().out == "0\n1\n2\n"


def test_closures_share_the_loop_variable_frame(capsys):
    run('''
        var a; var b; var c;
        for (var i = 0; i < 3; i = i + 1) {
            fun show() { print i; }
            if (i == 0) a = show;
            if (i == 1) b = show;
            if (i == 2) c = show;
        }
        a(); b(); c();
    ''')
    assert capsys.readouterr().out == "3\n3\n3\n"


def test_closures_observe_later_mutation(capsys):
    run('var x = "before"; fun show() { print x; } x = "after"; show();')
    assert capsys.readouterr().out == "after\n"


runtime_error_testcases = (
    ('print undefined;', "Undefined variable 'undefined'."),
    ('undeclared = 1;', "Undefined variable 'undeclared'."),
    ('"a" + 1;', "Operands must be two numbers or two strings."),
    ('1 + nil;', "Operands must be two numbers or two strings."),
    ('-"a";', "Operand must be a number."),
    ('1 < "2";', "Operands must be numbers."),
    ('true * 2;', "Operands must be numbers."),
    ('1 / 0;', "Division by zero."),
    ('"str"();', "Can only call functions and classes."),
    ('fun f(a, b) {} f(1);', "Expected 2 arguments but got 1."),
    ('class A {} A(1);', "Expected 0 arguments but got 1."),
    ('class A { init(a) {} } A();', "Expected 1 arguments but got 0."),
    ('var x = 1; x.y;', "Only instances have properties."),
    ('var x = 1; x.y = 2;', "Only instances have fields."),
    ('class A {} A().missing;', "Undefined property 'missing'."),
    ('var NotAClass = 1; class B < NotAClass {}', "Superclass must be a class."),
    ('class A {} class B < A { f() { return super.missing(); } } B().f();', "Undefined property 'missing'."),
)


@pytest.mark.parametrize("source,message", runtime_error_testcases)
def test_runtime_errors(source, message):
    lox = run(source)
    assert not lox.reporter.had_error
    assert lox.reporter.had_runtime_error
    assert [str(_) for _ in lox.reporter.runtime_errors] == [message]


def test_assignment_never_creates_a_global():
    lox = run('undeclared = 1;')
    assert "undeclared" not in lox.interpreter.globals
    lox.reporter.reset()
    lox.run('print undeclared;')
    assert [str(_) for _ in lox.reporter.runtime_errors] == ["Undefined variable 'undeclared'."]


def test_runtime_error_aborts_program(capsys):
    lox = run('print 1; print nope; print 2;')
    assert capsys.readouterr().out == "1\n"
    assert lox.reporter.runtime_errors[0].token.lexeme == "nope"


def test_runtime_error_restores_scope():
    lox = run('{ var inner = 1; { print missing; } }')
    assert lox.interpreter.environment is lox.interpreter.globals
    assert "inner" not in lox.interpreter.globals


def test_return_restores_scope():
    lox = run('fun f() { { var x = 1; { return x; } } } var r = f();')
    assert lox.interpreter.environment is lox.interpreter.globals
    assert lox.interpreter.globals.values["r"] == 1.0
    assert "x" not in lox.interpreter.globals


def test_top_level_return_is_a_runtime_error():
    statements = parse(Scanner('return 1;').tokens, ErrorReporter(stream=io.StringIO()))
    reporter = ErrorReporter(color=False, stream=io.StringIO())
    interpreter = Interpreter(reporter)
    interpreter.interpret(statements)
    assert [str(_) for _ in reporter.runtime_errors] == ["Can't return from top-level code."]


def test_nothing_runs_after_a_parse_error(capsys):
    lox = run('print 1; print ;')
    assert lox.reporter.had_error
    assert capsys.readouterr().out == ""


def test_function_captures_declaring_environment():
    lox = run('fun f() {} { fun g() {} var h = g; }')
    f = lox.interpreter.globals.values["f"]
    assert isinstance(f, LoxFunction)
    assert f.closure is lox.interpreter.globals
    assert f.arity == 0


def test_bind_makes_a_new_function():
    lox = run('class A { init() {} m() { return this; } } var a = A();')
    klass = lox.interpreter.globals.values["A"]
    instance = lox.interpreter.globals.values["a"]
    assert isinstance(instance, LoxInstance)
    method = klass.find_method("m")
    bound = method.bind(instance)
    assert bound is not method
    assert bound.declaration is method.declaration
    assert bound.closure.enclosing is method.closure
    assert bound.closure.values == {"this": instance}
    assert "this" not in method.closure.values
    assert klass.find_method("init").is_initializer
    assert not method.is_initializer
    with pytest.raises(AttributeError):
        bound.closure = Environment()


def test_methods_are_looked_up_through_superclasses():
    lox = run('class A { f() {} } class B < A { g() {} }')
    b = lox.interpreter.globals.values["B"]
    assert b.find_method("f") is lox.interpreter.globals.values["A"].methods["f"]
    assert b.find_method("g") is b.methods["g"]
    assert b.find_method("h") is None


def test_define_native(capsys):
    lox = Lox(ErrorReporter(color=False))
    lox.interpreter.define_native("double", 1, lambda _, value: value * 2)
    lox.run('print double(21);')
    assert capsys.readouterr().out == "42\n"


def test_globals_persist_across_runs(capsys):
    lox = run('var a = 1;')
    lox.run('print a + 1;')
    assert capsys.readouterr().out == "2\n"


@pytest.mark.parametrize("source,expected", (
    ('print -1 + 2 * 3;', ['(print (+ (- 1) (* 2 3)))']),
    ('var a = "x";', ['(var a = "x")']),
    ('var a;', ['(var a)']),
    ('for (var i = 0; i < 3; i = i + 1) print i;', ['(block (var i = 0) (while (< i 3) (block (print i) (; (= i (+ i 1))))))']),
    ('if (a and b) print (1); else print nil;', ['(if-else (and a b) (print (group 1)) (print nil))']),
    ('class B < A { f() { return this.x; } }', ['(class B < A (fun f () (return (. this x))))']),
    ('a.b = super_(1, 2);', ['(; (= (. a b) (call super_ 1 2)))']),
))
def test_ast_str(source, expected):
    statements, reporter = parse_source(source)
    assert not reporter.had_error
    assert [ast_str(_) for _ in statements] == expected


def test_reporter_format():
    buf = io.StringIO()
    reporter = ErrorReporter(stream=buf, color=False)
    reporter.token_error(ident('x', line=3), "Boom.")
    reporter.token_error(tok(TokenType.EOF, '', 4), "Late.")
    assert buf.getvalue() == "[line 3] Error at 'x': Boom.\n[line 4] Error at end: Late.\n"
    assert reporter.had_error
    reporter.reset()
    assert not reporter.had_error
    assert reporter.diagnostics == []


def test_reporter_color():
    buf = io.StringIO()
    ErrorReporter(stream=buf, color=True).error(1, "Boom.")
    assert "Boom." in buf.getvalue()
    assert "[line 1] Error" in buf.getvalue()


def test_shell_keeps_going_after_errors(capsys):
    lox = Lox(ErrorReporter(color=False))
    shell = Shell(lox)
    shell.onecmd('var a = 1;')
    shell.onecmd('print ;')
    shell.onecmd('print nope;')
    shell.onecmd('print a + 1;')
    assert capsys.readouterr().out == "2\n"
    assert not lox.reporter.had_error
    assert shell.onecmd('exit')


@pytest.mark.parametrize("source,status,out", (
    ('print "hi";', 0, "hi\n"),
    ('print ;', 65, ""),
    ('print 1; print nope;', 70, "1\n"),
))
def test_main_exit_status(source, status, out, tmp_path, capsys):
    script = tmp_path / "script.lox"
    script.write_text(source)
    assert main([str(script), "--no-color"]) == status
    assert capsys.readouterr().out == out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.lox")]) == 66
    assert "Could not open" in capsys.readouterr().err


def test_main_dump_ast(tmp_path, capsys):
    script = tmp_path / "script.lox"
    script.write_text('print 1;')
    assert main([str(script), "--dump-ast", "--no-color"]) == 0
    assert capsys.readouterr().out == "(print 1)\n1\n"


@pytest.mark.parametrize("lines,out", (
    (('fun help(x) { print x; }', 'help(5);'), "5\n"),
    (('var EOF = "eof";', 'print EOF;'), "eof\n"),
    (('fun exit() { return "stay"; }', 'print exit();'), "stay\n"),
))
def test_shell_runs_lox_named_like_commands(lines, out, capsys):
    shell = Shell(Lox(ErrorReporter(color=False)))
    for line in lines:
        assert not shell.onecmd(line)
    assert capsys.readouterr().out == out


def test_shell_exit_only_on_bare_command(capsys):
    lox = Lox(ErrorReporter(color=False))
    shell = Shell(lox)
    assert not shell.onecmd('exit = 1;')
    assert "Undefined variable 'exit'." in capsys.readouterr().err
    assert not shell.onecmd('')
    assert shell.onecmd('  exit  ')
    assert shell.onecmd('EOF')

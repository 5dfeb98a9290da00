'''
Infix lexer tests
'''

import regex

from infixcalc.util import ParseError, MalformedExpression
from infixcalc.lexer import Lexer, Token

from pytest import raises


def test_numbers(lexer):
    assert lexer.tokenize('7') == [Token('number', 7.0)]
    assert lexer.tokenize('123.45') == [Token('number', 123.45)]
    # Trailing point, missing leading zero
    assert lexer.tokenize('12.') == [Token('number', 12.0)]
    assert lexer.tokenize('.5') == [Token('number', 0.5)]


def test_operators(lexer):
    assert lexer.tokenize('12.+3*4/2') == [Token('number', 12.0),
                                           Token('operator', '+'),
                                           Token('number', 3.0),
                                           Token('operator', '*'),
                                           Token('number', 4.0),
                                           Token('operator', '/'),
                                           Token('number', 2.0)]


def test_binary_minus(lexer):
    assert lexer.tokenize('5-3') == [Token('number', 5.0),
                                     Token('operator', '-'),
                                     Token('number', 3.0)]


def test_unary_minus(lexer):
    assert lexer.tokenize('-5') == [Token('number', -5.0)]
    assert lexer.tokenize('5--3') == [Token('number', 5.0),
                                      Token('operator', '-'),
                                      Token('number', -3.0)]
    assert lexer.tokenize('-5+-2') == [Token('number', -5.0),
                                       Token('operator', '+'),
                                       Token('number', -2.0)]
    assert lexer.tokenize('2*-.5') == [Token('number', 2.0),
                                       Token('operator', '*'),
                                       Token('number', -0.5)]


def test_unfoldable_minus(lexer):
    # Only the second minus has a number to fold into.
    assert lexer.tokenize('--5') == [Token('operator', '-'),
                                     Token('number', -5.0)]
    assert lexer.tokenize('5*-') == [Token('number', 5.0),
                                     Token('operator', '*'),
                                     Token('operator', '-')]


def test_unlexable(lexer):
    with raises(ParseError, match=regex.escape("Couldn't lex 'abc'")):
        lexer.tokenize('abc')
    with raises(ParseError, match=regex.escape("Couldn't lex ' /2'")):
        lexer.tokenize('1* /2')
    with raises(ParseError, match=regex.escape("Couldn't lex 'e20'")):
        lexer.tokenize('1e20')
    with raises(ParseError, match=regex.escape("Couldn't lex '.'")):
        lexer.tokenize('.')


def test_lex_stops_on_first_bad(lexer):
    lexemes = lexer.lex('1+x')
    assert next(lexemes).group(0) == '1'
    assert next(lexemes).group(0) == '+'
    with raises(ParseError):
        next(lexemes)


def test_split(lexer):
    assert lexer.split(lexer.tokenize('7')) == ([7.0], [])
    assert lexer.split(lexer.tokenize('1+2*3')) == ([1.0, 2.0, 3.0],
                                                    ['+', '*'])


def test_split_malformed(lexer):
    for line in '', '1+', '+1', '1++2', '*', '-', '1.2.3', '1.2.3+4-5':
        with raises(MalformedExpression):
            lexer.split(lexer.tokenize(line))


class IntegerLexer(Lexer):
    IFMT = int


def test_input_format():
    l = IntegerLexer()
    assert l.tokenize('12') == [Token('number', 12)]
    assert l.tokenize('5--3')[-1] == Token('number', -3)
    with raises(ParseError, match=regex.escape('Cannot convert 12.')):
        l.tokenize('12.')

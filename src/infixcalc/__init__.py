'''
Infix calculator.

Evaluates flat expressions of decimal numbers and the four arithmetic
operators, + - * /, with the usual precedence: multiplication and division
before addition and subtraction, ties left to right. No parentheses.

Results are meant for a 15 character display: a plain decimal string that
fits, or Error.

>>> evaluate('2+3*4')
'14'
>>> evaluate('1/3')
'0.3333333333333'
>>> evaluate('5/0')
'Error'
'''

from .cli import CLI
from .evaluator import Evaluator, calculate, evaluate
from .formatter import Formatter
from .lexer import Lexer, Token
from .reducer import Reducer
from .util import (CalcError, ParseError, MalformedExpression, DivisionByZero,
                   NonFinite, DisplayOverflow)


__all__ = 'evaluate', 'calculate', 'Evaluator', 'Lexer', 'Token', \
          'Reducer', 'Formatter', 'CLI', 'CalcError', 'ParseError', \
          'MalformedExpression', 'DivisionByZero', 'NonFinite', \
          'DisplayOverflow'

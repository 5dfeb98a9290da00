import logging

from .formatter import Formatter
from .lexer import Lexer
from .reducer import Reducer
from .util import CalcError


logger = logging.getLogger(__name__)


class Evaluator:
    '''
    Infix calculator: lexes, reduces, and formats an expression.

    Holds no state between calls; share it freely.
    '''

    ERROR = 'Error'

    def __init__(self, lexer=None, reducer=None, formatter=None):
        self.lexer = lexer or Lexer()
        self.reducer = reducer or Reducer()
        self.formatter = formatter or Formatter()

    def calculate(self, expression):
        '''
        Return display string for expression.

        :raises CalcError: specific subclass for what went wrong.
        '''
        tokens = self.lexer.tokenize(expression)
        numbers, operators = self.lexer.split(tokens)
        result = self.reducer.reduce(numbers, operators)
        return self.formatter.format(result)

    def evaluate(self, expression):
        '''
        Return display string for expression, or ERROR. Never raises.
        '''
        try:
            return self.calculate(expression)
        except CalcError as e:
            logger.debug('%r: %s: %s', expression, type(e).__name__, e.args[0])
            return self.ERROR


_evaluator = Evaluator()

calculate = _evaluator.calculate
evaluate = _evaluator.evaluate

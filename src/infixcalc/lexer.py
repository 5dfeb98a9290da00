from collections import namedtuple
from functools import reduce
import operator

import regex

from .util import ParseError, MalformedExpression, wrap_user_errors


Token = namedtuple('Token', ['kind', 'value'])


class Lexer:
    '''
    Lexer for the infix calculator's *regular* grammar.

    Holds no internal state, so one instance can be shared between callers.
    '''
    # Number, unsigned. Signs are operators until folded by tokenize().
    NUMBER = r'''
              (?:
                  # 1, 12, 12. (notice trailing dot), 1.3
                  [0-9]+
                  (?:
                      \.
                      [0-9]*
                  )?
              )|(?:
                  # .5, but not a lone .
                  \.
                  [0-9]+
              )
              '''
    # Conversion of literals on input
    IFMT = float

    OPERATORS = '+', '-', '*', '/'
    MINUS = '-'

    assert not [operator
                for operator
                in OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes.

        Raises ParseError on the first bit of text that isn't a lexeme.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise ParseError("Couldn't lex {0!r}".format(line))

    def matchedgroups(self, match):
        '''
        Return the groups a lexeme actually matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def tokenize(self, line):
        '''
        Turn a line into number and operator tokens.

        A minus at the start, or right after another operator, is folded into
        the number following it: 5--3 is 5 minus -3.
        '''
        lexemes = [self.matchedgroups(match) for match in self.lex(line)]
        tokens = []
        i = 0
        while i < len(lexemes):
            groups = lexemes[i]
            if 'number' in groups:
                tokens.append(Token('number',
                                    self._iconvert(groups['number'])))
                i += 1
                continue
            op = groups['operator']
            if op == self.MINUS and \
               (i == 0 or 'operator' in lexemes[i - 1]) and \
               i + 1 < len(lexemes) and 'number' in lexemes[i + 1]:
                tokens.append(Token('number',
                                    self._iconvert(op +
                                                   lexemes[i + 1]['number'])))
                # Skip the number we just consumed
                i += 2
                continue
            tokens.append(Token('operator', op))
            i += 1
        return tokens

    def split(self, tokens):
        '''
        Split tokens into numbers and the operators between them.

        Numbers and operators must alternate, starting and ending on a number.
        '''
        numbers = [token.value for token in tokens[0::2]]
        operators = [token.value for token in tokens[1::2]]
        if not tokens or \
           any(token.kind != 'number' for token in tokens[0::2]) or \
           any(token.kind != 'operator' for token in tokens[1::2]) or \
           len(numbers) != len(operators) + 1:
            raise MalformedExpression(
                'Expected alternating numbers and operators, got {}'.format(
                    ' '.join(str(token.value) for token in tokens) or
                    'nothing'))
        return numbers, operators

    @wrap_user_errors('Cannot convert {1}', ParseError)
    def _iconvert(self, number):
        '''
        Convert literal to intended internal representation on input.
        '''
        return type(self).IFMT(number)

import math
import operator

from .util import DivisionByZero, NonFinite


def _divide(left, right):
    if right == 0:
        raise DivisionByZero('Division by zero: {} / {}'.format(left, right))
    return operator.__truediv__(left, right)


class Reducer:
    '''
    Reduce numbers and infix operators to a single number.

    One left-to-right pass per precedence level, highest first. Good enough
    for two levels and no parentheses.
    '''

    # Operator tables, by decreasing precedence.
    PRECEDENCE = [
        {
            '*': operator.__mul__,
            '/': _divide,
        },
        {
            '+': operator.__add__,
            '-': operator.__sub__,
        },
    ]

    def reduce(self, numbers, operators):
        '''
        Return the value of n0 o1 n1 o2 n2 ... as a finite float.
        '''
        for ops in type(self).PRECEDENCE:
            numbers, operators = self._pass(ops, numbers, operators)
            if not operators:
                break
        result, = numbers
        if not math.isfinite(result):
            raise NonFinite('Result is {}'.format(result))
        return result

    def _pass(self, ops, numbers, operators):
        '''
        Apply operators in ops, carrying the rest over to the next pass.
        '''
        carried_numbers = []
        carried_operators = []
        accumulator = numbers[0]
        for op, number in zip(operators, numbers[1:]):
            if op in ops:
                accumulator = ops[op](accumulator, number)
            else:
                carried_numbers.append(accumulator)
                carried_operators.append(op)
                accumulator = number
        carried_numbers.append(accumulator)
        return carried_numbers, carried_operators

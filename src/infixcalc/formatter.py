from decimal import Decimal
import math

from .util import DisplayOverflow


class Formatter:
    '''
    Render numbers for a fixed width display.

    Never uses exponent notation; anything that would need it is an overflow.
    '''

    WIDTH = 15
    MAX_MAGNITUDE = 1e10
    MIN_MAGNITUDE = 1e-5

    def __init__(self, width=None, max_magnitude=None, min_magnitude=None):
        self.width = width if width is not None else type(self).WIDTH
        self.max_magnitude = max_magnitude \
            if max_magnitude is not None else type(self).MAX_MAGNITUDE
        self.min_magnitude = min_magnitude \
            if min_magnitude is not None else type(self).MIN_MAGNITUDE

    def format(self, number):
        '''
        Return number as a decimal string no wider than the display.
        '''
        text = self.shortest(number)
        if len(text) <= self.width:
            return text

        magnitude = abs(number)
        if magnitude > self.max_magnitude or \
           0 < magnitude < self.min_magnitude:
            raise DisplayOverflow('{} is out of display range'.format(text))

        text = self.fixed(number)
        if len(text) > self.width:
            raise DisplayOverflow('{} is too wide for display'.format(text))
        return text

    def shortest(self, number):
        '''
        Shortest decimal that reads back as number, without exponent.
        '''
        # repr() is shortest round-trip; Decimal spells out its exponent.
        return self._strip(format(Decimal(repr(number)), 'f'))

    def fixed(self, number):
        '''
        Round number to as many decimal places as the display can show.
        '''
        # Below one, the integral part still takes a digit: 0.
        integral = len(str(math.floor(abs(number))))
        sign = 1 if number < 0 else 0
        places = max(self.width - sign - integral - 1, 0)
        return self._strip('{:.{}f}'.format(number, places))

    def _strip(self, text):
        '''
        Drop trailing decimal zeros, and the point if nothing is left after it.
        '''
        if '.' in text:
            text = text.rstrip('0')
            if text.endswith('.'):
                text = text[:-1]
        if text == '-0':
            return '0'
        return text

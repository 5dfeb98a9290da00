from functools import wraps


class CalcError(Exception):
    pass


class ParseError(CalcError):
    '''
    Expression holds text that is neither a number nor an operator.
    '''


class MalformedExpression(CalcError):
    '''
    Numbers and operators don't alternate, e.g., 1++2, 1+, or nothing at all.
    '''


class DivisionByZero(CalcError):
    pass


class NonFinite(CalcError):
    '''
    Result overflowed to infinity, or isn't a number at all.
    '''


class DisplayOverflow(CalcError):
    '''
    Result is finite, but won't fit the display.
    '''


def wrap_user_errors(fmt, error=CalcError):
    '''
    Decorator that converts unexpected exceptions to calculator errors.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator

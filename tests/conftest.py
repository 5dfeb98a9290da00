from pytest import Item, fixture

from infixcalc import Evaluator, Formatter, Lexer, Reducer


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit which expressions
    were checked.

    Needs enable_assertion_pass_hook; use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def reducer() -> Reducer:
    return Reducer()


@fixture
def formatter() -> Formatter:
    return Formatter()


@fixture
def evaluator() -> Evaluator:
    return Evaluator()

from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .util import CalcError
from .lexer import Lexer
from .evaluator import Evaluator


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=InMemoryHistory(),
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = '= '

    def _lines(self):
        '''
        Yield expressions to work on, stripped, skipping blank lines.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if line:
                yield line

    def dumper(self):
        '''
        Dump tokens of each expression.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(value)>')
        for line in self._lines():
            try:
                for token in lexer.tokenize(line):
                    print(token.kind, repr(token.value), sep='\t')
            except CalcError as e:
                print(e.args[0], file=stderr)

    def executor(self):
        '''
        Evaluate each expression, printing the result or Error.
        '''
        evaluator = Evaluator()
        for line in self._lines():
            print(evaluator.evaluate(line), flush=True)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or stdin.isatty() and stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix calculator: + - * / with usual precedence')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='explain every Error on stderr')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's own.
        '''
        self.args = self.argument_parser.parse_args(args)
        level = logging.DEBUG if self.args.verbose else logging.WARNING
        logging.basicConfig(level=level,
                            format='%(levelname)s: %(message)s',
                            stream=stderr)
        # basicConfig is a no-op when the root logger is already set up
        logging.getLogger(__package__).setLevel(level)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)

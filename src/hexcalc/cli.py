from os import isatty, path
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory

from . import __version__
from .machine import Machine
from .operators import OPERATORS
from .util import UnmatchedToken


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def _history(self):
        if self.history_file is None:
            return InMemoryHistory()
        return FileHistory(path.expanduser(self.history_file))

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=self._history(),
                                    enable_suspend=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the hex calculator.
    '''

    DEFAULT_PROMPT = '> '
    RC_FILE = '~/.hexcalcrc'
    HISTORY_FILE = '~/.hexcalc_history'
    BANNER = 'Hexcalc {}, a Reverse Polish Notation Hex Calculator.'

    def dumper(self):
        '''
        Dump the kind each token of input is classified as.
        '''
        machine = Machine()
        print('<kind>\t<repr(token)>')
        for line in self.args.expressions:
            for token in machine.lexer.lex(line):
                if token in OPERATORS:
                    kind = 'operator'
                else:
                    try:
                        kind = machine.lexer.kind(
                            machine.lexer.classify(token))
                    except UnmatchedToken:
                        kind = 'unmatched'
                print(kind, repr(token), sep='\t')

    def executor(self):
        '''
        Run machine (hex RPN calculator).
        '''
        machine = Machine(verbose=self.args.verbose)
        self._load_rc(machine)
        if self._batch():
            machine.load(self.args.expressions)
            machine.printtop()
        else:
            if self._interactive():
                print(self.BANNER.format(__version__))
            for line in self.args.expressions:
                machine.evaluate_line(line)
                machine.printtop()
        print('Bye')

    def _load_rc(self, machine):
        '''
        Run startup script, if any.
        '''
        if self.args.rc is None:
            return
        rc = path.expanduser(self.args.rc)
        if not path.isfile(rc):
            logger.debug('No startup script %s', rc)
            return
        logger.debug('Loading startup script %s', rc)
        # A stray byte only spoils its own line
        with open(rc, encoding='utf-8', errors='replace') as fp:
            machine.load(fp)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.HISTORY_FILE)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Reverse Polish Notation hex calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        rc_groups = self.argument_parser.add_mutually_exclusive_group()
        rc_groups.add_argument('--rc',
                               metavar='FILE',
                               help='startup script (default: %(default)s)')
        rc_groups.add_argument('--no-rc',
                               action='store_const',
                               const=None,
                               dest='rc',
                               help='skip the startup script')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin,
                                          rc=self.RC_FILE)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def _batch(self):
        return isinstance(self.args.expressions, list)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=stderr)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)

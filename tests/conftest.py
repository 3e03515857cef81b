from pytest import fixture

from hexcalc.machine import Machine


@fixture
def machine():
    '''
    Fresh machine, printing on (captured) stdout.
    '''
    return Machine()


@fixture
def run(machine):
    '''
    Evaluate lines on the machine fixture, return the stack, top first.
    '''
    def run(*lines):
        machine.load(lines)
        return machine.stack.values()
    return run

from collections import deque

from .util import StackEmpty, IndexOutOfRange


class Stack:
    '''
    Operand stack. Complains instead of misbehaving on underflow.

    The right end of the underlying deque is the top.
    '''

    def __init__(self, values=()):
        self._values = deque(values)

    def __len__(self):
        return len(self._values)

    def __bool__(self):
        return bool(self._values)

    def size(self):
        return len(self._values)

    def push(self, value):
        self._values.append(value)

    def pop(self):
        if not self._values:
            raise StackEmpty('Stack empty')
        return self._values.pop()

    def top(self):
        if not self._values:
            raise StackEmpty('Stack empty')
        return self._values[-1]

    def at(self, idx):
        '''
        Element idx from the top, 1-based: at(1) is the top, at(size()) the
        bottom.
        '''
        if not 1 <= idx <= len(self._values):
            raise IndexOutOfRange(
                'Stack index {} out of range 1..{}'.format(idx,
                                                           len(self._values)))
        return self._values[-idx]

    def _check_rotatable(self):
        if len(self._values) < 2:
            raise StackEmpty('Stack size < 2, cannot rotate')

    def rotate_down(self):
        '''
        Move the top to the bottom.
        '''
        self._check_rotatable()
        self._values.rotate(1)

    def rotate_up(self):
        '''
        Move the bottom to the top.
        '''
        self._check_rotatable()
        self._values.rotate(-1)

    def clear(self):
        self._values.clear()

    def values(self):
        '''
        All elements, top first.
        '''
        return list(reversed(self._values))

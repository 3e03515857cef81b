from .util import UnknownVariable


class Variables:
    '''
    Named values, listed in order of first assignment.
    '''

    def __init__(self):
        self._vars = dict()

    def __contains__(self, name):
        return name in self._vars

    def __len__(self):
        return len(self._vars)

    def assign(self, name, value):
        self._vars[name] = value

    def get(self, name):
        try:
            return self._vars[name]
        except KeyError:
            raise UnknownVariable('No such variable: {}'.format(name)) from None

    def delete(self, name):
        self._vars.pop(name, None)

    def entries(self):
        return self._vars.items()

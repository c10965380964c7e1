class FrozenDict(dict):
    """
    A dict that refuses every in-place change once built

    Used for lookup tables that are shared across conversions
    """

    def _immutable(self, *args, **kws):
        raise TypeError(f"'{self.__class__.__name__}' does not support item assignment or removal")

    __setitem__ = _immutable
    __delitem__ = _immutable
    __ior__ = _immutable
    pop = _immutable
    popitem = _immutable
    clear = _immutable
    update = _immutable
    setdefault = _immutable

    def __hash__(self):
        return hash(frozenset(self.items()))

    def __or__(self, other):
        # Extending a table yields a new one
        return FrozenDict({**self, **other})

    def copy(self):
        return FrozenDict(self)

    def __repr__(self):
        return f"FrozenDict({dict.__repr__(self)})"

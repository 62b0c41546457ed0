def is_sparse(values, pred):
    expect = True
    flip_count = 0
    for v in values:
        if pred(v) != expect:
            flip_count += 1
            if flip_count > 1:
                return True
            expect = not expect
    return False


def halved(points):
    return [p / 2 for p in points]


class CheckedRecord:
    """Named tuple mixin routing ``_make`` and ``_replace`` through ``__new__``.

    Put it before the named tuple base so argument checks done in ``__new__``
    also apply to copies made with ``_replace``.
    """

    __slots__ = ()

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

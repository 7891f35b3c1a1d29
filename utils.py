def pmts(v, type_, extra_information=""):
    """Poor man's type system"""
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        type_.__name__ if isinstance(type_, type) else " or ".join(t.__name__ for t in type_),
        type(v).__name__,
        "" if not extra_information else "; %s" % extra_information
        )


def pmts_or_none(v, type_, extra_information=""):
    """Poor man's type system; value may be None"""
    if v is not None:
        pmts(v, type_, extra_information)


def bounded(value, lowest, highest):
    """
    >>> bounded(5, 0, 10)
    5
    >>> bounded(-3, 0, 10)
    0
    >>> bounded(12, 0, 10)
    10

    If the range is empty, the lower end wins:
    >>> bounded(5, 10, 0)
    10
    """
    return max(lowest, min(highest, value))

"""
Dual mutable/immutable dispatch.

Every method decorated with :func:`mutator` modifies its receiver in place and
returns the result (usually the receiver itself, or a promoted value). For each
such method ``op`` the class gets a non-mutating counterpart ``op_`` which clones
the receiver and invokes ``op`` on the clone. The counterpart is generated, never
written by hand, so both forms always share one algorithm.

    >>> x = RationalNumber(1, 2)
    >>> y = x.negative_()   # x is still 1/2, y is -1/2
    >>> x.negative()        # x is now -1/2
"""

from abc import ABC, abstractmethod

from .names import IMMUTABLE_SUFFIX


def mutator(method):
    """Mark ``method`` as mutating; its ``_`` counterpart is generated on the class"""
    method.__mutator__ = True
    return method


def _immutable_form(owner: type, name: str):

    def immutable(self, *args, **kwargs):
        return getattr(self.clone(), name)(*args, **kwargs)

    immutable.__name__ = name + IMMUTABLE_SUFFIX
    immutable.__qualname__ = f"{owner.__qualname__}.{immutable.__name__}"
    immutable.__doc__ = f"Non-mutating form of {name}(): applies it to a clone and returns the clone's result."
    return immutable


def is_mutator(method) -> bool:
    return getattr(method, "__mutator__", False)


class Mutable(ABC):
    """
    Base class for values offering the dual calling convention.

    Subclasses implement clone(); the ``_`` counterparts are resolved through
    getattr on the clone, so overriding ``op`` in a subclass also changes ``op_``.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name, member in list(vars(cls).items()):
            if is_mutator(member):
                setattr(cls, name + IMMUTABLE_SUFFIX, _immutable_form(cls, name))

    @abstractmethod
    def clone(self):
        """Create an independent copy of this value"""
        pass

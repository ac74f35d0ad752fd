#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""mathmodel package for exact and inexact generic algebra

Number kinds (IntegerNumber, RationalNumber, RealNumber, ComplexNumber) share
one arithmetic contract; Matrix and Vector are built on top of it. Every mutating
operation ``op`` has a non-mutating counterpart ``op_`` working on a clone.

    >>> from mathmodel import RationalNumber, RealNumber
    >>> RationalNumber(1, 3).add_(RationalNumber(1, 6))
    RationalNumber(1, 2, 1)
    >>> RationalNumber(1, 2).add(RealNumber(0.25))
    RealNumber(0.75)
"""

import logging

from .names import *
from .exceptions import (
    MathError,
    DivisionByZeroError,
    UnknownOperandError,
    UnknownOperatorError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from .mutable import Mutable, mutator
from .functions import CalcUtil, Denominator
from .model.number import (
    Number,
    ComparableNumber,
    NumberKind,
    IntegerNumber,
    RationalNumber,
    RealNumber,
    ComplexNumber,
    NumberWrapper,
    NumberOperations,
)
from .model.vector import VectorInterface, Vector
from .model.matrix import MatrixInterface, Matrix, MatrixOperations

logging.getLogger(__name__).addHandler(logging.NullHandler())


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)

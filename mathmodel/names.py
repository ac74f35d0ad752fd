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
"""Static strings and defaults used in the mathmodel package

    Exactness

        DEFAULT_DECIMAL_THRESHOLD = 8

    Dual dispatch

        IMMUTABLE_SUFFIX = '_'

    Number operators

        ADD = '+'

        SUBTRACT = '-'

        MULTIPLY = '*'

        DIVIDE = '/'

        NEGATE = 'neg'

        SQUARE = 'sqr'

        SQUARE_ROOT = 'sqrt'

        NORM_SQUARED = 'norm2'

    Matrix operators

        TRANSPOSE = 'T'
"""

# Exactness
# number of decimal digits a root may deviate from an integer and still be
# taken as exact
DEFAULT_DECIMAL_THRESHOLD = 8

# Dual dispatch
IMMUTABLE_SUFFIX = '_'

# Number operators
ADD = '+'
SUBTRACT = '-'
MULTIPLY = '*'
DIVIDE = '/'
NEGATE = 'neg'
SQUARE = 'sqr'
SQUARE_ROOT = 'sqrt'
NORM_SQUARED = 'norm2'

# Matrix operators
TRANSPOSE = 'T'

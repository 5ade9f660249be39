from typing import Union, Literal

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]

EULER_ORDERS = Literal['xyz', 'xzy', 'yzx', 'yxz', 'zxy', 'zyx', 'xyx', 'xzx', 'yzy', 'yxy', 'zxz', 'zyz']

SEQUENCE_LIKE = Union[int, EULER_ORDERS, str]
"""
Anything that may name an Euler sequence: an EulerSequence member, its integer ordinal, or its axis order string
"""

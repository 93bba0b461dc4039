from typing import Union
from datetime import datetime

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]
F_SCALAR_OR_ARRAY = Union[float, DOUBLE_ARRAY]

DatetimeLike = datetime

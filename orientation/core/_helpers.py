# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from orientation._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE,
                           size: int | None = None,
                           second_last_axis_length: int | None = None,
                           last_axis_length: int | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if size is not None and int(np.prod(in_shape)) != size:
        raise ValueError(f'The input must contain exactly {size} elements')

    if second_last_axis_length is not None:
        if len(in_shape) < 2 or in_shape[-2] != second_last_axis_length:
            raise ValueError(f'The length of the second to last axis must be {second_last_axis_length}')

    if last_axis_length is not None and in_shape[-1] != last_axis_length:
        raise ValueError(f'The length of the last axis must be {last_axis_length}')

    # ensure the value is a new float array and break mutability
    return np.array(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, size=4).ravel()


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, size=3).ravel()


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, size=9, second_last_axis_length=3, last_axis_length=3).reshape(3, 3)

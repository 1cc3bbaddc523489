import warnings

import numpy as np


def max_abs_arrays(*arrays, initial=1.0):
    """
    Get the largest absolute value among several arrays.
    """
    return max(map(lambda array: np.max(np.abs(array[np.isfinite(array)]), initial=initial), arrays))


def get_arrays_tol(*arrays):
    """
    Get a relative tolerance for a set of arrays.

    Parameters
    ----------
    *arrays: tuple
        Set of `arrays` to get the tolerance for.

    Returns
    -------
    float
        Relative tolerance for the set of arrays.
    """
    if len(arrays) == 0:
        raise ValueError('At least one array must be provided.')
    size = max(array.size for array in arrays)
    return 10.0 * np.finfo(float).eps * max(size, 1.0) * max_abs_arrays(*arrays)


def process_1d(array, name, size=None):
    """
    Preprocess a one-dimensional array.

    Parameters
    ----------
    array : array_like
        Array to be converted into a one-dimensional floating-point array.
    name : str
        Name of the array, used in the warning and error messages.
    size : int, optional
        Expected number of elements of the array.

    Returns
    -------
    numpy.ndarray, shape (size,)
        Preprocessed array. The input is never modified.

    Raises
    ------
    ValueError
        The array does not have `size` elements.
    """
    array = np.atleast_1d(np.squeeze(array)).astype(float)
    if array.ndim != 1:
        warnings.warn(f'{name} has {array.ndim} dimensions; it will be flattened', RuntimeWarning, 3)
        array = array.flatten()
    if size is not None and array.size != size:
        raise ValueError(f'{name} has {array.size} elements ({size} expected)')
    return array
